"""menucalc - a menu-driven console calculator."""

__version__ = "0.1.0"
