"""Routing functions for the interactive loop."""

from menucalc.operations.registry import QUIT_SELECTORS
from menucalc.session.state import SessionState


def route_after_selector(state: SessionState) -> str:
    """Route after the selector is read."""
    selector = state.get("selector")
    if selector in QUIT_SELECTORS:
        return "quit"
    if state.get("operation") is None:
        return "unknown"
    return "operands"


def route_after_compute(state: SessionState) -> str:
    """Route after operands are read and the operation has run."""
    if state.get("error"):
        return "error"
    else:
        return "result"
