"""Interactive menu session."""

from menucalc.session.console import Console, OperandError
from menucalc.session.loop import Session, run_session

__all__ = ["Console", "OperandError", "Session", "run_session"]
