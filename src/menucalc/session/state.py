"""SessionState schema for one round of the interactive loop."""

from typing import Optional, TypedDict

from menucalc.operations.registry import Operation


class SessionState(TypedDict, total=False):
    """Transient state of a single menu round."""

    # === Input ===
    selector: str
    operation: Optional[Operation]  # None for unknown selectors

    # === Operands ===
    operands: list[float]

    # === Outcome ===
    value: float
    error: Optional[str]
