"""Operation registry and dispatch."""

from menucalc.operations.arithmetic import DomainError
from menucalc.operations.evaluate import evaluate, format_number
from menucalc.operations.registry import (
    OPERATIONS,
    QUIT_SELECTORS,
    Operation,
    get_operation,
    list_operations,
)
from menucalc.operations.schemas import CalculationResult

__all__ = [
    "OPERATIONS",
    "QUIT_SELECTORS",
    "CalculationResult",
    "DomainError",
    "Operation",
    "evaluate",
    "format_number",
    "get_operation",
    "list_operations",
]
