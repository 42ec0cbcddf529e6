"""Selector dispatch and result formatting."""

import math
from typing import Sequence

from menucalc.observability import log_event, traced
from menucalc.operations.arithmetic import DomainError
from menucalc.operations.registry import get_operation
from menucalc.operations.schemas import CalculationResult

DEFAULT_PRECISION = 6


@traced("evaluate")
def evaluate(selector: str, operands: Sequence[float]) -> CalculationResult:
    """Dispatch a selector to its operation and capture the outcome.

    Unknown selectors, operand count mismatches and domain errors are
    reported in the result's error field instead of being raised.
    """
    operands = [float(x) for x in operands]
    operation = get_operation(selector)
    if operation is None:
        log_event("evaluate", "unknown selector", "info", selector=selector)
        return CalculationResult(
            selector=selector,
            operands=operands,
            error="Unknown operation!",
        )

    result = CalculationResult(
        selector=selector, operation=operation.name, operands=operands
    )
    if len(operands) != operation.operand_count:
        result.error = (
            f"{operation.name} expects {operation.operand_count} "
            f"operand{'s' if operation.operand_count > 1 else ''}, got {len(operands)}"
        )
        return result

    try:
        result.value = operation.calculate(*operands)
    except DomainError as e:
        log_event("evaluate", "domain error", "info", operation=operation.name)
        result.error = str(e)
    return result


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Render a result with `precision` significant digits.

    Follows %g rules: trailing zeros are dropped and very large or small
    magnitudes switch to exponent notation.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = f"{value:.{precision}g}"
    # Avoid printing "-0"
    if text == "-0":
        return "0"
    return text
