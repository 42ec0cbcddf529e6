"""Pydantic schemas for calculation results."""

from typing import Optional

from pydantic import BaseModel, Field


class CalculationResult(BaseModel):
    """Outcome of evaluating one selector against its operands."""

    selector: str
    operation: Optional[str] = None  # None when the selector is unknown
    operands: list[float] = Field(default_factory=list)
    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
