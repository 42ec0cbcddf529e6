"""Operation descriptors and the selector registry."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Literal, Mapping, Optional

from menucalc.operations import arithmetic

Arity = Literal["unary", "binary"]

# Selectors that end the interactive loop
QUIT_SELECTORS = frozenset({"q", "Q"})


@dataclass(frozen=True)
class Operation:
    """A named calculator operation bound to a one-character selector."""

    selector: str
    name: str
    arity: Arity
    compute: Callable[..., float]

    @property
    def is_binary(self) -> bool:
        return self.arity == "binary"

    @property
    def operand_count(self) -> int:
        return 2 if self.is_binary else 1

    def calculate(self, a: float, b: Optional[float] = None) -> float:
        """Run the compute function on one or two operands.

        Raises:
            DomainError: If an operand is outside the operation's domain.
            TypeError: If the operand count does not match the arity.
        """
        if self.is_binary:
            if b is None:
                raise TypeError(f"{self.name} expects 2 operands, got 1")
            return self.compute(a, b)

        if b is not None:
            raise TypeError(f"{self.name} expects 1 operand, got 2")
        return self.compute(a)


_OPERATIONS = [
    Operation("+", "Addition", "binary", arithmetic.add),
    Operation("-", "Subtraction", "binary", arithmetic.subtract),
    Operation("*", "Multiplication", "binary", arithmetic.multiply),
    Operation("/", "Division", "binary", arithmetic.divide),
    Operation("%", "Modulus", "binary", arithmetic.modulus),
    Operation("^", "Power", "binary", arithmetic.power),
    Operation("a", "Absolute value", "unary", arithmetic.absolute),
    Operation("s", "Square", "unary", arithmetic.square),
    Operation("r", "Square root", "unary", arithmetic.square_root),
    Operation("l", "Natural logarithm", "unary", arithmetic.natural_log),
    Operation("L", "Logarithm base 10", "unary", arithmetic.log10),
    Operation("f", "Factorial", "unary", arithmetic.factorial),
]

OPERATIONS: Mapping[str, Operation] = MappingProxyType(
    {op.selector: op for op in _OPERATIONS}
)


def get_operation(selector: str) -> Optional[Operation]:
    """Look up an operation by selector. Returns None if unknown."""
    return OPERATIONS.get(selector)


def list_operations() -> list[Operation]:
    """Return all operations in menu order."""
    return list(OPERATIONS.values())
