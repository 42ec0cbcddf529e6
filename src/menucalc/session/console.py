"""Console I/O glue: prompts, screen clearing and operand tokens."""

from dataclasses import dataclass, field
from typing import Callable

import click
import typer

from menucalc.operations.registry import list_operations


class OperandError(ValueError):
    """Operand text that is not a number."""


def _read_line(prompt: str) -> str:
    return input(prompt)


@dataclass
class Console:
    """Line-oriented terminal access.

    `read_line` raises EOFError when input is exhausted.
    """

    read_line: Callable[[str], str] = _read_line
    write: Callable[[str], None] = typer.echo
    clear: Callable[[], None] = click.clear


@dataclass
class OperandReader:
    """Buffers whitespace-separated operand tokens across input lines."""

    console: Console
    pending: list[str] = field(default_factory=list)

    def feed(self, text: str) -> None:
        self.pending.extend(text.split())

    def reset(self) -> None:
        self.pending.clear()

    def read(self, count: int, prompt: str) -> list[float]:
        """Return the next `count` operands, prompting while short.

        Raises:
            OperandError: If a token is not a number.
            EOFError: If input ends before enough tokens arrive.
        """
        while len(self.pending) < count:
            self.feed(self.console.read_line(prompt))

        tokens = self.pending[:count]
        del self.pending[:count]
        return parse_operands(tokens)


def parse_operands(tokens: list[str]) -> list[float]:
    operands = []
    for token in tokens:
        try:
            operands.append(float(token))
        except ValueError:
            raise OperandError(f"Invalid number '{token}'!") from None
    return operands


def render_menu() -> str:
    lines = ["=== Simple OOP Calculator ===", "Available operations:"]
    for op in list_operations():
        lines.append(f"{op.selector} - {op.name.lower()}")
    lines.append("q - quit")
    return "\n".join(lines)
