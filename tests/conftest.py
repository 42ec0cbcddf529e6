"""Pytest configuration and fixtures."""

import pytest

from menucalc.observability import DEFAULT_LOG_LEVEL, set_log_level
from menucalc.session.console import Console

ENV_VARS = (
    "MENUCALC_CLEAR_SCREEN",
    "MENUCALC_PAUSE",
    "MENUCALC_PRECISION",
    "MENUCALC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep user environment and log level out of tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    set_log_level(DEFAULT_LOG_LEVEL)


class ScriptedConsole(Console):
    """Console fed from a list of lines, recording prompts and output."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []
        self.output = []
        self.clears = 0
        super().__init__(
            read_line=self._read_line,
            write=self.output.append,
            clear=self._clear,
        )

    def _read_line(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def _clear(self):
        self.clears += 1

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture
def scripted_console():
    """Factory for consoles that replay the given input lines."""
    return ScriptedConsole
