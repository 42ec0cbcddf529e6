"""The interactive read-compute-print loop."""

from typing import Optional

from menucalc.config import DisplayConfig
from menucalc.observability import log_event
from menucalc.operations.evaluate import evaluate, format_number
from menucalc.operations.registry import get_operation
from menucalc.session.console import Console, OperandError, OperandReader, render_menu
from menucalc.session.routing import route_after_compute, route_after_selector
from menucalc.session.state import SessionState

SELECTOR_PROMPT = "Enter operation: "
BINARY_PROMPT = "Enter two numbers: "
UNARY_PROMPT = "Enter a number: "
PAUSE_PROMPT = "\nPress Enter to continue..."


class Session:
    """Menu loop bound to a console and display settings."""

    def __init__(
        self,
        console: Optional[Console] = None,
        display: Optional[DisplayConfig] = None,
    ) -> None:
        self.console = console or Console()
        self.display = display or DisplayConfig()
        self.operands = OperandReader(self.console)

    def run(self) -> int:
        """Run rounds until the user quits or input ends.

        Returns:
            Number of completed rounds.
        """
        rounds = 0
        log_event("session", "started", "info")
        try:
            while self.run_round():
                rounds += 1
        except EOFError:
            log_event("session", "end of input", "info", rounds=rounds)
            self.console.write("")
            return rounds

        log_event("session", "quit", "info", rounds=rounds)
        return rounds

    def run_round(self) -> bool:
        """Run one menu round. Returns False when the user quits."""
        state: SessionState = {}

        self._clear()
        self.console.write(render_menu())
        state.update(self._read_selector())

        match route_after_selector(state):
            case "quit":
                self.console.write("Goodbye!")
                return False
            case "unknown":
                log_event(
                    "session", "unknown selector", "info", selector=state["selector"]
                )
                self.console.write("Unknown operation! Please try again.")
                self._pause()
                return True

        self._clear()
        state.update(self._read_operands(state))
        if not state.get("error"):
            state.update(self._compute(state))

        self._clear()
        match route_after_compute(state):
            case "result":
                value = format_number(state["value"], self.display.precision)
                self.console.write(f"Result: {value}")
            case "error":
                self.console.write(f"Error: {state['error']}")

        self._pause()
        return True

    def _read_selector(self) -> dict:
        """Read the first non-blank character of a line as the selector.

        Text after the selector stays buffered as operand input.
        """
        self.operands.reset()
        line = ""
        while not line:
            line = self.console.read_line(SELECTOR_PROMPT).strip()

        selector = line[0]
        self.operands.feed(line[1:])
        return {"selector": selector, "operation": get_operation(selector)}

    def _read_operands(self, state: SessionState) -> dict:
        operation = state["operation"]
        prompt = BINARY_PROMPT if operation.is_binary else UNARY_PROMPT
        try:
            operands = self.operands.read(operation.operand_count, prompt)
        except OperandError as e:
            log_event("session", "bad operand", "info", error=e)
            return {"error": str(e)}
        return {"operands": operands}

    def _compute(self, state: SessionState) -> dict:
        result = evaluate(state["selector"], state["operands"])
        if result.ok:
            return {"value": result.value}
        return {"error": result.error}

    def _clear(self) -> None:
        if self.display.clear_screen:
            self.console.clear()

    def _pause(self) -> None:
        if self.display.pause:
            self.console.read_line(PAUSE_PROMPT)


def run_session(
    console: Optional[Console] = None,
    display: Optional[DisplayConfig] = None,
) -> int:
    """Run an interactive session. Returns the number of completed rounds."""
    return Session(console, display).run()
