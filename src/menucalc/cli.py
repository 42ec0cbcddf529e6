"""CLI entry point using Typer."""

from pathlib import Path
from typing import List, Optional

import typer

from menucalc.config import CONFIG_PATH, DEFAULT_CONFIG_YAML, MenucalcConfig, load_config
from menucalc.observability import set_log_level
from menucalc.operations import evaluate, format_number, get_operation, list_operations
from menucalc.session import run_session

app = typer.Typer(
    name="menucalc",
    help="Menu-driven console calculator",
)


def _load(log_level: Optional[str]) -> MenucalcConfig:
    """Load config and apply the logging threshold."""
    try:
        config = load_config()
        set_log_level(log_level or config.logging.level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    return config


@app.command()
def run(
    no_clear: bool = typer.Option(
        False, "--no-clear", help="Don't clear the screen between rounds"
    ),
    no_pause: bool = typer.Option(
        False, "--no-pause", help="Don't wait for Enter after each result"
    ),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=1, help="Significant digits in results"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Stderr log threshold (debug, info, warning, error)"
    ),
) -> None:
    """Start the interactive calculator."""
    config = _load(log_level)
    display = config.display
    if no_clear:
        display.clear_screen = False
    if no_pause:
        display.pause = False
    if precision is not None:
        display.precision = precision

    try:
        run_session(display=display)
    except KeyboardInterrupt:
        typer.echo("\nGoodbye!")
        raise typer.Exit(130)


@app.command()
def calc(
    selector: str = typer.Argument(..., help="Operation selector, e.g. + or r"),
    operands: List[float] = typer.Argument(..., help="One or two numbers"),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=1, help="Significant digits in the result"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Stderr log threshold (debug, info, warning, error)"
    ),
) -> None:
    """Evaluate a single operation and exit.

    Use -- before negative operands: menucalc calc -- - 5 -3
    """
    config = _load(log_level)
    if precision is None:
        precision = config.display.precision

    result = evaluate(selector, operands)

    if json_output:
        typer.echo(result.model_dump_json())
    elif result.ok:
        typer.echo(format_number(result.value, precision))
    else:
        typer.echo(f"Error: {result.error}", err=True)

    if not result.ok:
        operation = get_operation(selector)
        if operation is None or len(operands) != operation.operand_count:
            raise typer.Exit(2)
        raise typer.Exit(1)


@app.command()
def ops() -> None:
    """List available operations."""
    for op in list_operations():
        arity = "a, b" if op.is_binary else "a"
        typer.echo(f"  {op.selector}  {op.name:<20} ({arity})")
    typer.echo("  q  Quit")


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing config file"
    ),
) -> None:
    """Write a default .menucalc.yml in the current directory."""
    config_file = Path(CONFIG_PATH)

    if config_file.exists() and not force:
        overwrite = typer.confirm(
            f"{config_file} already exists. Overwrite?", default=False
        )
        if not overwrite:
            typer.echo("Skipping config file.")
            return

    config_file.write_text(DEFAULT_CONFIG_YAML)
    typer.echo(f"Created: {config_file}")


if __name__ == "__main__":
    app()
