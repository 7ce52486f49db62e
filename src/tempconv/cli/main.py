"""CLI entry-point: one interactive temperature conversion."""

from __future__ import annotations

import dataclasses
import logging
import sys
from enum import StrEnum
from typing import TYPE_CHECKING

import click

from tempconv.cli.prompt import IoFailure, Quit, ask
from tempconv.models.config import AppSettings
from tempconv.models.temperature import (
    Temperature,
    TemperatureUnit,
    parse_unit,
    parse_value,
)
from tempconv.output.equation import format_equation
from tempconv.output.formatter import OutputFormatter

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)

HEADER = "--- Temperature Conversion ---"
UNIT_PROMPT = "Enter C to convert to Fahrenheit or F to convert to Celsius"
UNIT_ERROR = "Invalid input. Please enter 'C' or 'F'."
VALUE_PROMPTS: dict[TemperatureUnit, str] = {
    TemperatureUnit.CELSIUS: "Enter a number to convert Celsius to Fahrenheit.",
    TemperatureUnit.FAHRENHEIT: "Enter a number to convert Fahrenheit to Celsius.",
}
VALUE_ERROR = "Invalid temperature. Please enter a number."
FINISHED_MESSAGE = "\nProgram finished normally."

# ---------------------------------------------------------------------------
# Conversion cycle
# ---------------------------------------------------------------------------


class CycleOutcome(StrEnum):
    """How a conversion cycle ended."""

    DONE = "done"
    QUIT = "quit"
    IO_FAILURE = "io_failure"


@dataclasses.dataclass(frozen=True)
class CycleResult:
    outcome: CycleOutcome
    converted: Temperature | None = None
    error: Exception | None = None


def run_conversion(formatter: OutputFormatter, stream: TextIO) -> CycleResult:
    """Ask for a unit and a value on *stream*, then print the conversion."""
    out = formatter.rich
    out.header(HEADER)

    unit = ask(out, stream, prompt=UNIT_PROMPT, error=UNIT_ERROR, parse=parse_unit)
    if isinstance(unit, Quit):
        return CycleResult(CycleOutcome.QUIT)
    if isinstance(unit, IoFailure):
        return CycleResult(CycleOutcome.IO_FAILURE, error=unit.error)
    logger.debug("Source unit: %s", unit.value.name)

    prompt = VALUE_PROMPTS[unit.value]
    value = ask(out, stream, prompt=prompt, error=VALUE_ERROR, parse=parse_value)
    if isinstance(value, Quit):
        return CycleResult(CycleOutcome.QUIT)
    if isinstance(value, IoFailure):
        return CycleResult(CycleOutcome.IO_FAILURE, error=value.error)
    logger.debug("Source value: %r", value.value)

    original = Temperature(value=value.value, unit=unit.value)
    converted = original.convert_to(unit.value.other)
    formatter.output_conversion(
        format_equation(original.value, original.unit, converted.value, converted.unit)
    )
    return CycleResult(CycleOutcome.DONE, converted=converted)


# ---------------------------------------------------------------------------
# Click command
# ---------------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """Convert a temperature between Celsius and Fahrenheit.

    Type QUIT at any prompt to exit.
    """
    settings = AppSettings()
    _configure_logging(verbose or settings.verbose)
    formatter = OutputFormatter()

    result = run_conversion(formatter, sys.stdin)
    logger.debug("Conversion cycle ended: %s", result.outcome)

    if result.outcome is CycleOutcome.DONE:
        formatter.rich.info(FINISHED_MESSAGE)
    elif result.outcome is CycleOutcome.IO_FAILURE:
        formatter.output_error(f"Program terminated due to I/O error: {result.error}")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run one conversion cycle."""
    try:
        cli(args=argv, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort as exc:
        # Click wraps Ctrl-C in Abort.
        if isinstance(exc.__cause__ or exc.__context__, KeyboardInterrupt):
            raise SystemExit(130) from None
        raise SystemExit(1) from None
    except SystemExit:
        raise
    except Exception as exc:
        OutputFormatter().output_error(f"{type(exc).__name__}: {exc}")
        raise SystemExit(1) from exc
