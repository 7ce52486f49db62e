from __future__ import annotations

from rich.console import Console

from tempconv.output.rich_output import RichOutput


class OutputFormatter:
    """Routes interactive output to stdout and fatal errors to stderr.

    Prompts, validation errors, the quit notice and the result equation all
    go to *console* (stdout by default).  Only :meth:`output_error` writes to
    *error_console* (stderr by default).
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self._rich = RichOutput(console or Console())
        self._error_rich = RichOutput(error_console or Console(stderr=True))

    @property
    def rich(self) -> RichOutput:
        """Return the :class:`RichOutput` used for prompts and messages."""
        return self._rich

    def output_conversion(self, equation: str) -> None:
        """Emit the equation of a finished conversion."""
        self._rich.success(equation)

    def output_error(self, message: str) -> None:
        """Emit a fatal error as red text on stderr."""
        self._error_rich.error(message)
