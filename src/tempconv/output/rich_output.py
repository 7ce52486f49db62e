from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

if TYPE_CHECKING:
    from rich.console import Console


class RichOutput:
    """Rich-based terminal output helpers for *tempconv*.

    Messages are printed as :class:`rich.text.Text` so that brackets in
    equations or error text are never read as console markup.
    """

    def __init__(self, console: Console) -> None:
        self._con = console

    def _print(self, text: Text) -> None:
        self._con.print(text, highlight=False, soft_wrap=True)

    # ------------------------------------------------------------------
    # Interactive prompts
    # ------------------------------------------------------------------

    def header(self, title: str) -> None:
        """Print a bold cyan section header preceded by a blank line."""
        self._print(Text("\n") + Text(title, style="bold cyan"))

    def prompt(self, message: str, *, quit_word: str = "QUIT") -> None:
        """Print *message* along with the reminder that *quit_word* exits."""
        self._print(
            Text.assemble(
                '\nType "',
                (quit_word, "bold yellow"),
                '" to end the program or\n',
                message,
            )
        )

    # ------------------------------------------------------------------
    # Result helpers
    # ------------------------------------------------------------------

    def success(self, message: str) -> None:
        """Print a bold green line."""
        self._print(Text(message, style="bold green"))

    def notice(self, message: str) -> None:
        """Print a bold yellow line."""
        self._print(Text(message, style="bold yellow"))

    def error(self, message: str) -> None:
        """Print a bold red line."""
        self._print(Text(message, style="bold red"))

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._print(Text(message))
