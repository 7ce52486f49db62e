"""Line-oriented prompting that retries until input parses or the user quits.

A prompt never raises for bad input or a failed read.  It returns one of
:class:`Valid`, :class:`Quit` or :class:`IoFailure` and the caller decides
what each means for the program.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

    from tempconv.output.rich_output import RichOutput

logger = logging.getLogger(__name__)

T = TypeVar("T")

QUIT_KEYWORD = "quit"
QUIT_MESSAGE = "Exiting program."


@dataclasses.dataclass(frozen=True)
class Valid(Generic[T]):
    """The user entered something that parsed."""

    value: T


@dataclasses.dataclass(frozen=True)
class Quit:
    """The user typed the quit keyword."""


@dataclasses.dataclass(frozen=True)
class IoFailure:
    """Reading from the input stream failed or hit end of input."""

    error: Exception


def read_sanitized_line(stream: TextIO) -> str:
    """Read one line from *stream*, trimmed and lower-cased.

    Raises :class:`EOFError` when the stream has no more lines.
    """
    line = stream.readline()
    if not line:
        raise EOFError("end of input reached")
    return line.strip().lower()


def ask(
    output: RichOutput,
    stream: TextIO,
    *,
    prompt: str,
    error: str,
    parse: Callable[[str], T],
) -> Valid[T] | Quit | IoFailure:
    """Prompt until a line parses with *parse*, the user quits, or input fails.

    *parse* signals rejection by raising :class:`ValueError`; *error* is then
    printed and the question asked again.
    """
    while True:
        output.prompt(prompt)
        try:
            text = read_sanitized_line(stream)
        except (EOFError, OSError, ValueError) as exc:
            logger.debug("Input read failed: %s", exc)
            return IoFailure(exc)

        if text == QUIT_KEYWORD:
            output.notice(QUIT_MESSAGE)
            return Quit()

        try:
            value = parse(text)
        except ValueError:
            logger.debug("Rejected input %r", text)
            output.error(error)
            continue
        return Valid(value)
