"""Protocols (interfaces) consumed by the core layer.

The core never touches a terminal.  It writes feedback to a
:class:`TextSink` and the read loop pulls input from a
:class:`LineReader`; both are satisfied structurally (no explicit
inheritance required).
"""

from __future__ import annotations

from typing import Protocol


class TextSink(Protocol):
    """Anything with a text ``write`` method (``sys.stdout``, ``io.StringIO``)."""

    def write(self, text: str, /) -> object:
        ...  # pragma: no cover


class LineReader(Protocol):
    """Contract for interactive or scripted line sources."""

    def set_prompt(self, text: str) -> None:
        """Use *text* as the prompt for the next :meth:`read_line`."""
        ...  # pragma: no cover

    def read_line(self) -> str | None:
        """Block until a line is available.

        Returns
        -------
        str | None
            The line without its trailing newline, or ``None`` at end
            of input.

        Raises
        ------
        KeyboardInterrupt
            When the user cancels the current line.
        """
        ...  # pragma: no cover


class NullSink:
    """A :class:`TextSink` that discards everything."""

    def write(self, text: str, /) -> int:
        return len(text)
