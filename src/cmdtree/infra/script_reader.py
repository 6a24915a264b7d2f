"""Non-interactive line source backed by an iterable or a file."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from cmdtree.exceptions import ScriptReadError


class ScriptLineReader:
    """Feed pre-recorded lines to the read loop.

    Parameters
    ----------
    lines:
        Lines to return in order; trailing newlines are stripped.
    echo:
        Optional callable receiving ``prompt + line`` for every line
        read, so a script run leaves a readable transcript.
    """

    def __init__(
        self,
        lines: Iterable[str],
        *,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._echo = echo
        self._prompt: str = ""

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        echo: Callable[[str], None] | None = None,
    ) -> ScriptLineReader:
        """Read every line of the UTF-8 file at *path* up front.

        Raises
        ------
        ScriptReadError
            If the file is not valid UTF-8.
        OSError
            If the file cannot be opened.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ScriptReadError(
                f"Script {path} is not valid UTF-8: {exc.reason}",
                hint="Save the script as UTF-8 text.",
            ) from exc
        return cls(text.splitlines(), echo=echo)

    @property
    def prompt(self) -> str:
        return self._prompt

    def set_prompt(self, text: str) -> None:
        self._prompt = text

    def read_line(self) -> str | None:
        line = next(self._lines, None)
        if line is None:
            return None
        line = line.rstrip("\r\n")
        if self._echo is not None:
            self._echo(f"{self._prompt}{line}")
        return line
