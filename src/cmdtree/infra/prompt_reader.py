"""Interactive line source built on questionary / prompt_toolkit.

The prompt shows the current path in bright cyan and offers tab
completion of class, action and keyword names through
:meth:`Commander.complete <cmdtree.core.commander.Commander.complete>`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from cmdtree.exceptions import EnvironmentError, missing_dependency_hint

Completions = Callable[[str], list[str]]
"""Maps the text before the cursor to candidate words."""

PROMPT_STYLE: list[tuple[str, str]] = [
    ("qmark", ""),
    ("question", "fg:ansibrightcyan bold"),
    ("answer", ""),
]


def _import_questionary() -> Any:
    """Import questionary lazily for the interactive prompt."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed.",
            hint=missing_dependency_hint("questionary"),
        ) from exc
    return questionary


def _build_completer(completions: Completions) -> Any:
    """Adapt *completions* to a prompt_toolkit ``Completer``."""
    try:
        from prompt_toolkit.completion import Completer, Completion
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "prompt_toolkit is not installed.",
            hint=missing_dependency_hint("prompt_toolkit"),
        ) from exc

    class _TreeCompleter(Completer):
        def get_completions(self, document: Any, complete_event: Any) -> Iterator[Any]:
            before = document.text_before_cursor
            partial = document.get_word_before_cursor(WORD=True)
            for word in completions(before):
                yield Completion(word, start_position=-len(partial))

    return _TreeCompleter()


class PromptLineReader:
    """Read lines from the terminal with a coloured prompt.

    Parameters
    ----------
    completions:
        Optional completion source, normally ``commander.complete``.
    """

    def __init__(self, completions: Completions | None = None) -> None:
        self._questionary: Any = _import_questionary()
        self._completer: Any = (
            _build_completer(completions) if completions is not None else None
        )
        self._prompt: str = ""

    def set_prompt(self, text: str) -> None:
        self._prompt = text

    def read_line(self) -> str | None:
        """Prompt once; ``None`` on end of input (Ctrl+D).

        ``KeyboardInterrupt`` (Ctrl+C) propagates so the caller can
        discard the line.
        """
        questionary = self._questionary
        question = questionary.text(
            self._prompt.rstrip(),
            qmark="",
            style=questionary.Style(PROMPT_STYLE),
            completer=self._completer,
        )
        try:
            answer = question.unsafe_ask()
        except EOFError:
            return None
        return answer
