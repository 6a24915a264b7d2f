"""Exclusive-access wrapper around action handlers.

A frozen tree may refer to the same handler from several positions
(aliased classes are copied on freeze, their actions are not).  The
wrapper guarantees a handler never runs twice at once: a nested call
made while the handler is still executing fails fast with
:class:`~cmdtree.exceptions.ReentrantActionError` instead of
re-entering user code.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from cmdtree.exceptions import ReentrantActionError

Handler = Callable[[Sequence[str]], object]
"""User callable receiving the residual tokens of a line."""


class ExclusiveHandler:
    """Callable cell that refuses reentrant invocation.

    Parameters
    ----------
    func:
        The user handler.
    label:
        Name used in error messages (normally the action name).
    """

    __slots__ = ("_func", "_label", "_busy")

    def __init__(self, func: Handler, label: str) -> None:
        if not callable(func):
            raise TypeError(f"Handler for '{label}' is not callable.")
        self._func: Handler = func
        self._label: str = label
        self._busy: bool = False

    @property
    def busy(self) -> bool:
        """Whether the handler is currently executing."""
        return self._busy

    def __call__(self, arguments: Sequence[str]) -> None:
        if self._busy:
            raise ReentrantActionError(
                f"Action '{self._label}' is already running.",
                hint="An action cannot invoke itself through the commander.",
            )
        self._busy = True
        try:
            self._func(list(arguments))
        finally:
            self._busy = False

    def __repr__(self) -> str:
        return f"ExclusiveHandler({self._label!r}, busy={self._busy})"
