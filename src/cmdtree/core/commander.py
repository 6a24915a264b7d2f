"""The navigator: a cursor over a frozen command tree.

A :class:`Commander` owns the current position and its path string and
turns lines of input into :data:`~cmdtree.core.models.LineResult`
values.  It never reads from a terminal; feed it lines directly, or
hand it to :func:`cmdtree.cli.repl.run` for an interactive loop.

Commit policy
-------------
The cursor only moves when a line resolves to :class:`Moved`.  Lines
that fail, exit, ask for help or invoke an action leave ``current`` and
``path`` untouched, so ``one two greet hi`` runs ``greet`` in
``base.one.two`` without moving the user there.
"""

from __future__ import annotations

import logging

from cmdtree.core import listing
from cmdtree.core.completion import complete
from cmdtree.core.config import Keywords
from cmdtree.core.models import (
    ROOT,
    ActionDone,
    CommandTree,
    Continue,
    Error,
    ErrorKind,
    Exit,
    LineResult,
    Moved,
)
from cmdtree.core.parser import Outcome, resolve, tokenize
from cmdtree.core.protocols import TextSink

logger = logging.getLogger(__name__)


class Commander:
    """Stateful cursor over a :class:`CommandTree`.

    Parameters
    ----------
    tree:
        A frozen tree, normally from :meth:`Builder.into_tree`.
    keywords:
        Navigation keywords; must match those the tree was built with.
    """

    def __init__(self, tree: CommandTree, *, keywords: Keywords | None = None) -> None:
        self._tree: CommandTree = tree
        self._keywords: Keywords = keywords if keywords is not None else Keywords()
        self._current: int = ROOT
        self._path: str = tree.root.name

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def tree(self) -> CommandTree:
        return self._tree

    @property
    def keywords(self) -> Keywords:
        return self._keywords

    @property
    def current(self) -> int:
        """Handle of the class the cursor is on."""
        return self._current

    def path(self) -> str:
        """Return the path of the current class, separated by ``.``."""
        return self._path

    def _commit(self, handle: int) -> None:
        self._current = handle
        self._path = self._tree.path_of(handle, self._keywords.separator)
        logger.debug("Moved to %s", self._path)

    # ------------------------------------------------------------------
    # Line handling
    # ------------------------------------------------------------------

    def parse_line(self, line: str, echo_output: bool, sink: TextSink) -> LineResult:
        """Resolve one line of input against the current position.

        Parameters
        ----------
        line:
            Raw input; split on whitespace.
        echo_output:
            Write listings and diagnostics to *sink*.  Never changes the
            returned result.
        sink:
            Text destination (``sys.stdout``, ``io.StringIO``,
            :class:`~cmdtree.core.protocols.NullSink`).

        Returns
        -------
        LineResult
            :class:`Continue`, :class:`Moved`, :class:`ActionDone`,
            :class:`Exit` or :class:`Error`.
        """
        walk = resolve(self._tree, self._current, tokenize(line), self._keywords)
        outcome = walk.outcome

        if outcome is Outcome.EMPTY:
            return Continue()

        if outcome is Outcome.MOVED:
            self._commit(walk.position)
            return Moved(self._path)

        if outcome is Outcome.EXIT:
            return Exit()

        if outcome is Outcome.HELP:
            if echo_output:
                sink.write(listing.render_listing(self._tree, walk.position, self._keywords))
            return Continue()

        action = walk.action
        if outcome is Outcome.ACTION and action is not None:
            if action.handler.busy:
                logger.debug("Refused reentrant call to %s", action.name)
                if echo_output:
                    sink.write(f"Action '{action.name}' is already running.\n")
                return Error(ErrorKind.REENTRANT_ACTION_INVOCATION, walk.token)
            logger.debug("Invoking %s with %r", action.name, walk.arguments)
            action.call(walk.arguments)
            return ActionDone(action.name)

        reached = self._tree.path_of(walk.position, self._keywords.separator)
        if outcome is Outcome.PAST_ROOT:
            logger.debug("Ascend past root from %s", reached)
            if echo_output:
                sink.write(f"'{reached}' is the root class; there is no parent\n")
            return Error(ErrorKind.ATTEMPT_TO_ASCEND_PAST_ROOT, walk.token)

        token = walk.token or ""
        logger.debug("Unrecognized token %r at %s", token, reached)
        if echo_output:
            sink.write(listing.render_unrecognized(token, reached))
            sink.write(listing.render_listing(self._tree, walk.position, self._keywords))
        return Error(ErrorKind.UNRECOGNIZED_TOKEN, token)

    def complete(self, line: str) -> list[str]:
        """Completions for the last token of *line* from the current class."""
        return complete(self._tree, self._current, line, self._keywords)
