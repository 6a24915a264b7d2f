"""Domain models for cmdtree.

The frozen tree is an arena: every :class:`ClassNode` lives at a fixed
index of :attr:`CommandTree.nodes` and refers to its parent and
children by that integer *handle*.  All models are frozen dataclasses;
only the :class:`~cmdtree.core.commander.Commander` cursor mutates.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from cmdtree.core.handler import ExclusiveHandler

ROOT: int = 0
"""Handle of the root class in every :class:`CommandTree`."""


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Action:
    """A leaf command bound to a handler.

    Equality compares ``name`` and ``help`` only; handlers are not
    comparable.
    """

    name: str
    """Lower-cased action name."""

    help: str
    """One-line description shown in listings."""

    handler: ExclusiveHandler = field(compare=False, repr=False)
    """Shared exclusive-access cell wrapping the user callable."""

    def call(self, arguments: Sequence[str]) -> None:
        """Invoke the handler with *arguments*."""
        self.handler(arguments)


@dataclass(frozen=True, slots=True)
class ClassNode:
    """A namespace holding child classes and actions."""

    handle: int
    name: str
    help: str
    parent: int | None
    """Handle of the structural parent, ``None`` for the root."""

    classes: tuple[int, ...] = ()
    """Child class handles in declaration order."""

    actions: tuple[Action, ...] = ()
    """Actions in declaration order."""


@dataclass(frozen=True, slots=True)
class CommandTree:
    """Immutable arena of class nodes; ``nodes[ROOT]`` is the root."""

    nodes: tuple[ClassNode, ...]

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root(self) -> ClassNode:
        return self.nodes[ROOT]

    def node(self, handle: int) -> ClassNode:
        return self.nodes[handle]

    def children(self, handle: int) -> Iterator[ClassNode]:
        """Yield the child classes of *handle* in order."""
        for child in self.nodes[handle].classes:
            yield self.nodes[child]

    def find_class(self, handle: int, name: str) -> int | None:
        """Return the handle of child class *name* under *handle*, if any."""
        for child in self.children(handle):
            if child.name == name:
                return child.handle
        return None

    def find_action(self, handle: int, name: str) -> Action | None:
        """Return action *name* of *handle*, if any."""
        for action in self.nodes[handle].actions:
            if action.name == name:
                return action
        return None

    def lineage(self, handle: int) -> list[ClassNode]:
        """Return the nodes from the root down to *handle* inclusive."""
        chain: list[ClassNode] = []
        cursor: int | None = handle
        while cursor is not None:
            node = self.nodes[cursor]
            chain.append(node)
            cursor = node.parent
        chain.reverse()
        return chain

    def path_of(self, handle: int, separator: str = ".") -> str:
        """Join the lineage names of *handle* with *separator*."""
        return separator.join(node.name for node in self.lineage(handle))


# ---------------------------------------------------------------------------
# Line results
# ---------------------------------------------------------------------------

class ErrorKind(enum.Enum):
    """Why a line could not be resolved."""

    UNRECOGNIZED_TOKEN = "unrecognized_token"
    ATTEMPT_TO_ASCEND_PAST_ROOT = "attempt_to_ascend_past_root"
    REENTRANT_ACTION_INVOCATION = "reentrant_action_invocation"


@dataclass(frozen=True, slots=True)
class Continue:
    """Nothing moved and nothing ran (blank line or help)."""


@dataclass(frozen=True, slots=True)
class Moved:
    """The line was pure navigation; *path* is the new position."""

    path: str


@dataclass(frozen=True, slots=True)
class ActionDone:
    """Action *action* was found and invoked."""

    action: str


@dataclass(frozen=True, slots=True)
class Error:
    """The line failed to resolve; the cursor was left untouched."""

    kind: ErrorKind
    token: str | None = None
    """The offending token, when one can be named."""


@dataclass(frozen=True, slots=True)
class Exit:
    """An exit keyword was read; the caller should stop its loop."""


LineResult = Continue | Moved | ActionDone | Error | Exit
