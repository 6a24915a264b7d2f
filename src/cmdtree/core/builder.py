"""Two-phase construction of command trees.

Phase one is a plain mutable graph of :class:`ClassDraft` objects,
edited through the fluent :class:`Builder`::

    commander = (
        Builder.default_config("base")
        .begin_class("one", "the first class")
        .begin_class("two", "")
        .add_action("greet", "say hello", lambda args: print("hi", *args))
        .end_class()
        .end_class()
        .into_commander()
    )

Phase two, :meth:`Builder.into_tree`, validates the graph and freezes
it into an immutable arena :class:`~cmdtree.core.models.CommandTree`.

Validation
----------
* Names are lower-cased, non-empty and free of whitespace.
* Names may not shadow a navigation keyword.
* Names may not contain the path separator.
* Class and action names are unique within a class (a class and an
  action may not share a name either).
* No class may contain one of its own ancestors.

A draft attached under several parents with :meth:`Builder.attach_class`
is copied into the arena once per parent; the copies share their
action handlers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cmdtree.core.config import Keywords
from cmdtree.core.handler import ExclusiveHandler, Handler
from cmdtree.core.models import Action, ClassNode, CommandTree
from cmdtree.exceptions import (
    BuilderStateError,
    CyclicTreeError,
    DuplicateNameError,
    InvalidNameError,
)

if TYPE_CHECKING:
    from cmdtree.core.commander import Commander

logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    """Lower-case *name* or raise :class:`InvalidNameError`."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidNameError("Class and action names must not be empty.")
    if len(name.split()) != 1 or name != name.strip():
        raise InvalidNameError(
            f"Invalid name: {name!r}",
            hint="Names are matched against single tokens; remove the whitespace.",
        )
    return name.lower()


def _check_reserved(name: str, keywords: Keywords) -> None:
    if name in keywords.reserved():
        raise InvalidNameError(
            f"'{name}' is a navigation keyword and cannot name a class or action.",
            hint="Pick another name or configure different keywords.",
        )


def _check_separator(name: str, keywords: Keywords) -> None:
    if keywords.separator in name:
        raise InvalidNameError(
            f"'{name}' contains the path separator '{keywords.separator}'.",
            hint="A separator inside a name would make two positions share one path.",
        )


# ---------------------------------------------------------------------------
# Drafts (phase one)
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ActionDraft:
    """An action waiting to be frozen."""

    name: str
    help: str
    handler: ExclusiveHandler


class ClassDraft:
    """A mutable class in the builder graph.

    Parameters
    ----------
    name:
        Class name; stored lower-cased.
    help:
        Description shown in listings.
    """

    def __init__(self, name: str, help: str = "") -> None:
        self.name: str = normalize_name(name)
        self.help: str = help
        self.classes: list[ClassDraft] = []
        self.actions: list[ActionDraft] = []

    def __repr__(self) -> str:
        return (
            f"ClassDraft({self.name!r}, classes={len(self.classes)}, "
            f"actions={len(self.actions)})"
        )

    def names(self) -> list[str]:
        """Names taken in this class, classes first."""
        return [c.name for c in self.classes] + [a.name for a in self.actions]

    def _ensure_free(self, name: str) -> None:
        if name in self.names():
            raise DuplicateNameError(
                f"'{name}' already exists in class '{self.name}'.",
            )

    def add_class(self, draft: ClassDraft) -> ClassDraft:
        """Append *draft* as a child and return it."""
        self._ensure_free(draft.name)
        self.classes.append(draft)
        return draft

    def add_action(self, name: str, help: str, handler: Handler) -> ActionDraft:
        """Append a new action and return its draft."""
        normalized = normalize_name(name)
        self._ensure_free(normalized)
        action = ActionDraft(
            name=normalized,
            help=help,
            handler=ExclusiveHandler(handler, normalized),
        )
        self.actions.append(action)
        return action


# ---------------------------------------------------------------------------
# Fluent builder
# ---------------------------------------------------------------------------

class Builder:
    """Fluent editor over a :class:`ClassDraft` graph.

    Parameters
    ----------
    root_name:
        Name of the root class; it is the first segment of every path.
    help:
        Description of the root class.
    keywords:
        Navigation keywords the tree will be used with.  Defaults to
        :class:`~cmdtree.core.config.Keywords`.
    """

    def __init__(
        self,
        root_name: str,
        help: str = "",
        *,
        keywords: Keywords | None = None,
    ) -> None:
        self._keywords: Keywords = keywords if keywords is not None else Keywords()
        self._root: ClassDraft = ClassDraft(root_name, help)
        _check_separator(self._root.name, self._keywords)
        self._stack: list[ClassDraft] = [self._root]

    @classmethod
    def default_config(cls, root_name: str) -> Builder:
        """Builder with the default keywords and an empty root help."""
        return cls(root_name)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def root(self) -> ClassDraft:
        return self._root

    @property
    def current(self) -> ClassDraft:
        """The draft that the next call edits."""
        return self._stack[-1]

    @property
    def keywords(self) -> Keywords:
        return self._keywords

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def begin_class(self, name: str, help: str = "") -> Builder:
        """Add a child class to the current draft and descend into it."""
        draft = ClassDraft(name, help)
        _check_reserved(draft.name, self._keywords)
        _check_separator(draft.name, self._keywords)
        self.current.add_class(draft)
        self._stack.append(draft)
        return self

    def end_class(self) -> Builder:
        """Return to the parent of the current draft."""
        if len(self._stack) == 1:
            raise BuilderStateError(
                "end_class() called at the root class.",
                hint="Every end_class() must match a begin_class().",
            )
        self._stack.pop()
        return self

    def add_action(self, name: str, help: str, handler: Handler) -> Builder:
        """Add an action to the current draft."""
        normalized = normalize_name(name)
        _check_reserved(normalized, self._keywords)
        _check_separator(normalized, self._keywords)
        self.current.add_action(name, help, handler)
        return self

    def attach_class(self, draft: ClassDraft) -> Builder:
        """Alias an existing *draft* as a child of the current draft.

        The builder stays on the current draft.  Cycles introduced this
        way are reported by :meth:`into_tree`.
        """
        _check_reserved(draft.name, self._keywords)
        _check_separator(draft.name, self._keywords)
        self.current.add_class(draft)
        return self

    # ------------------------------------------------------------------
    # Freezing (phase two)
    # ------------------------------------------------------------------

    def into_tree(self) -> CommandTree:
        """Validate the draft graph and freeze it into a :class:`CommandTree`.

        Raises
        ------
        InvalidNameError
            If a draft created outside the builder uses a keyword.
        DuplicateNameError
            If a class holds two entries with the same name.
        CyclicTreeError
            If a class is reachable from itself.
        """
        slots: list[ClassNode | None] = []
        self._freeze(self._root, None, slots, [])
        nodes = tuple(node for node in slots if node is not None)
        logger.debug("Froze tree '%s' with %d classes", self._root.name, len(nodes))
        return CommandTree(nodes=nodes)

    def into_commander(self) -> Commander:
        """Freeze the tree and wrap it in a :class:`~cmdtree.core.commander.Commander`."""
        from cmdtree.core.commander import Commander

        return Commander(self.into_tree(), keywords=self._keywords)

    def _freeze(
        self,
        draft: ClassDraft,
        parent: int | None,
        slots: list[ClassNode | None],
        lineage: list[ClassDraft],
    ) -> int:
        """Depth-first copy of *draft* into *slots*; returns its handle."""
        if any(ancestor is draft for ancestor in lineage):
            chain = ".".join(d.name for d in lineage) + f".{draft.name}"
            raise CyclicTreeError(
                f"Class '{draft.name}' contains itself: {chain}",
                hint="attach_class() must not attach an ancestor.",
            )
        if parent is not None:
            _check_reserved(draft.name, self._keywords)
        _check_separator(draft.name, self._keywords)

        seen: set[str] = set()
        for name in draft.names():
            _check_reserved(name, self._keywords)
            _check_separator(name, self._keywords)
            if name in seen:
                raise DuplicateNameError(
                    f"'{name}' already exists in class '{draft.name}'.",
                )
            seen.add(name)

        handle = len(slots)
        slots.append(None)
        lineage.append(draft)
        children = tuple(
            self._freeze(child, handle, slots, lineage) for child in draft.classes
        )
        lineage.pop()

        slots[handle] = ClassNode(
            handle=handle,
            name=draft.name,
            help=draft.help,
            parent=parent,
            classes=children,
            actions=tuple(
                Action(name=a.name, help=a.help, handler=a.handler)
                for a in draft.actions
            ),
        )
        return handle
