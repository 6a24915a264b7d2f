"""Tests for the frozen tree model (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, arena lookups and path rendering.
"""

from __future__ import annotations

import dataclasses

import pytest

from cmdtree.core.handler import ExclusiveHandler
from cmdtree.core.models import (
    ROOT,
    Action,
    ActionDone,
    ClassNode,
    CommandTree,
    Continue,
    Error,
    ErrorKind,
    Exit,
    Moved,
)


def _action(name: str = "greet", help: str = "say hello") -> Action:
    return Action(name=name, help=help, handler=ExclusiveHandler(lambda args: None, name))


# ---------------------------------------------------------------------------
# Action
# ---------------------------------------------------------------------------

class TestAction:
    def test_equality_ignores_handler(self) -> None:
        a = Action("greet", "say hello", ExclusiveHandler(lambda args: None, "greet"))
        b = Action("greet", "say hello", ExclusiveHandler(print, "greet"))
        assert a == b

    def test_inequality_on_help(self) -> None:
        assert _action(help="one") != _action(help="two")

    def test_inequality_on_name(self) -> None:
        assert _action(name="a") != _action(name="b")

    def test_repr_hides_handler(self) -> None:
        assert repr(_action("action-name", "help me!")) == (
            "Action(name='action-name', help='help me!')"
        )

    def test_frozen(self) -> None:
        a = _action()
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.name = "other"  # type: ignore[misc]

    def test_call_forwards_arguments(self) -> None:
        seen: list[list[str]] = []
        a = Action("greet", "", ExclusiveHandler(seen.append, "greet"))
        a.call(("hello", "world"))
        assert seen == [["hello", "world"]]


# ---------------------------------------------------------------------------
# CommandTree
# ---------------------------------------------------------------------------

class TestCommandTree:
    def test_root_is_handle_zero(self, tree: CommandTree) -> None:
        assert tree.root is tree.node(ROOT)
        assert tree.root.name == "base"
        assert tree.root.parent is None

    def test_len_counts_classes(self, tree: CommandTree) -> None:
        assert len(tree) == 3

    def test_find_class(self, tree: CommandTree) -> None:
        one = tree.find_class(ROOT, "one")
        assert one is not None
        assert tree.node(one).name == "one"
        assert tree.find_class(ROOT, "two") is None

    def test_find_action(self, tree: CommandTree) -> None:
        assert tree.find_action(ROOT, "echo") is not None
        assert tree.find_action(ROOT, "greet") is None

    def test_children_in_order(self) -> None:
        nodes = (
            ClassNode(0, "r", "", None, classes=(1, 2)),
            ClassNode(1, "b", "", 0),
            ClassNode(2, "a", "", 0),
        )
        tree = CommandTree(nodes=nodes)
        assert [c.name for c in tree.children(0)] == ["b", "a"]

    def test_lineage_and_path(self, tree: CommandTree) -> None:
        one = tree.find_class(ROOT, "one")
        assert one is not None
        two = tree.find_class(one, "two")
        assert two is not None
        assert [n.name for n in tree.lineage(two)] == ["base", "one", "two"]
        assert tree.path_of(two) == "base.one.two"
        assert tree.path_of(two, "/") == "base/one/two"
        assert tree.path_of(ROOT) == "base"

    def test_nodes_are_frozen(self, tree: CommandTree) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            tree.root.name = "x"  # type: ignore[misc]
        assert isinstance(tree.nodes, tuple)
        assert isinstance(tree.root.classes, tuple)
        assert isinstance(tree.root.actions, tuple)


# ---------------------------------------------------------------------------
# Line results
# ---------------------------------------------------------------------------

class TestLineResults:
    def test_value_equality(self) -> None:
        assert Continue() == Continue()
        assert Exit() == Exit()
        assert Moved("base.one") == Moved("base.one")
        assert ActionDone("greet") == ActionDone("greet")
        assert Error(ErrorKind.UNRECOGNIZED_TOKEN, "x") == Error(
            ErrorKind.UNRECOGNIZED_TOKEN, "x"
        )

    def test_variants_differ(self) -> None:
        assert Continue() != Exit()
        assert Moved("base") != Moved("base.one")

    def test_error_token_defaults_to_none(self) -> None:
        assert Error(ErrorKind.ATTEMPT_TO_ASCEND_PAST_ROOT).token is None
