"""Tests for prefix completion (core/completion.py)."""

from __future__ import annotations

import pytest

from cmdtree.core.completion import complete, split_partial
from cmdtree.core.config import Keywords
from cmdtree.core.models import ROOT, CommandTree

KW = Keywords()


class TestSplitPartial:
    @pytest.mark.parametrize(
        ("line", "done", "partial"),
        [
            ("", [], ""),
            ("on", [], "on"),
            ("one ", ["one"], ""),
            ("one tw", ["one"], "tw"),
            ("  one   two  ", ["one", "two"], ""),
        ],
    )
    def test_split(self, line: str, done: list[str], partial: str) -> None:
        assert split_partial(line) == (done, partial)


class TestComplete:
    def test_everything_at_root(self, tree: CommandTree) -> None:
        assert complete(tree, ROOT, "", KW) == ["/", "echo", "one"]

    def test_prefix(self, tree: CommandTree) -> None:
        assert complete(tree, ROOT, "o", KW) == ["one"]

    def test_prefix_case_insensitive(self, tree: CommandTree) -> None:
        assert complete(tree, ROOT, "ONE T", KW) == ["two"]

    def test_after_descent(self, tree: CommandTree) -> None:
        assert complete(tree, ROOT, "one ", KW) == [
            "..",
            "/",
            "c",
            "cancel",
            "greet",
            "two",
        ]

    def test_up_keywords_hidden_at_root(self, tree: CommandTree) -> None:
        assert complete(tree, ROOT, "c", KW) == []

    def test_from_nested_position(self, tree: CommandTree) -> None:
        assert complete(tree, 2, ".. g", KW) == ["greet"]

    def test_nothing_after_action(self, tree: CommandTree) -> None:
        assert complete(tree, ROOT, "one greet ", KW) == []
        assert complete(tree, ROOT, "echo o", KW) == []

    def test_nothing_after_unknown_token(self, tree: CommandTree) -> None:
        assert complete(tree, ROOT, "bogus ", KW) == []

    def test_nothing_after_exit_or_help(self, tree: CommandTree) -> None:
        assert complete(tree, ROOT, "exit ", KW) == []
        assert complete(tree, ROOT, "help ", KW) == []

    def test_no_match(self, tree: CommandTree) -> None:
        assert complete(tree, ROOT, "zzz", KW) == []
