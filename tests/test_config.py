"""Tests for keyword configuration (core/config.py)."""

from __future__ import annotations

import pytest

from cmdtree.core.config import Keywords
from cmdtree.exceptions import BuildError


class TestDefaults:
    def test_default_groups(self) -> None:
        kw = Keywords()
        assert "c" in kw.up
        assert ".." in kw.up
        assert kw.root == ("/",)
        assert "exit" in kw.exit
        assert "help" in kw.help
        assert kw.separator == "."

    def test_reserved_is_union_of_groups(self) -> None:
        kw = Keywords()
        assert kw.reserved() == frozenset(kw.up + kw.root + kw.exit + kw.help)

    def test_groups_display_order(self) -> None:
        assert [group for group, _ in Keywords().groups()] == [
            "help",
            "up",
            "root",
            "exit",
        ]


class TestValidation:
    def test_empty_group_rejected(self) -> None:
        with pytest.raises(BuildError, match="must not be empty"):
            Keywords(up=())

    @pytest.mark.parametrize("word", ["UP", "go up", "", " up"])
    def test_malformed_keyword_rejected(self, word: str) -> None:
        with pytest.raises(BuildError, match="Invalid up keyword"):
            Keywords(up=(word,))

    def test_overlapping_groups_rejected(self) -> None:
        with pytest.raises(BuildError, match="used by both"):
            Keywords(root=("c",))

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(BuildError, match="separator"):
            Keywords(separator="")

    def test_custom_keywords_accepted(self) -> None:
        kw = Keywords(up=("up",), root=("top",), exit=("bye",), help=("h",))
        assert kw.reserved() == frozenset({"up", "top", "bye", "h"})
