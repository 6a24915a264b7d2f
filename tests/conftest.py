"""Shared pytest fixtures and configuration for the cmdtree test suite.

Guidelines
----------
* No real terminal in any test; readers are scripted or mocked.
* Core tests drive :meth:`Commander.parse_line` directly.
* Handlers record their arguments instead of printing.
"""

from __future__ import annotations

import io
from collections.abc import Sequence

import pytest

from cmdtree.core.builder import Builder
from cmdtree.core.commander import Commander
from cmdtree.core.models import CommandTree


class Recorder:
    """Handler that remembers every argument list it received."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    def __call__(self, args: Sequence[str]) -> None:
        self.calls.append(list(args))


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def builder(recorder: Recorder) -> Builder:
    """``base`` → ``one`` → ``two``; ``echo`` at base, ``greet`` at one."""
    return (
        Builder.default_config("base")
        .add_action("echo", "print the arguments", recorder)
        .begin_class("one", "first class")
        .add_action("greet", "say hello", recorder)
        .begin_class("two", "second class")
        .end_class()
        .end_class()
    )


@pytest.fixture()
def tree(builder: Builder) -> CommandTree:
    return builder.into_tree()


@pytest.fixture()
def commander(builder: Builder) -> Commander:
    return builder.into_commander()


@pytest.fixture()
def sink() -> io.StringIO:
    return io.StringIO()
