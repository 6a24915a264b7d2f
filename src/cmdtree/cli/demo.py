"""The demo tree started by the ``cmdtree`` console script.

Mirrors the README example: a ``base`` root with a ``one`` class that
holds a ``two`` class, plus a few actions that write to the sink.
"""

from __future__ import annotations

from collections.abc import Sequence

from cmdtree.core.builder import Builder
from cmdtree.core.protocols import TextSink


def build_demo(out: TextSink) -> Builder:
    """Return a builder for the demo tree; actions write to *out*."""

    def echo(args: Sequence[str]) -> None:
        out.write(" ".join(args) + "\n")

    def greet(args: Sequence[str]) -> None:
        who = " ".join(args) if args else "world"
        out.write(f"Hello, {who}!\n")

    def count(args: Sequence[str]) -> None:
        out.write(f"{len(args)} argument(s)\n")

    return (
        Builder("base", "the demo root")
        .add_action("echo", "print the arguments back", echo)
        .begin_class("one", "the first nested class")
        .add_action("greet", "say hello to the arguments", greet)
        .begin_class("two", "the second nested class")
        .add_action("count", "count the arguments", count)
        .end_class()
        .end_class()
    )
