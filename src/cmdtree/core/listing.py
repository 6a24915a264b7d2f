"""Plain-text listing of what a class offers.

Pure presentation helpers — no I/O.  The parser writes the returned
text to its sink for ``help`` and for unrecognised tokens.
"""

from __future__ import annotations

from collections.abc import Sequence

from cmdtree.core.config import Keywords
from cmdtree.core.models import CommandTree

_KEYWORD_HELP: dict[str, str] = {
    "help": "prints the help messages",
    "up": "moves up to the parent class",
    "root": "returns to the root class",
    "exit": "sends the exit signal to end the interactive loop",
}


def _rows(entries: Sequence[tuple[str, str]], indent: str) -> list[str]:
    """Align ``name -- help`` rows on the widest name."""
    if not entries:
        return []
    width = max(len(name) for name, _ in entries)
    lines: list[str] = []
    for name, text in entries:
        if text:
            lines.append(f"{indent}{name:<{width}} -- {text}")
        else:
            lines.append(f"{indent}{name}")
    return lines


def render_listing(tree: CommandTree, handle: int, keywords: Keywords) -> str:
    """Render keywords, classes and actions available at *handle*.

    The up keywords are left out at the root, which has no parent.

    The result ends with a newline so it can be written verbatim.
    """
    node = tree.node(handle)
    keyword_rows = [
        (" | ".join(words), _KEYWORD_HELP[group])
        for group, words in keywords.groups()
        if group != "up" or node.parent is not None
    ]
    lines = _rows(keyword_rows, "")

    classes = [(child.name, child.help) for child in tree.children(handle)]
    if classes:
        lines.append("Classes:")
        lines.extend(_rows(classes, "    "))

    actions = [(action.name, action.help) for action in node.actions]
    if actions:
        lines.append("Actions:")
        lines.extend(_rows(actions, "    "))

    return "\n".join(lines) + "\n"


def render_unrecognized(token: str, path: str) -> str:
    """Diagnostic line for a token that matched nothing at *path*."""
    return f"'{token}' does not match any keyword, class, or action at '{path}'\n"
