"""Prefix completion for partially typed lines.

Completion reuses :func:`~cmdtree.core.parser.resolve` on the complete
tokens of the line, so it can only ever suggest names the parser would
accept at the reached class.  The trailing partial token (empty when
the line ends in whitespace) is the prefix to complete.
"""

from __future__ import annotations

from cmdtree.core.config import Keywords
from cmdtree.core.models import CommandTree
from cmdtree.core.parser import Outcome, normalize, resolve, tokenize


def split_partial(line: str) -> tuple[list[str], str]:
    """Split *line* into complete tokens and the trailing partial token."""
    tokens = tokenize(line)
    if not tokens or line[-1:].isspace():
        return tokens, ""
    return tokens[:-1], tokens[-1]


def complete(
    tree: CommandTree,
    position: int,
    line: str,
    keywords: Keywords,
) -> list[str]:
    """Return sorted completions for the last token of *line*.

    Nothing is offered once the line has reached an action (the rest are
    free-form arguments) or stopped on a keyword or unknown token.
    """
    done, partial = split_partial(line)
    walk = resolve(tree, position, done, keywords)
    if walk.outcome not in (Outcome.EMPTY, Outcome.MOVED):
        return []

    prefix = normalize(partial)
    node = tree.node(walk.position)
    names = [child.name for child in tree.children(walk.position)]
    names.extend(action.name for action in node.actions)
    if node.parent is not None:
        names.extend(keywords.up)
    names.extend(keywords.root)
    return sorted({name for name in names if name.startswith(prefix)})
