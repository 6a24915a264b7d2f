"""Pure line resolution against a frozen command tree.

Every function in this module is a **pure** transformation — no I/O,
no handler invocation, no cursor mutation.  :func:`resolve` walks the
tokens of one line from a starting position and reports where the walk
stopped and why; the :class:`~cmdtree.core.commander.Commander` decides
what to commit, what to invoke and what to print.

Token rules, applied in order to each lower-cased token:

1. **up** keyword — move to the parent (error at the root).
2. **root** keyword — move to the root.
3. **exit** keyword — stop, whatever follows.
4. **help** keyword — stop and list the reached class.
5. **class** name — descend.
6. **action** name — stop; the remaining tokens are its arguments.
7. anything else — stop with an unrecognised-token error.

Matching is exact: a token never selects a class or action by prefix.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from cmdtree.core.config import Keywords
from cmdtree.core.models import ROOT, Action, CommandTree


class Outcome(enum.Enum):
    """Where the token walk stopped."""

    EMPTY = "empty"
    MOVED = "moved"
    ACTION = "action"
    HELP = "help"
    EXIT = "exit"
    UNRECOGNIZED = "unrecognized"
    PAST_ROOT = "past_root"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of walking one line of tokens."""

    outcome: Outcome

    position: int
    """Handle reached when the walk stopped (tentative, not committed)."""

    token: str | None = None
    """The token that stopped the walk, as typed."""

    action: Action | None = None

    arguments: tuple[str, ...] = ()
    """Tokens after the action name, original case preserved."""


def tokenize(line: str) -> list[str]:
    """Split *line* on any run of whitespace."""
    return line.split()


def normalize(token: str) -> str:
    """Case-normalise a token for matching (idempotent)."""
    return token.lower()


def resolve(
    tree: CommandTree,
    position: int,
    tokens: list[str],
    keywords: Keywords,
) -> Resolution:
    """Walk *tokens* starting at *position*.

    Returns
    -------
    Resolution
        ``EMPTY`` for no tokens, ``MOVED`` when every token navigated,
        otherwise the outcome of the first token that stopped the walk.
    """
    if not tokens:
        return Resolution(Outcome.EMPTY, position)

    cursor = position
    for index, token in enumerate(tokens):
        word = normalize(token)

        if word in keywords.up:
            parent = tree.node(cursor).parent
            if parent is None:
                return Resolution(Outcome.PAST_ROOT, cursor, token=token)
            cursor = parent
            continue

        if word in keywords.root:
            cursor = ROOT
            continue

        if word in keywords.exit:
            return Resolution(Outcome.EXIT, cursor, token=token)

        if word in keywords.help:
            return Resolution(Outcome.HELP, cursor, token=token)

        child = tree.find_class(cursor, word)
        if child is not None:
            cursor = child
            continue

        action = tree.find_action(cursor, word)
        if action is not None:
            return Resolution(
                Outcome.ACTION,
                cursor,
                token=token,
                action=action,
                arguments=tuple(tokens[index + 1:]),
            )

        return Resolution(Outcome.UNRECOGNIZED, cursor, token=token)

    return Resolution(Outcome.MOVED, cursor)
