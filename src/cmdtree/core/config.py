"""Navigation keyword configuration.

Keywords are the built-in tokens every node understands in addition to
its own classes and actions.  They are matched case-insensitively, like
every other token, so they are stored lower-cased.
"""

from __future__ import annotations

from dataclasses import dataclass

from cmdtree.exceptions import BuildError


@dataclass(frozen=True, slots=True)
class Keywords:
    """Keyword set and path separator shared by builder and commander."""

    up: tuple[str, ...] = ("..", "c", "cancel")
    """Move to the parent class."""

    root: tuple[str, ...] = ("/",)
    """Move back to the root class."""

    exit: tuple[str, ...] = ("exit", "quit")
    """Signal the read loop to stop."""

    help: tuple[str, ...] = ("help", "?")
    """List what is available at the current class."""

    separator: str = "."
    """Joins class names into the path string."""

    def __post_init__(self) -> None:
        seen: dict[str, str] = {}
        for group, words in self.groups():
            if not words:
                raise BuildError(f"Keyword group '{group}' must not be empty.")
            for word in words:
                if not word or word != word.strip().lower() or len(word.split()) != 1:
                    raise BuildError(
                        f"Invalid {group} keyword: {word!r}",
                        hint="Keywords must be single lower-case tokens.",
                    )
                if word in seen:
                    raise BuildError(
                        f"Keyword {word!r} is used by both "
                        f"'{seen[word]}' and '{group}'.",
                    )
                seen[word] = group
        if not self.separator:
            raise BuildError("Path separator must not be empty.")

    def groups(self) -> tuple[tuple[str, tuple[str, ...]], ...]:
        """Return ``(group, words)`` pairs in display order."""
        return (
            ("help", self.help),
            ("up", self.up),
            ("root", self.root),
            ("exit", self.exit),
        )

    def reserved(self) -> frozenset[str]:
        """Every keyword; class and action names may not use these."""
        return frozenset(word for _, words in self.groups() for word in words)
