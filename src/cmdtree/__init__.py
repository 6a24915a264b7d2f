"""cmdtree — navigable command trees for line-oriented shells.

Build a tree of classes and actions with :class:`Builder`, freeze it
into a :class:`Commander`, then feed lines to
:meth:`Commander.parse_line` (or hand the commander to
:func:`cmdtree.cli.repl.run` for an interactive prompt).
"""

from cmdtree.core.builder import Builder, ClassDraft
from cmdtree.core.commander import Commander
from cmdtree.core.config import Keywords
from cmdtree.core.models import (
    ActionDone,
    Continue,
    Error,
    ErrorKind,
    Exit,
    LineResult,
    Moved,
)
from cmdtree.version import __version__

__all__: list[str] = [
    "ActionDone",
    "Builder",
    "ClassDraft",
    "Commander",
    "Continue",
    "Error",
    "ErrorKind",
    "Exit",
    "Keywords",
    "LineResult",
    "Moved",
    "__version__",
]
