"""Core layer — tree model, line parser and navigator.

Rules
-----
* No terminal I/O; feedback goes to a caller-supplied sink.
* No imports from ``cli`` or ``infra``.
* Parsing problems are returned as :class:`Error` results, never raised.
"""

from cmdtree.core.builder import Builder, ClassDraft
from cmdtree.core.commander import Commander
from cmdtree.core.config import Keywords
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
    LineResult,
    Moved,
)
from cmdtree.core.protocols import LineReader, NullSink, TextSink

__all__: list[str] = [
    "ROOT",
    "Action",
    "ActionDone",
    "Builder",
    "ClassDraft",
    "ClassNode",
    "CommandTree",
    "Commander",
    "Continue",
    "Error",
    "ErrorKind",
    "Exit",
    "Keywords",
    "LineReader",
    "LineResult",
    "Moved",
    "NullSink",
    "TextSink",
]
