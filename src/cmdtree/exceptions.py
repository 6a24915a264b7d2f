"""Custom exception hierarchy for cmdtree.

Parsing a line never raises: unresolvable input is reported as an
:class:`~cmdtree.core.models.Error` result.  Exceptions are reserved
for problems with how the tree was *built*, for handler reentry, and
for a missing optional UI dependency.  All of them inherit from
:class:`CmdTreeError` so the CLI error boundary can render a clean
message.

Hierarchy
---------
CmdTreeError
├── BuildError
│   ├── InvalidNameError
│   ├── DuplicateNameError
│   ├── CyclicTreeError
│   └── BuilderStateError
├── ReentrantActionError
├── ScriptReadError
└── EnvironmentError
"""

from __future__ import annotations


class CmdTreeError(Exception):
    """Base exception for all cmdtree errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Tree construction -----------------------------------------------------

class BuildError(CmdTreeError):
    """Raised when a tree cannot be built or frozen."""


class InvalidNameError(BuildError):
    """Raised for empty names, names with whitespace, or reserved keywords."""


class DuplicateNameError(BuildError):
    """Raised when a name is already taken by a sibling class or action."""


class CyclicTreeError(BuildError):
    """Raised when aliasing makes a class its own descendant."""


class BuilderStateError(BuildError):
    """Raised when a builder operation is not valid at the current draft."""


# --- Dispatch --------------------------------------------------------------

class ReentrantActionError(CmdTreeError):
    """Raised when an action handler is invoked while it is still running."""


# --- Input ------------------------------------------------------------------

class ScriptReadError(CmdTreeError):
    """Raised when a script file cannot be decoded."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CmdTreeError):
    """Raised when an optional runtime dependency is not available."""


def missing_dependency_hint(package: str) -> str:
    """Return the install guidance used for missing optional packages."""
    return f"Install with: pip install {package}"
