"""Infrastructure layer — line sources for the read loop.

Both readers satisfy :class:`~cmdtree.core.protocols.LineReader`.

Rules
-----
* No imports from ``cli``.
* Optional terminal libraries (questionary, prompt_toolkit) are
  imported lazily so the core stays importable without them.
"""

from cmdtree.infra.prompt_reader import PromptLineReader
from cmdtree.infra.script_reader import ScriptLineReader

__all__: list[str] = [
    "PromptLineReader",
    "ScriptLineReader",
]
