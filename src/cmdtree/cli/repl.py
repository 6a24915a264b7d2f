"""The interactive read loop.

:func:`run` is deliberately thin: it owns prompting and input, and
delegates every decision to
:meth:`Commander.parse_line <cmdtree.core.commander.Commander.parse_line>`.
"""

from __future__ import annotations

import logging
import sys

from cmdtree.core.commander import Commander
from cmdtree.core.models import Exit, LineResult
from cmdtree.core.protocols import LineReader, TextSink

logger = logging.getLogger(__name__)

PROMPT_SUFFIX: str = "=> "


def prompt_for(commander: Commander) -> str:
    """Prompt text for the commander's current position."""
    return f"{commander.path()}{PROMPT_SUFFIX}"


def run(
    commander: Commander,
    reader: LineReader,
    sink: TextSink | None = None,
    *,
    echo_output: bool = True,
) -> LineResult | None:
    """Read and dispatch lines until an exit keyword or end of input.

    Parameters
    ----------
    commander:
        The navigator to drive.
    reader:
        Line source; ``None`` from :meth:`LineReader.read_line` ends the
        loop.
    sink:
        Where the commander writes feedback.  Defaults to ``sys.stdout``.
    echo_output:
        Forwarded to :meth:`Commander.parse_line`.

    Returns
    -------
    LineResult | None
        The last result produced, or ``None`` if no line was read.
    """
    out: TextSink = sink if sink is not None else sys.stdout
    last: LineResult | None = None

    while True:
        reader.set_prompt(prompt_for(commander))
        try:
            line = reader.read_line()
        except KeyboardInterrupt:
            # Ctrl+C discards the line being typed, like a shell.
            out.write("\n")
            continue
        if line is None:
            logger.debug("End of input at %s", commander.path())
            return last

        last = commander.parse_line(line, echo_output, out)
        if isinstance(last, Exit):
            logger.debug("Exit requested at %s", commander.path())
            return last
