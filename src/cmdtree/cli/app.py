"""CLI application entry point for cmdtree.

This module is the **sole error boundary** for the console script.
It catches :class:`~cmdtree.exceptions.CmdTreeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No parsing logic lives here — lines are resolved by the core
  :class:`~cmdtree.core.commander.Commander`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from cmdtree.cli import exit_codes
from cmdtree.cli.console import console
from cmdtree.exceptions import CmdTreeError
from cmdtree.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``cmdtree``                 — interactive demo shell
    * ``cmdtree --script FILE``   — feed FILE to the demo shell
    * ``cmdtree --version``
    """
    parser = argparse.ArgumentParser(
        prog="cmdtree",
        description="Navigate a command tree from an interactive prompt.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-s",
        "--script",
        metavar="FILE",
        default=None,
        help="Read lines from FILE instead of the terminal.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print listings or diagnostics for unresolved lines.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log navigation and dispatch decisions to stderr.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cmdtree demo shell.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from cmdtree.cli.demo import build_demo
    from cmdtree.cli.repl import run

    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    out = sys.stdout
    commander = build_demo(out).into_commander()

    if args.script is not None:
        from cmdtree.infra.script_reader import ScriptLineReader

        reader = ScriptLineReader.from_path(
            args.script,
            echo=lambda text: out.write(text + "\n"),
        )
    else:
        from cmdtree.infra.prompt_reader import PromptLineReader

        reader = PromptLineReader(commander.complete)
        console.print(
            "[bold]cmdtree[/bold] demo: type [cyan]help[/cyan] for a listing, "
            "[cyan]exit[/cyan] to leave."
        )

    run(commander, reader, out, echo_output=not args.quiet)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CmdTreeError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
