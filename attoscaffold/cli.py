"""Command-line entry point for attoscaffold.

Usage::

    attoscaffold <target-dir> [--force] [--no-venv] [-h|--help]
    python -m attoscaffold /tmp/proj --no-venv
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from attoscaffold.config import ScaffoldArgs, ScaffoldConfig
from attoscaffold.errors import (
    EXIT_OK,
    MissingTargetError,
    ScaffoldError,
    TooManyArgumentsError,
    UnknownFlagError,
)
from attoscaffold.pipeline import Scaffolder
from attoscaffold.utils import console, print_error

PROG = "attoscaffold"

SYNOPSIS = f"{PROG} <target-dir> [--force] [--no-venv]"
USAGE = f"Usage: {SYNOPSIS}"

HELP_FLAGS = frozenset({"-h", "--help"})


class HelpRequested(Exception):
    """Raised by :func:`parse_args` when ``-h``/``--help`` is present."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; it never exits the process itself."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=SYNOPSIS,
        description="Scaffold the attoLLM project with a src/ package layout.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG} ./attollm\n"
            f"  {PROG} ./attollm --force --no-venv\n"
        ),
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )

    parser.add_argument(
        "target",
        nargs="?",
        metavar="<target-dir>",
        help="Directory to create the project in; must be missing or empty unless --force is given",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Scaffold into an existing, non-empty target and overwrite the generated files",
    )
    parser.add_argument(
        "--no-venv",
        dest="no_venv",
        action="store_true",
        help="Do not create .venv or install dependencies",
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Show this message and exit",
    )
    return parser


def _offending_token(exc: argparse.ArgumentError, argv: Sequence[str]) -> str:
    """Recover the raw token behind *exc*, e.g. ``--force=yes`` or ``-hx``."""
    names = [name for name in (exc.argument_name or "").split("/") if name]
    for token in argv:
        if token not in names and any(token.startswith(name) for name in names):
            return token
    return exc.argument_name or ""


def parse_args(argv: Sequence[str]) -> ScaffoldArgs:
    """Parse the scaffolder's command line.

    ``-h``/``--help`` anywhere wins over every other argument, valid or not.
    Flags and the positional target may come in any order.

    Raises:
        HelpRequested: Help was asked for.
        UnknownFlagError: An unrecognised ``-``-prefixed token was given.
        TooManyArgumentsError: A second positional argument was given.
        MissingTargetError: No target directory was given.
    """
    argv = list(argv)
    if any(token in HELP_FLAGS for token in argv):
        raise HelpRequested()

    try:
        namespace, extras = build_parser().parse_known_args(argv)
    except argparse.ArgumentError as exc:
        raise UnknownFlagError(_offending_token(exc, argv)) from exc

    target: str | None = namespace.target
    for token in extras:
        if token.startswith("-") and token != "-":
            raise UnknownFlagError(token)
        if not target:
            target = token
        else:
            raise TooManyArgumentsError(token)

    if not target:
        raise MissingTargetError()

    return ScaffoldArgs(
        target_path=target,
        force=namespace.force,
        create_environment=not namespace.no_venv,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scaffolder and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv)
    except HelpRequested:
        console.print(build_parser().format_help(), markup=False, highlight=False, end="")
        return EXIT_OK
    except ScaffoldError as exc:
        print_error(str(exc))
        print_error(USAGE)
        return exc.exit_code

    config = ScaffoldConfig.from_args(args)
    try:
        asyncio.run(Scaffolder(config).run())
    except ScaffoldError as exc:
        print_error(str(exc))
        return exc.exit_code

    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
