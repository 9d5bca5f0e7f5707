# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Command line interface for Clappers.

Classifies a token list against a set of declarations and prints the result,
which is handy for checking how a command line will be split up::

    clappers -f "h|help" -m "i|input" -- -i a.txt b.txt -- -h
    clappers --config args.yaml --json -- -o out.bin extra
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ._version import __version__
from .config import Declarations, load_declarations
from .errors import ClappersError
from .logging import configure_logging
from .parser import Clappers
from .registry import LEFTOVER_MARKER, ArgumentKind, Registry
from .scanner import ParseResult, scan


def build_parser() -> argparse.ArgumentParser:
    description = (
        "Classify command-line tokens into flags, single values, multiple\n"
        "values and leftovers. Tokens to classify follow the first '--'.\n\n"
        "Examples:\n"
        "  clappers -f h|help -f v -- -v file1 file2\n"
        "  clappers -s o|output -m i|input -- -i a.txt b.txt -o out.bin extra\n"
        "  clappers --config args.yaml --json -- -l -R -- -h file"
    )
    p = argparse.ArgumentParser(
        prog="clappers",
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--config",
        help="YAML or JSON file with 'flags', 'singles' and 'multiples' lists",
    )
    p.add_argument(
        "-f",
        "--flag",
        dest="flags",
        action="append",
        default=[],
        metavar="SPEC",
        help="Declare a flag, e.g. 'h|help' (repeatable)",
    )
    p.add_argument(
        "-s",
        "--single",
        dest="singles",
        action="append",
        default=[],
        metavar="SPEC",
        help="Declare a single-value argument (repeatable)",
    )
    p.add_argument(
        "-m",
        "--multiple",
        dest="multiples",
        action="append",
        default=[],
        metavar="SPEC",
        help="Declare a multiple-value argument (repeatable)",
    )
    p.add_argument("--json", action="store_true", help="Emit the result as JSON")
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v: info, -vv: debug)",
    )
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    p.add_argument(
        "--debug", action="store_true", help="Show tracebacks for errors"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split at the first ``--``: options before it, tokens to classify after."""
    argv = list(argv)
    if LEFTOVER_MARKER in argv:
        index = argv.index(LEFTOVER_MARKER)
        return argv[:index], argv[index + 1 :]
    return argv, []


def render_table(
    console: Console, registry: Registry, result: ParseResult
) -> None:
    table = Table(title="Arguments")
    table.add_column("Kind")
    table.add_column("Key", style="bold")
    table.add_column("Aliases")
    table.add_column("Value")
    for name in registry.names():
        if name.kind is ArgumentKind.FLAG:
            value = "true" if result.flag(name.key) else "false"
        elif name.kind is ArgumentKind.SINGLE:
            value = repr(result.single(name.key))
        else:
            value = repr(list(result.multiple(name.key)))
        table.add_row(
            name.kind.value, name.key, ", ".join(name.aliases), escape(value)
        )
    console.print(table)
    console.print(f"[bold]Leftovers:[/] {escape(repr(list(result.leftovers)))}")


def main(argv: Optional[List[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    options, tokens = split_argv(argv)
    parser = build_parser()
    args = parser.parse_args(options)

    console = Console(no_color=args.no_color)
    logger = configure_logging(args.verbose, use_color=not args.no_color)

    try:
        declarations = Declarations()
        if args.config:
            declarations = load_declarations(args.config)
        declarations = declarations.extend(
            Declarations(
                flags=args.flags, singles=args.singles, multiples=args.multiples
            )
        )
        clappers = declarations.apply(Clappers.build())
    except ClappersError as exc:
        if args.debug:
            raise
        console.print(f"[red]Error:[/] {escape(str(exc))}")
        return 2

    logger.info("Classifying %d token(s)", len(tokens))
    registry = clappers.registry.freeze()
    result = scan(registry, tokens)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        render_table(console, registry, result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
