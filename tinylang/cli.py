"""Command-line entry points that scan or parse a TINY source file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from tinylang.parser import Parser
from tinylang.scanner import Scanner
from tinylang.tree import format_tree

DEFAULT_EXTENSION = ".tny"


def resolve_program_name(name: str) -> str:
    """Append the default extension when ``name`` contains no dot."""
    return name if "." in name else name + DEFAULT_EXTENSION


def _open_program(prog: str, argv: Sequence[str] | None):
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write(f"usage: {prog} <filename>\n")
        return None, None
    path = resolve_program_name(args[0])
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError:
        sys.stderr.write(f"File {path} not found\n")
        return None, None
    return path, handle


def lex_main(argv: Sequence[str] | None = None) -> int:
    """Scan a file, echoing its lines and tracing every token to stdout."""
    path, handle = _open_program("tinylex", argv)
    if handle is None:
        return 1
    listing = sys.stdout
    with handle:
        listing.write(f"\nCOMPILATION: {path}\n")
        for _ in Scanner(handle, listing):
            pass
    return 0


def parse_main(argv: Sequence[str] | None = None) -> int:
    """Parse a file, tracing tokens and printing its syntax tree to stdout."""
    path, handle = _open_program("tinyparse", argv)
    if handle is None:
        return 1
    listing = sys.stdout
    with handle:
        listing.write(f"\nCOMPILATION: {path}\n")
        tree = Parser(Scanner(handle, listing), listing).parse()
        listing.write("\nSyntax tree:\n")
        listing.write(format_tree(tree))
    return 0