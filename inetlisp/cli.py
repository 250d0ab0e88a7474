"""Command line entry point."""

from __future__ import annotations

import argparse
import mmap
import os
import sys

from .lang.execute import Loader
from .value import InetError

VERSION = "0.1.0"
PROG = "inet-lisp-st"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG)
    parser.add_argument("--version", action="version", version=VERSION)
    commands = parser.add_subparsers(dest="command")
    run = commands.add_parser("run", help="run files")
    run.add_argument("files", nargs="*")
    commands.add_parser("info", help="print system info")
    commands.add_parser("version", help="print version")
    commands.add_parser("help", help="print help")
    return parser


def _run(files: list[str]) -> int:
    loader = Loader()
    try:
        for file in files:
            loader.load(os.path.abspath(file))
    except (InetError, OSError) as error:
        print(f"{PROG}: {error}", file=sys.stderr)
        return 1
    return 0


def _info() -> int:
    print(f"page size: {mmap.PAGESIZE} bytes")
    print(f"number of processors: {os.cpu_count() or 1}")
    print("size of time_t: 64 bits")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "run":
        return _run(args.files)
    if args.command == "info":
        return _info()
    if args.command == "version":
        print(VERSION)
        return 0
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())