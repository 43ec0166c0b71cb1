#!/usr/bin/env python
"""
Command line front end.

Matches one glob pattern against subjects given as arguments, or read one per
line from stdin, and prints the ones that match (or, with --invert, the ones
that do not). --json prints every verdict instead.
"""

import sys
import json
import logging
import argparse
from typing import List, Optional

from .core import describe_result, make_flags, match_all
from .fnmatch import FNM_MATCH, FNM_NORES

EXIT_MATCH = 0
EXIT_NOMATCH = 1
EXIT_NORES = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathglob",
        description="Match subjects (usually paths) against a shell glob pattern supporting ?, *, ** and [...] classes. Subjects are read from stdin, one per line, when none are given.",
        epilog="Exit status: 0 if something was printed, 1 if nothing was, 2 if a match was too complex to decide."
    )
    parser.add_argument("pattern", help="Glob pattern")
    parser.add_argument("subjects", nargs="*", help="Subjects to test (default: read stdin)")
    parser.add_argument("--pathname", "-p", action="store_true", help="Wildcards never match '/' (FNM_PATHNAME)")
    parser.add_argument("--period", "-d", action="store_true", help="A leading '.' must be matched literally (FNM_PERIOD)")
    parser.add_argument("--leading-dir", "-l", action="store_true", help="Matching up to a '/' is enough (FNM_LEADING_DIR)")
    parser.add_argument("--casefold", "-c", action="store_true", help="Case-insensitive matching (FNM_CASEFOLD)")
    parser.add_argument("--noescape", "-e", action="store_true", help="Treat '\\' as a literal (FNM_NOESCAPE)")
    parser.add_argument("--invert", "-v", action="store_true", help="Print subjects that do not match")
    parser.add_argument("--json", "-oj", action="store_true", help="Print every verdict as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    flags = make_flags(
        noescape=args.noescape,
        pathname=args.pathname,
        period=args.period,
        leading_dir=args.leading_dir,
        casefold=args.casefold
    )
    subjects = args.subjects
    if not subjects:
        subjects = [line.rstrip("\r\n") for line in sys.stdin]
    logging.debug(f"Matching {len(subjects)} subjects against {args.pattern!r} with flags {flags:#x}")

    results = match_all(args.pattern, subjects, flags)

    exhausted = [s for s in subjects if results[s] == FNM_NORES]
    for subject in exhausted:
        logging.warning(f"Pattern too complex to decide for {subject!r}")

    if args.json:
        payload = {
            "pattern": args.pattern,
            "results": [{"subject": s, "result": describe_result(results[s])} for s in subjects]
        }
        print(json.dumps(payload, indent=2))
        selected = [s for s in subjects if (results[s] == FNM_MATCH) != args.invert and results[s] != FNM_NORES]
    else:
        selected = []
        for subject in subjects:
            if results[subject] == FNM_NORES:
                continue
            if (results[subject] == FNM_MATCH) != args.invert:
                selected.append(subject)
                print(subject)

    if exhausted:
        return EXIT_NORES
    return EXIT_MATCH if selected else EXIT_NOMATCH


if __name__ == "__main__":
    sys.exit(main())
