"""
Core Module for pathglob

This module wraps the fnmatch() engine for callers that would rather work with
booleans and lists than with FNM_* result codes.

1. Configuration:
   - make_flags: Builds a flag int from keyword options.

2. Boolean helpers:
   - matches: True/False for one subject, raising PatternComplexityError when
     the engine gives up (FNM_NORES) instead of silently returning False.
   - filter_names: The subjects that match, in input order.

3. Raw results:
   - match_all: The verdict code for every subject, FNM_NORES included.
   - describe_result: A short name for a verdict code.
"""

import logging
from typing import Dict, Iterable, List

from .fnmatch import (
    fnmatch,
    FNM_CASEFOLD,
    FNM_LEADING_DIR,
    FNM_MATCH,
    FNM_NOESCAPE,
    FNM_NOMATCH,
    FNM_NORES,
    FNM_PATHNAME,
    FNM_PERIOD,
)

RESULT_NAMES = {
    FNM_MATCH: "match",
    FNM_NOMATCH: "nomatch",
    FNM_NORES: "nores",
}


class PatternComplexityError(Exception):
    """
    Raised when a pattern exhausts the recursion budget for a subject.

    The match could not be completed safely, which is different from a
    negative answer. The offending pattern and subject are kept on the
    exception.
    """

    def __init__(self, pattern: str, string: str) -> None:
        self.pattern = pattern
        self.string = string
        super().__init__(f"pattern {pattern!r} is too complex to match against {string!r}")


###############################################################################
# Configuration
###############################################################################

def make_flags(noescape: bool = False, pathname: bool = False, period: bool = False,
               leading_dir: bool = False, casefold: bool = False) -> int:
    """
    Builds a flag int from keyword options.

    Parameters:
        noescape (bool): Treat '\\' as a literal (FNM_NOESCAPE).
        pathname (bool): Wildcards never match '/' (FNM_PATHNAME).
        period (bool): A leading '.' must be matched literally (FNM_PERIOD).
        leading_dir (bool): Matching up to a '/' is enough (FNM_LEADING_DIR).
        casefold (bool): Case-insensitive comparison (FNM_CASEFOLD).

    Returns:
        int: The combined flags.
    """
    flags = 0
    if noescape:
        flags |= FNM_NOESCAPE
    if pathname:
        flags |= FNM_PATHNAME
    if period:
        flags |= FNM_PERIOD
    if leading_dir:
        flags |= FNM_LEADING_DIR
    if casefold:
        flags |= FNM_CASEFOLD
    return flags


###############################################################################
# Boolean helpers
###############################################################################

def matches(pattern: str, name: str, flags: int = 0) -> bool:
    """
    Returns True if name matches pattern.

    Raises:
        PatternComplexityError: If the recursion budget was exhausted.
    """
    result = fnmatch(pattern, name, flags)
    if result == FNM_NORES:
        logging.warning(f"Recursion budget exhausted matching {name!r} against pattern {pattern!r}")
        raise PatternComplexityError(pattern, name)
    return result == FNM_MATCH


def filter_names(names: Iterable[str], pattern: str, flags: int = 0) -> List[str]:
    """Returns the names that match pattern, keeping their order."""
    return [name for name in names if matches(pattern, name, flags)]


###############################################################################
# Raw results
###############################################################################

def match_all(pattern: str, names: Iterable[str], flags: int = 0) -> Dict[str, int]:
    """
    Matches every name and returns the raw verdict for each.

    Unlike filter_names(), this never raises: a name that exhausted the
    recursion budget simply maps to FNM_NORES.
    """
    results = {}
    for name in names:
        results[name] = fnmatch(pattern, name, flags)
    return results


def describe_result(result: int) -> str:
    """Returns "match", "nomatch" or "nores" for a verdict code."""
    try:
        return RESULT_NAMES[result]
    except KeyError:
        raise ValueError(f"unknown fnmatch result: {result!r}") from None
