#!/usr/bin/env python
"""
fnmatch Implementation

This module provides a recursive implementation of POSIX fnmatch() (IEEE
1003.2-1992, section B.6) as found in the BSD C libraries, extended with a
'**' globstar token. It compares one pattern against one subject string:
  - '?' matches exactly one character.
  - '*' matches zero or more characters.
  - '**' matches like '*' but may cross '/' even in pathname mode. A '/'
    directly after the stars is swallowed too, so 'a/**/b' matches 'a/b'.
  - Bracket expressions, for example [abc], [!a-z] or []x], match one
    character from a set (see rangematch.py).
  - '\\' escapes the next character unless FNM_NOESCAPE is set.

Flags:
  FNM_NOESCAPE    - '\\' is an ordinary character.
  FNM_PATHNAME    - '*', '?' and bracket expressions never match '/', so a
                    separator in the subject must be matched by a literal '/'
                    in the pattern (or crossed by '**').
  FNM_PERIOD      - A '.' at the start of the subject, or right after a '/'
                    in pathname mode, must be matched by a literal '.'.
  FNM_LEADING_DIR - The pattern only has to match up to a '/' in the subject,
                    so 'src' matches 'src/main.c'.
  FNM_CASEFOLD    - Characters are compared after lower-casing, including
                    bracket members and range endpoints.

Backtracking for '*' is done by recursion. Every recursive call spends one
unit of a budget of FNM_MAX_RECURSION frames; running out yields FNM_NORES,
which means "too expensive to decide", not "does not match". Patterns such as
'*a*a*a*a*b' against long runs of 'a' are exponential in the general case and
rely on that budget.
"""

from .flags import (
    ALL_FLAGS,
    FNM_CASEFOLD,
    FNM_FILE_NAME,
    FNM_IGNORECASE,
    FNM_LEADING_DIR,
    FNM_MATCH,
    FNM_MAX_RECURSION,
    FNM_NOESCAPE,
    FNM_NOMATCH,
    FNM_NORES,
    FNM_PATHNAME,
    FNM_PERIOD,
    RANGE_ERROR,
    RANGE_MATCH,
    SEP,
)
from .rangematch import rangematch

__all__ = [
    "fnmatch",
    "fnmatchx",
    "ALL_FLAGS",
    "FNM_CASEFOLD",
    "FNM_FILE_NAME",
    "FNM_IGNORECASE",
    "FNM_LEADING_DIR",
    "FNM_MATCH",
    "FNM_MAX_RECURSION",
    "FNM_NOESCAPE",
    "FNM_NOMATCH",
    "FNM_NORES",
    "FNM_PATHNAME",
    "FNM_PERIOD",
]


def _leading_period(string: str, s: int, flags: int) -> bool:
    """
    Return True if string[s] is a '.' that only a literal '.' may match.

    That is the case under FNM_PERIOD when the dot opens the subject, or when
    it follows a '/' and FNM_PATHNAME is active.
    """
    if not (flags & FNM_PERIOD) or s >= len(string) or string[s] != ".":
        return False
    if s == 0:
        return True
    return bool(flags & FNM_PATHNAME) and string[s - 1] == SEP


def fnmatchx(pattern: str, string: str, flags: int, recurs: int) -> int:
    """
    Recursively match a pattern against a subject string.

    The pattern is walked left to right. Literal characters, '?' and bracket
    expressions each consume one subject character. A run of stars is handled
    by two fast paths (star at the end of the pattern, star right before a
    '/' in pathname mode) and otherwise by trying the rest of the pattern at
    every subject position, recursing once per attempt.

    Parameters:
        pattern (str): The glob pattern (for example "src/**/*.py").
        string (str): The subject, usually a '/'-separated path.
        flags (int): Bitwise combination of the FNM_* flags.
        recurs (int): Remaining recursion budget, including this frame.

    Returns:
        int: FNM_MATCH, FNM_NOMATCH, or FNM_NORES when the budget ran out.
    """
    if recurs == 0:
        return FNM_NORES
    recurs -= 1

    # Recursive attempts never apply the leading-period rule: they start in
    # the middle of a name. They do get this frame's entry flags, so a
    # FNM_PATHNAME dropped for one '**' token is back in force.
    recurs_flags = flags & ~FNM_PERIOD

    plen = len(pattern)
    slen = len(string)
    p = 0
    s = 0

    while True:
        # End of pattern: the subject must be exhausted too, unless a leading
        # directory match is allowed and we stopped right before a '/'.
        if p >= plen:
            if (flags & FNM_LEADING_DIR) and string.startswith(SEP, s):
                return FNM_MATCH
            return FNM_MATCH if s == slen else FNM_NOMATCH

        c = pattern[p]
        p += 1

        if c == "?":
            if s >= slen:
                return FNM_NOMATCH
            if string[s] == SEP and (flags & FNM_PATHNAME):
                return FNM_NOMATCH
            if _leading_period(string, s, flags):
                return FNM_NOMATCH
            s += 1
            continue

        if c == "*":
            # '**' lifts FNM_PATHNAME for this token only. It is restored for
            # the recursive calls below via recurs_flags.
            if p < plen and pattern[p] == "*":
                flags &= ~FNM_PATHNAME
                while p < plen and pattern[p] == "*":
                    p += 1
                if p < plen and pattern[p] == SEP:
                    p += 1

            if _leading_period(string, s, flags):
                return FNM_NOMATCH

            # Trailing star: everything left matches, except that in pathname
            # mode a further '/' is only fine for a leading directory match.
            if p >= plen:
                if flags & FNM_PATHNAME:
                    if (flags & FNM_LEADING_DIR) or SEP not in string[s:]:
                        return FNM_MATCH
                    return FNM_NOMATCH
                return FNM_MATCH

            # Star right before a '/': skip to the next separator in the
            # subject and let the '/' be matched literally.
            if pattern[p] == SEP and (flags & FNM_PATHNAME):
                s = string.find(SEP, s)
                if s == -1:
                    return FNM_NOMATCH
                continue

            # General case, use recursion.
            rest = pattern[p:]
            while s < slen:
                e = fnmatchx(rest, string[s:], recurs_flags, recurs)
                if e != FNM_NOMATCH:
                    return e
                if string[s] == SEP and (flags & FNM_PATHNAME):
                    break
                s += 1
            return FNM_NOMATCH

        if c == "[":
            if s >= slen:
                return FNM_NOMATCH
            if string[s] == SEP and (flags & FNM_PATHNAME):
                return FNM_NOMATCH
            if _leading_period(string, s, flags):
                return FNM_NOMATCH

            verdict, newp = rangematch(pattern, p, string[s], flags)
            if verdict == RANGE_MATCH:
                p = newp
                s += 1
                continue
            if verdict != RANGE_ERROR:
                return FNM_NOMATCH
            # An unterminated class is no class at all: compare '[' literally.

        elif c == "\\" and not (flags & FNM_NOESCAPE):
            if p < plen:
                c = pattern[p]
                p += 1
            # A trailing backslash stands for itself.

        # Literal comparison.
        if s >= slen:
            return FNM_NOMATCH
        t = string[s]
        if c != t and not ((flags & FNM_CASEFOLD) and c.lower() == t.lower()):
            return FNM_NOMATCH
        s += 1


def fnmatch(pattern: str, string: str, flags: int = 0) -> int:
    """
    Match a glob pattern against a subject string.

    This is the public entry point. It starts the recursion budget at
    FNM_MAX_RECURSION and returns the verdict of fnmatchx() unchanged.

    Parameters:
        pattern (str): The glob pattern to match.
        string (str): The subject (e.g., a file name or a '/'-separated path).
        flags (int): Flags that modify matching behavior (FNM_PATHNAME,
                     FNM_PERIOD, FNM_LEADING_DIR, FNM_CASEFOLD, FNM_NOESCAPE).

    Returns:
        int: FNM_MATCH (0) if the subject matches, FNM_NOMATCH if it does
             not, FNM_NORES if the pattern was too complex to decide.
    """
    return fnmatchx(pattern, string, flags & ALL_FLAGS, FNM_MAX_RECURSION)
