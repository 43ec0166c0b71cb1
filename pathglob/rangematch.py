"""
Bracket expression evaluation.

rangematch() looks at one bracket expression ("[abc]", "[!a-z]", "[]x]" ...)
and decides whether a single test character belongs to it. It never touches
the subject string; the matcher hands it one character and gets back a verdict
plus the pattern position just past the closing ']'.
"""

from typing import Optional, Tuple

from .flags import (
    FNM_CASEFOLD,
    FNM_NOESCAPE,
    FNM_PATHNAME,
    RANGE_ERROR,
    RANGE_MATCH,
    RANGE_NOMATCH,
    SEP,
)


def _at(pattern: str, i: int) -> Optional[str]:
    """Return pattern[i], or None once the pattern is exhausted."""
    return pattern[i] if i < len(pattern) else None


def rangematch(pattern: str, pos: int, test: str, flags: int) -> Tuple[int, int]:
    """
    Evaluate the bracket expression that starts at pattern[pos].

    pos must point just after the opening '['. Members are single characters
    or ranges such as 'a-z'. Both range endpoints are unescaped (unless
    FNM_NOESCAPE is set) and lower-cased under FNM_CASEFOLD, the same way the
    test character is.

    A leading '!' or '^' negates the class. POSIX leaves '^' unspecified here;
    it is accepted as a synonym of '!' for consistency with regex syntax.
    A ']' that comes first (after the negation marker) is a member rather than
    the terminator.

    Parameters:
        pattern (str): The full pattern.
        pos (int): Index just after the '['.
        test (str): The single subject character being classified.
        flags (int): Matching flags.

    Returns:
        Tuple[int, int]: (verdict, new_pos). verdict is RANGE_MATCH,
        RANGE_NOMATCH or RANGE_ERROR. On RANGE_MATCH new_pos is the index just
        past the closing ']'. On RANGE_ERROR (no closing ']') new_pos is pos,
        so the caller can fall back to treating '[' as a literal.
    """
    p = pos
    negate = _at(pattern, p) in ("!", "^")
    if negate:
        p += 1

    if flags & FNM_CASEFOLD:
        test = test.lower()

    ok = False
    # The first member is taken unconditionally, so a leading ']' is literal.
    c = _at(pattern, p)
    p += 1
    while True:
        if c == "\\" and not (flags & FNM_NOESCAPE):
            c = _at(pattern, p)
            p += 1

        if c is None:
            return RANGE_ERROR, pos

        # A bracket expression can never match a separator in pathname mode.
        if c == SEP and (flags & FNM_PATHNAME):
            return RANGE_NOMATCH, p

        if flags & FNM_CASEFOLD:
            c = c.lower()

        c2 = _at(pattern, p + 1)
        if _at(pattern, p) == "-" and c2 is not None and c2 != "]":
            p += 2
            if c2 == "\\" and not (flags & FNM_NOESCAPE):
                c2 = _at(pattern, p)
                p += 1

            if c2 is None:
                return RANGE_ERROR, pos

            if flags & FNM_CASEFOLD:
                c2 = c2.lower()

            if c <= test <= c2:
                ok = True
        elif c == test:
            ok = True

        c = _at(pattern, p)
        p += 1
        if c == "]":
            break

    return (RANGE_NOMATCH if ok == negate else RANGE_MATCH), p
