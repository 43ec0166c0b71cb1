# pathglob/ignore_logic.py
"""
This module implements .gitignore-like rule lists on top of the fnmatch engine.
It provides classes to parse ignore patterns and to decide whether a given
file or directory path should be ignored based on these rules.

Key classes:
    - IgnorePattern: Represents a single pattern line.
    - IgnoreRules: An ordered list of patterns, possibly coming from several
      rule files in different directories, where the last matching rule wins.

Rule files are only read when they are named explicitly; nothing here walks
the filesystem.
"""

import os
import re
import logging
import posixpath
from typing import Iterable, List, Optional

from .core import PatternComplexityError
from .fnmatch import fnmatch, FNM_CASEFOLD, FNM_MATCH, FNM_NORES, FNM_PATHNAME


def parse_lines(lines: Iterable[str]) -> List[str]:
    """
    Cleans up raw ignore-file lines.

    Blank lines and lines starting with '#' are dropped. Trailing spaces are
    removed unless escaped with a backslash. An escaped '\\#' is left alone;
    the matcher treats it as a literal '#'.
    """
    patterns = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line or line.startswith("#"):
            continue
        line = re.sub(r"(?<!\\) +$", "", line)
        if line:
            patterns.append(line)
    return patterns


class IgnorePattern:
    """
    Represents a single ignore pattern.

    A leading '!' turns the pattern into a re-include rule and a trailing '/'
    restricts it to directories. A pattern with a '/' anywhere else is anchored
    to the directory it came from and is matched against the whole relative
    path in pathname mode, so only '**' may cross directories. A pattern
    without a '/' is matched against the basename alone.
    """

    def __init__(self, pattern: str, source_dir: str = "", casefold: bool = False) -> None:
        # Save the raw pattern as provided.
        self.original = pattern
        # The relative directory this pattern applies under ('' for the root).
        self.source_dir = source_dir.replace(os.sep, "/").strip("/")
        self.casefold = casefold

        self.negation = pattern.startswith("!")
        if self.negation:
            pattern = pattern[1:]

        self.dir_only = pattern.endswith("/")
        if self.dir_only:
            pattern = pattern.rstrip("/")

        # Any remaining '/' anchors the pattern; a leading one is then redundant.
        self.anchored = "/" in pattern
        if pattern.startswith("/"):
            pattern = pattern.lstrip("/")

        self.raw_pattern = pattern

        self.flags = FNM_PATHNAME if self.anchored else 0
        if self.casefold:
            self.flags |= FNM_CASEFOLD

    def __repr__(self) -> str:
        return f"IgnorePattern({self.original!r}, source_dir={self.source_dir!r})"

    def hits(self, path: str, is_dir: bool) -> bool:
        """
        Determines if the given path matches this pattern, ignoring negation.

        Args:
            path: The path relative to the pattern's source directory.
            is_dir: True if the path is a directory.

        Raises:
            PatternComplexityError: If the pattern is too complex for the path.
        """
        if self.dir_only and not is_dir:
            return False

        target = path if self.anchored else posixpath.basename(path)
        result = fnmatch(self.raw_pattern, target, self.flags)
        if result == FNM_NORES:
            raise PatternComplexityError(self.original, target)
        return result == FNM_MATCH

    def match(self, path: str, is_dir: bool) -> bool:
        """Returns True if the pattern hits and is not a negation rule."""
        return self.hits(path, is_dir) and not self.negation


class IgnoreRules:
    """
    An ordered collection of ignore patterns.

    Patterns are evaluated in the order they were added and the last one that
    matches decides. Once a directory is ignored, everything below it stays
    ignored, whatever later negation rules say about the individual entries.
    """

    def __init__(self, casefold: bool = False) -> None:
        self.casefold = casefold
        self.patterns: List[IgnorePattern] = []

    def add_patterns(self, lines: Iterable[str], source_dir: str = "") -> None:
        """Parses lines and appends the resulting patterns."""
        for line in parse_lines(lines):
            self.patterns.append(IgnorePattern(line, source_dir, casefold=self.casefold))

    def load_file(self, path: str, source_dir: str = "") -> None:
        """
        Reads one ignore file and appends its patterns.

        A file that cannot be read is reported with a warning and contributes
        no patterns.
        """
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                lines = f.readlines()
        except OSError as e:
            logging.warning(f"Could not read ignore file '{path}': {e}")
            return
        before = len(self.patterns)
        self.add_patterns(lines, source_dir)
        logging.debug(f"Loaded {len(self.patterns) - before} patterns from '{path}'")

    def _decide(self, path: str, is_dir: bool) -> Optional[bool]:
        result = None
        for pattern in self.patterns:
            match_path = path
            if pattern.source_dir:
                prefix = pattern.source_dir + "/"
                if not match_path.startswith(prefix):
                    continue
                match_path = match_path[len(prefix):]
            if pattern.hits(match_path, is_dir):
                result = not pattern.negation
        return result

    def should_ignore(self, path: str, is_dir: bool = False) -> bool:
        """
        Determines whether the given path should be ignored.

        Args:
            path: The file or directory path, relative to the root of the rules.
            is_dir: True if the path is a directory.

        Returns:
            True if the path, or one of its parent directories, is ignored.
        """
        normalized = path.replace(os.sep, "/").strip("/")
        if normalized.startswith("./"):
            normalized = normalized[2:]
        if not normalized:
            return False

        parts = normalized.split("/")
        for i in range(1, len(parts)):
            if self._decide("/".join(parts[:i]), True):
                return True
        return bool(self._decide(normalized, is_dir))

    def filter_paths(self, paths: Iterable[str]) -> List[str]:
        """
        Returns the paths that are not ignored, keeping their order.

        A path ending in '/' is taken to be a directory.
        """
        return [p for p in paths if not self.should_ignore(p, p.endswith("/"))]
