"""
Flag and result constants shared by the matcher and the bracket evaluator.

A flag set is a plain int. Frames that need to relax a rule for a while
(for example '**' dropping FNM_PATHNAME) derive a new int from the one they
were given, so the caller's flags are never changed.
"""

# Flag constants that control matching behavior.
FNM_NOESCAPE = 0x01         # '\' is an ordinary character, not an escape introducer.
FNM_PATHNAME = 0x02         # '*', '?' and bracket classes never match '/'.
FNM_PERIOD = 0x04           # A leading '.' must be matched by a literal '.'.
FNM_LEADING_DIR = 0x08      # Matching a prefix that ends right before a '/' is enough.
FNM_CASEFOLD = 0x10         # Compare characters case-insensitively.

FNM_FILE_NAME = FNM_PATHNAME
FNM_IGNORECASE = FNM_CASEFOLD

ALL_FLAGS = FNM_NOESCAPE | FNM_PATHNAME | FNM_PERIOD | FNM_LEADING_DIR | FNM_CASEFOLD

# Outcome constants for fnmatch().
FNM_MATCH = 0               # The subject matches the pattern.
FNM_NOMATCH = 1             # The subject does not match the pattern.
FNM_NORES = 3               # Recursion budget exhausted; the answer is unknown.

# Outcome constants for rangematch().
RANGE_MATCH = 1             # The test character is a member of the class.
RANGE_NOMATCH = 0           # The test character is not a member of the class.
RANGE_ERROR = -1            # The class has no closing ']'.

# Depth ceiling for the recursive '*' search.
FNM_MAX_RECURSION = 64

# The only path separator the engine knows about.
SEP = "/"
