# -*- test-case-name: ircstrings.test.test_wildcard -*-
"""Wildcard matching of strings against ``*`` glob patterns."""


#: Matches any run of zero or more characters.
WILDCARD = '*'


def has_wildcard(pattern):
    """Return `True` if *pattern* contains a wildcard."""
    return WILDCARD in pattern


def glob(string, pattern):
    """Return `True` if *string* matches *pattern*, where each ``*`` in
    *pattern* matches zero or more characters.

    Matching does not backtrack.  Each literal part between two
    wildcards is matched against its first occurrence in what is left
    of *string*, starting from the beginning of *string* rather than
    after the leading part.  This means some pairs that a regex-based
    matcher would accept are rejected, and vice versa.
    """
    if not pattern:
        return not string
    if pattern == WILDCARD:
        return True
    parts = pattern.split(WILDCARD)
    if len(parts) == 1:
        return string == pattern
    first, middle, last = parts[0], parts[1:-1], parts[-1]
    if not pattern.startswith(WILDCARD) and not string.startswith(first):
        return False
    for part in middle:
        index = string.find(part)
        if index == -1:
            return False
        string = string[index + len(part):]
    return pattern.endswith(WILDCARD) or string.endswith(last)
