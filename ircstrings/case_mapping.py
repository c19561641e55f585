# -*- test-case-name: ircstrings.test.test_case_mapping -*-
"""IRC case folding."""


#: The inclusive range of code points folded by `fold_case`, covering
#: ``A`` through ``^``.
FOLD_START = 0x41
FOLD_END = 0x5E
#: The distance from each folded code point to its lowercase form.
FOLD_OFFSET = 0x20

_FOLD_TABLE = dict((point, point + FOLD_OFFSET)
                   for point in range(FOLD_START, FOLD_END + 1))


def fold_case(string):
    """Return a copy of *string* in its canonical lowercase form under
    the ``rfc1459`` case mapping, where *{}|~* are the lowercase
    versions of *[]\\\\^*.  This is useful for comparing nicknames or
    channel names that differ only in case.  Characters outside of
    *A-Z* and *[]\\\\^* are returned unchanged, so the result always has
    the same length as *string*."""
    return string.translate(_FOLD_TABLE)
