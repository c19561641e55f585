# -*- test-case-name: ircstrings.test.test_validation -*-
"""Validation of IRC channel names, nicknames, and usernames.

The grammars are those of :rfc:`2812#section-2.3.1`, loosened where
common server practice differs.  Checks are done on code point ranges
rather than `str.isalpha` and friends, which would also accept
non-ASCII letters.
"""


from .case_mapping import fold_case


#: Channel names must be at least this many octets long...
CHANNEL_MIN_LENGTH = 2
#: ...and no longer than this.
CHANNEL_MAX_LENGTH = 50

#: Characters that may start a channel name.  ``*`` is not in the RFC,
#: but bouncers such as ZNC use it.
CHANNEL_PREFIXES = frozenset('!#&*+')
#: The prefix of a "safe" channel, which is followed by a channel ID.
SAFE_CHANNEL_PREFIX = '!'
CHANNEL_ID_LENGTH = 5
#: The shortest safe channel: prefix, channel ID, one name character.
SAFE_CHANNEL_MIN_LENGTH = 1 + CHANNEL_ID_LENGTH + 1
#: NUL, BEL, CR, LF, space, comma, and colon.
CHANNEL_FORBIDDEN = frozenset('\x00\x07\r\n ,:')

DIGIT_START = 0x30
DIGIT_END = 0x39
ASCII_UPPER_START = 0x41
ASCII_UPPER_END = 0x5A
ASCII_LOWER_START = 0x61
ASCII_LOWER_END = 0x7A
#: Letters plus the nickname "specials" ``[]\`_^{|}``.
NICK_START = 0x41
NICK_END = 0x7D
HYPHEN = 0x2D
PERIOD = 0x2E

#: Prepended to usernames by servers that got no ident response.
NO_IDENT_PREFIX = '~'


def _in_range(char, start, end):
    return start <= ord(char) <= end


def _is_digit(char):
    return _in_range(char, DIGIT_START, DIGIT_END)


def _is_nick_char(char):
    return (_in_range(char, NICK_START, NICK_END) or _is_digit(char) or
            ord(char) == HYPHEN)


def is_valid_channel(name):
    """Return `True` if *name* is a valid channel name, and `False`
    otherwise.  Safe channel IDs (as in ``!ABCDEname``) are only
    supported with the standard five-character length.  Non-ASCII
    characters are accepted, and length limits apply to the name's
    UTF-8 encoding, as sent on the wire."""
    octets = len(name.encode('utf-8', 'surrogatepass'))
    if not CHANNEL_MIN_LENGTH <= octets <= CHANNEL_MAX_LENGTH:
        return False
    if name[0] not in CHANNEL_PREFIXES:
        return False
    if name[0] == SAFE_CHANNEL_PREFIX:
        if octets < SAFE_CHANNEL_MIN_LENGTH:
            return False
        for char in name[1:1 + CHANNEL_ID_LENGTH]:
            if not (_is_digit(char) or
                    _in_range(char, ASCII_UPPER_START, ASCII_UPPER_END)):
                return False
    return not any(char in CHANNEL_FORBIDDEN for char in name[1:])


def is_valid_nick(name):
    """Return `True` if *name* is a valid nickname, and `False`
    otherwise.  Nickname length is not checked, as servers advertise
    their own limits."""
    if not name:
        return False
    name = fold_case(name)
    if not _in_range(name[0], NICK_START, NICK_END):
        return False
    return all(_is_nick_char(char) for char in name[1:])


def is_valid_user(name):
    """Return `True` if *name* is a valid username (ident), and `False`
    otherwise.  A username follows the same rules as a nickname, except
    that it must start with a letter or digit, possibly after a ``~``,
    and may also contain periods."""
    if not name:
        return False
    name = fold_case(name)
    if name[0] == NO_IDENT_PREFIX:
        name = name[1:]
        if not name:
            return False
    # Folding leaves no uppercase letters to check for.
    if not (_is_digit(name[0]) or
            _in_range(name[0], ASCII_LOWER_START, ASCII_LOWER_END)):
        return False
    return all(_is_nick_char(char) or ord(char) == PERIOD
               for char in name[1:])
