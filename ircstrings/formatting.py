# -*- test-case-name: ircstrings.test.test_formatting -*-
"""Operations on mIRC-style message formatting.

Formatting can be written as markup, with aliases such as ``{red}`` or
``{bold}`` enclosed in braces, and translated into raw control codes
with `apply_format`.
"""


from collections import namedtuple
from types import MappingProxyType


#: A single entry in the format code table, binding one or more markup
#: *aliases* to the control code *value* they stand for.
FormatCode = namedtuple('FormatCode', ('aliases', 'value'))

#: The format code table.  Color values use the two-digit form of the
#: standard mIRC color numbers.
#
# <http://www.mirc.com/help/colors.html>
FORMAT_CODES = (
    FormatCode(('white',), '\x0300'),
    FormatCode(('black',), '\x0301'),
    FormatCode(('blue', 'navy'), '\x0302'),
    FormatCode(('green',), '\x0303'),
    FormatCode(('red',), '\x0304'),
    FormatCode(('brown', 'maroon'), '\x0305'),
    FormatCode(('purple',), '\x0306'),
    FormatCode(('orange', 'olive', 'gold'), '\x0307'),
    FormatCode(('yellow',), '\x0308'),
    FormatCode(('lightgreen', 'lime'), '\x0309'),
    FormatCode(('teal',), '\x0310'),
    FormatCode(('cyan',), '\x0311'),
    FormatCode(('lightblue', 'royal'), '\x0312'),
    FormatCode(('lightpurple', 'pink', 'fuchsia'), '\x0313'),
    FormatCode(('grey', 'gray'), '\x0314'),
    FormatCode(('lightgrey', 'silver'), '\x0315'),
    FormatCode(('bold', 'b'), '\x02'),
    FormatCode(('italic', 'i'), '\x1D'),
    FormatCode(('reset', 'r'), '\x0F'),
    FormatCode(('clear', 'c'), '\x03'),
    FormatCode(('reverse',), '\x16'),
    FormatCode(('underline', 'ul'), '\x1F'),
    FormatCode(('ctcp',), '\x01'))  # CTCP and ACTION delimiter

#: A read-only mapping from each alias to its control code.
FORMAT_ALIASES = MappingProxyType(dict(
    (alias, code.value) for code in FORMAT_CODES for alias in code.aliases))

#: The character that opens a markup token.
TOKEN_OPEN = '{'
TOKEN_CLOSE = '}'


def _replace_tokens(text, replacement_for):
    for code in FORMAT_CODES:
        replacement = replacement_for(code)
        for alias in code.aliases:
            text = text.replace(TOKEN_OPEN + alias + TOKEN_CLOSE, replacement)
        # Nothing later in the table can match without an opening brace.
        if TOKEN_OPEN not in text:
            break
    return text


def apply_format(text):
    """Return *text* with every recognized markup token, such as
    ``{red}`` or ``{b}``, replaced by its control code.  Tokens with
    unknown aliases are left alone."""
    return _replace_tokens(text, lambda code: code.value)


def strip_format_tokens(text):
    """Return *text* with every recognized markup token removed."""
    return _replace_tokens(text, lambda code: '')


def strip_control_bytes(text):
    """Return *text* with every control code in the format code table
    removed.  Color codes are removed before the bare color character,
    so ``\\x0304`` disappears whole.  One-digit color numbers and
    background pairs are not in the table, and only lose their
    leading ``\\x03``."""
    for code in FORMAT_CODES:
        text = text.replace(code.value, '')
    return text
