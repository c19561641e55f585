"""Unit tests for IRC identifier validation."""
# pylint: disable=missing-docstring,too-few-public-methods


from twisted.trial import unittest

from ..validation import is_valid_channel, is_valid_nick, is_valid_user


class ValidationTestCase(unittest.TestCase):
    validator = None

    def assertValid(self, *names):
        for name in names:
            self.assertTrue(self.validator(name), repr(name))

    def assertInvalid(self, *names):
        for name in names:
            self.assertFalse(self.validator(name), repr(name))


class ChannelTestCase(ValidationTestCase):
    validator = staticmethod(is_valid_channel)

    def test_prefixes(self):
        self.assertValid('#valid', '&local', '+modeless', '*znc')
        self.assertInvalid('valid', '@valid', '%valid')

    def test_length(self):
        self.assertInvalid('', '#')
        self.assertValid('#a', '#' + 'a' * 49)
        self.assertInvalid('#' + 'a' * 50)

    def test_length_in_octets(self):
        # Each "\xe9" takes two octets in UTF-8.
        self.assertValid(u'#' + u'a' * 47 + u'\xe9', u'#' + u'\xe9' * 24)
        self.assertInvalid(u'#' + u'a' * 48 + u'\xe9', u'#' + u'\xe9' * 25,
                           u'#' + u'\xe9' * 49)

    def test_channel_id_length_in_octets(self):
        self.assertValid(u'!AAAAA\xe9')

    def test_channel_id(self):
        self.assertValid('!AAAAA+x', '!12AB3chan')
        self.assertInvalid('!AAAAA', '!aaaaax', '!AAAA-x', '!')

    def test_forbidden_characters(self):
        self.assertInvalid('#a,b', '#a b', '#a:b', '#a\x07b', '#a\x00b',
                           '#a\rb', '#a\nb')

    def test_other_characters(self):
        self.assertValid('#\x02bold', u'#caf\xe9', '##', '#!@$')


class NickTestCase(ValidationTestCase):
    validator = staticmethod(is_valid_nick)

    def test_valid(self):
        self.assertValid('Nick_1', 'nick', 'N', '[away]', '{a}', '`tick`',
                         'a-b', 'x|\\')

    def test_empty(self):
        self.assertInvalid('')

    def test_first_character(self):
        self.assertInvalid('1abc', '-abc', '~abc', '@op')

    def test_other_characters(self):
        self.assertInvalid('ni ck', 'ni.ck', 'nick!', 'ni~ck', u'caf\xe9')

    def test_caret(self):
        # "^" folds to "~", which is outside the nickname range.
        self.assertInvalid('ni^ck')


class UserTestCase(ValidationTestCase):
    validator = staticmethod(is_valid_user)

    def test_valid(self):
        self.assertValid('~user.name', 'user', 'User', '1user', 'first.last',
                         'u_s-e[r]')

    def test_tilde(self):
        self.assertValid('~u', '~1')
        self.assertInvalid('~', '~~user', '~.user')

    def test_empty(self):
        self.assertInvalid('')

    def test_first_character(self):
        self.assertInvalid('.user', '-user', '_user', '[user]')

    def test_other_characters(self):
        self.assertInvalid('us er', 'user@host', 'user~', u'us\xe9r')
