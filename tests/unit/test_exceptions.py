import unittest

from mediatype import InvalidMimeSyntax, MediaTypeException


class TestInvalidMimeSyntax(unittest.TestCase):

    def test_message_without_index(self):
        e = InvalidMimeSyntax('type', 'text')
        self.assertEqual('The MIME syntax for a type in "text" is invalid', str(e))
        self.assertEqual(-1, e.invalid_index)

    def test_message_with_index(self):
        e = InvalidMimeSyntax('parameter name', 'a;b', 1)
        self.assertEqual('The MIME syntax for a parameter name in "a;b" is invalid at 1', str(e))
        self.assertEqual('parameter name', e.production)
        self.assertEqual('a;b', e.text)
        self.assertEqual(1, e.invalid_index)

    def test_is_a_value_error(self):
        e = InvalidMimeSyntax('subtype', 'text/')
        self.assertIsInstance(e, ValueError)
        self.assertIsInstance(e, MediaTypeException)
