import unittest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from tac.lexer import Token, TokenType, tokenize

class TestTokenize(unittest.TestCase):
    """Test cases for the expression tokenizer."""

    def values(self, expression):
        return [token.value for token in tokenize(expression)]

    def test_simple_expression(self):
        """Test token classes for a mixed expression."""
        tokens = tokenize("a + 12 * (b_1 - 3.5)")
        self.assertEqual(tokens, [
            Token(TokenType.IDENTIFIER, "a"),
            Token(TokenType.OPERATOR, "+"),
            Token(TokenType.NUMBER, "12"),
            Token(TokenType.OPERATOR, "*"),
            Token(TokenType.PARENTHESIS, "("),
            Token(TokenType.IDENTIFIER, "b_1"),
            Token(TokenType.OPERATOR, "-"),
            Token(TokenType.NUMBER, "3.5"),
            Token(TokenType.PARENTHESIS, ")"),
        ])

    def test_whitespace_is_optional(self):
        """Test that spacing does not change the token stream."""
        self.assertEqual(tokenize("a+b*c"), tokenize("  a +\tb * c \n"))

    def test_all_operators(self):
        """Test every single-character operator."""
        tokens = tokenize("+-*/%^")
        self.assertEqual([t.value for t in tokens], list("+-*/%^"))
        self.assertTrue(all(t.type is TokenType.OPERATOR for t in tokens))

    def test_number_with_multiple_dots_kept_whole(self):
        """Test that malformed numbers pass through as one token."""
        tokens = tokenize("1.2.3 + x")
        self.assertEqual(tokens[0], Token(TokenType.NUMBER, "1.2.3"))
        self.assertEqual(len(tokens), 3)

    def test_identifier_maximal_munch(self):
        """Test identifiers keep digits and underscores after the first letter."""
        self.assertEqual(self.values("total_2x*y"), ["total_2x", "*", "y"])

    def test_number_followed_by_letters(self):
        """Test a digit run stops at the first letter."""
        tokens = tokenize("2x")
        self.assertEqual(tokens, [
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.IDENTIFIER, "x"),
        ])

    def test_leading_underscore_is_dropped(self):
        """Test an underscore cannot start an identifier."""
        self.assertEqual(self.values("_a"), ["a"])

    def test_unknown_characters_skipped(self):
        """Test unrecognized characters are silently ignored."""
        self.assertEqual(self.values("a $ b # = c"), ["a", "b", "c"])

    def test_non_ascii_characters_skipped(self):
        """Test Unicode digits and letters do not start tokens."""
        self.assertEqual(self.values("a + ² * é"), ["a", "+", "*"])
        self.assertEqual(self.values("xéy 1٣"), ["x", "y", "1"])

    def test_empty_and_blank_input(self):
        """Test that empty input gives no tokens."""
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   "), [])

    def test_parenthesis_helpers(self):
        """Test open/close parenthesis predicates."""
        open_paren, close_paren = tokenize("()")
        self.assertTrue(open_paren.is_open_paren)
        self.assertFalse(open_paren.is_close_paren)
        self.assertTrue(close_paren.is_close_paren)
        self.assertFalse(Token(TokenType.OPERATOR, "+").is_open_paren)

    def test_tokens_are_immutable(self):
        """Test that tokens cannot be modified after creation."""
        token = Token(TokenType.NUMBER, "1")
        with self.assertRaises(AttributeError):
            token.value = "2"

if __name__ == '__main__':
    unittest.main()
