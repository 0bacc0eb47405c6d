import unittest

from symbdiff.lexer import ScanError, Session, Token, TokenType, scan


class Tests(unittest.TestCase):
    def test_scan_polynomial(self):
        session = Session()
        self.assertEqual(scan("3x^2 + 2x", session), [
            Token(TokenType.NUMBER, "3"),
            Token(TokenType.VARIABLE, "x"),
            Token(TokenType.CARET, "^"),
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.PLUS, "+"),
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.VARIABLE, "x"),
            Token(TokenType.END, "$"),
        ])
        self.assertEqual(session.variable, "x")

    def test_operators(self):
        tokens = scan("- * + ^", Session())
        self.assertEqual([t.type for t in tokens], [
            TokenType.MINUS, TokenType.MULTIPLY, TokenType.PLUS,
            TokenType.CARET, TokenType.END])

    def test_digit_runs(self):
        tokens = scan("123 45\t6", Session())
        self.assertEqual([t.literal for t in tokens], ["123", "45", "6", "$"])

    def test_empty_line_is_only_end(self):
        self.assertEqual(scan("", Session()), [Token(TokenType.END, "$")])

    def test_constant_binds_nothing(self):
        session = Session()
        scan("42", session)
        self.assertIsNone(session.variable)

    def test_variable_folded_to_lowercase(self):
        session = Session()
        tokens = scan("X^2", session)
        self.assertEqual(tokens[0], Token(TokenType.VARIABLE, "x"))
        self.assertEqual(session.variable, "x")

        # Same letter in another case is not a re-bind.
        scan("x + X", session)
        self.assertEqual(session.variable, "x")

    def test_rebind_fails(self):
        session = Session("x")
        with self.assertRaises(ScanError) as ctx:
            scan("2y", session)
        self.assertEqual(ctx.exception.message,
                         "Attempt to re-bind differentiating variable 'x' with 'y'")
        self.assertEqual(session.variable, "x")

    def test_binding_sticks_when_line_fails(self):
        session = Session()
        with self.assertRaises(ScanError) as ctx:
            scan("x + Y", session)
        self.assertEqual(ctx.exception.message,
                         "Attempt to re-bind differentiating variable 'x' with 'y'")
        self.assertEqual(session.variable, "x")

        session = Session()
        with self.assertRaises(ScanError):
            scan("x &", session)
        self.assertEqual(session.variable, "x")
        with self.assertRaises(ScanError):
            scan("y", session)

    def test_unknown_symbol(self):
        session = Session()
        with self.assertRaises(ScanError) as ctx:
            scan("5 & 2", session)
        self.assertEqual(ctx.exception.message, "Unknown symbol '&'")

        for text in ("x / 2", "(x)", "2.5", "é"):
            with self.assertRaises(ScanError):
                scan(text, Session())

    def test_tokens_are_immutable(self):
        token = Token(TokenType.VARIABLE, "x")
        with self.assertRaises(AttributeError):
            token.literal = "y"


if __name__ == '__main__':
    unittest.main()
