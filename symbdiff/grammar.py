"""
Recursive-descent parser for single-variable polynomial expressions.

    expression := term END
    term       := factor ( ('+'|'-') factor )*
    factor     := unary ( '*' unary )*
    unary      := '-'* atomic
    atomic     := (NUMBER | VARIABLE) [ '^' NUMBER | VARIABLE [ '^' NUMBER ] ]

A NUMBER raised to a NUMBER is folded into a constant.

Errors are not raised: every rule returns a BotchedExpr carrying the
message, and the rules above it hand that node straight back up.
"""
import logging

from symbdiff.expr import AtomicExpr, BinaryExpr, BotchedExpr
from symbdiff.lexer import TokenType

logger = logging.getLogger(__name__)

MAX_EXPONENT = 10000


class Parser:
    def __init__(self, tokens):
        if not tokens or tokens[-1].type != TokenType.END:
            raise ValueError("token sequence must end with an END token")
        self.tokens = tokens
        self.curr = 0

    def peek(self):
        return self.tokens[self.curr]

    def advance(self):
        token = self.tokens[self.curr]
        # END is never stepped past, so peek() stays valid.
        if token.type != TokenType.END:
            self.curr += 1
        return token

    def parse_expression(self):
        expr = self.parse_term()
        if expr.is_botched:
            return expr

        token = self.peek()
        if token.type != TokenType.END:
            return BotchedExpr(
                f"Unexpected symbol '{token.literal}'. "
                "Expected the implicit end-of-expression token")
        return expr

    def parse_term(self):
        lhs = self.parse_factor()
        if lhs.is_botched:
            return lhs

        while self.peek().type in (TokenType.PLUS, TokenType.MINUS):
            op = self.advance().literal
            rhs = self.parse_factor()
            if rhs.is_botched:
                return rhs
            lhs = BinaryExpr(op, lhs, rhs)

        return lhs

    def parse_factor(self):
        lhs = self.parse_unary()
        if lhs.is_botched:
            return lhs

        while self.peek().type == TokenType.MULTIPLY:
            self.advance()
            rhs = self.parse_unary()
            if rhs.is_botched:
                return rhs
            lhs = BinaryExpr("*", lhs, rhs)

        return lhs

    def parse_unary(self):
        negations = 0
        while self.peek().type == TokenType.MINUS:
            self.advance()
            negations += 1
        return self.parse_atomic(negate=negations % 2 == 1)

    def parse_exponent(self):
        """Consume '^ NUMBER' and return the exponent, or a BotchedExpr."""
        self.advance()
        token = self.peek()
        if token.type != TokenType.NUMBER:
            return BotchedExpr(
                f"Unexpected symbol '{token.literal}' following '^'. "
                "Expected a number as exponent")
        self.advance()

        exponent = int(token.literal)
        if exponent > MAX_EXPONENT:
            return BotchedExpr(
                f"Exponent '{token.literal}' is too large (limit {MAX_EXPONENT})")
        return exponent

    def parse_variable_power(self):
        """Consume VARIABLE ['^' NUMBER] and return the power, or a BotchedExpr."""
        self.advance()
        if self.peek().type == TokenType.CARET:
            return self.parse_exponent()
        return 1

    def parse_atomic(self, negate=False):
        token = self.peek()

        if token.type not in (TokenType.NUMBER, TokenType.VARIABLE):
            return BotchedExpr(
                f"Unexpected symbol '{token.literal}'. "
                "Expected a number/variable instead")

        self.advance()
        if token.type == TokenType.NUMBER:
            constant = int(token.literal)
            power = 0
        else:
            constant = 1
            power = 1

        if self.peek().type == TokenType.CARET:
            exponent = self.parse_exponent()
            if isinstance(exponent, BotchedExpr):
                return exponent
            if token.type == TokenType.NUMBER:
                constant = constant ** exponent
            else:
                power = exponent
        elif self.peek().type == TokenType.VARIABLE:
            # Coefficient juxtaposed with the variable: 3x, 3x^2, xx^2.
            power = self.parse_variable_power()
            if isinstance(power, BotchedExpr):
                return power

        if negate:
            constant = -constant
        return AtomicExpr(constant, power)


def parse(tokens):
    """Parse a token sequence into an AST, or a BotchedExpr on a syntax error."""
    expr = Parser(tokens).parse_expression()
    if expr.is_botched:
        logger.debug("parse failed: %s", expr.message)
    return expr
