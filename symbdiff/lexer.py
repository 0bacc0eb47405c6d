import enum
import logging
from collections import namedtuple

logger = logging.getLogger(__name__)


@enum.unique
class TokenType(enum.Enum):
    VARIABLE = enum.auto()
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    MULTIPLY = enum.auto()
    CARET = enum.auto()
    END = enum.auto()


OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "^": TokenType.CARET,
}

END_LITERAL = "$"


class Token(namedtuple("Token", ["type", "literal"])):
    __slots__ = ()

    def __repr__(self):
        return f"Token({self.type.name}, '{self.literal}')"


class ScanError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class Session:
    """Holds the differentiating variable across the lines of one session.

    The variable is bound by the first letter ever scanned, even on a line
    that later fails, and is never reset afterwards.
    """

    def __init__(self, variable=None):
        self.variable = variable

    def __repr__(self):
        return f"Session(variable={self.variable!r})"


def is_digit(c):
    return "0" <= c <= "9"


def is_letter(c):
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def scan(line, session):
    """Turn one input line into tokens, always terminated by an END token.

    Raises ScanError on an unknown character or on a variable other than
    the one already bound. The first letter seen binds the session's variable
    immediately.
    """
    tokens = []

    i = 0
    while i < len(line):
        c = line[i]
        if c.isspace():
            i += 1
        elif c in OPERATORS:
            tokens.append(Token(OPERATORS[c], c))
            i += 1
        elif is_digit(c):
            start = i
            while i < len(line) and is_digit(line[i]):
                i += 1
            tokens.append(Token(TokenType.NUMBER, line[start:i]))
        elif is_letter(c):
            c = c.lower()
            if session.variable is None:
                logger.debug("binding differentiating variable to '%s'", c)
                session.variable = c
            elif session.variable != c:
                raise ScanError(
                    f"Attempt to re-bind differentiating variable "
                    f"'{session.variable}' with '{c}'")
            tokens.append(Token(TokenType.VARIABLE, c))
            i += 1
        else:
            raise ScanError(f"Unknown symbol '{c}'")

    tokens.append(Token(TokenType.END, END_LITERAL))
    return tokens
