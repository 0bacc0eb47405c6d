from symbdiff.expr import AtomicExpr, BinaryExpr, BotchedExpr, Expr
from symbdiff.grammar import parse
from symbdiff.lexer import ScanError, Session, Token, TokenType, scan
from symbdiff.symbdiff import differentiate, differentiate_line, format_terms

__all__ = [
    "AtomicExpr", "BinaryExpr", "BotchedExpr", "Expr",
    "parse",
    "ScanError", "Session", "Token", "TokenType", "scan",
    "differentiate", "differentiate_line", "format_terms",
]
