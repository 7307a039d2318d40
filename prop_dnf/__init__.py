from prop_dnf.config import DEFAULT_SETTINGS, Settings
from prop_dnf.errors import ExpressionError, LexError, ParseError, TooManyVariablesError
from prop_dnf.lexer import Token, TokenKind, tokenize
from prop_dnf.parser import Expression, parse
from prop_dnf.table import Row, build_cnf, build_dnf, generate
from prop_dnf.tree import BinaryExpr, Negation, Var, execute

__all__ = [
    "DEFAULT_SETTINGS",
    "Settings",
    "ExpressionError",
    "LexError",
    "ParseError",
    "TooManyVariablesError",
    "Token",
    "TokenKind",
    "tokenize",
    "Expression",
    "parse",
    "Row",
    "build_cnf",
    "build_dnf",
    "generate",
    "BinaryExpr",
    "Negation",
    "Var",
    "execute",
]
