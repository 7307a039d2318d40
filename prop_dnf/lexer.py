import logging
from dataclasses import dataclass, field
from enum import Enum

import ply.lex as lex

from prop_dnf.errors import LexError

logger = logging.getLogger(__name__)


# 1. Lexer

# 1.1 Tokens
tokens = (
    'Variable',
    'SingleOp',
    'DoubleOp',
    'OpenBracket',
    'CloseBracket',
)

# 1.2 Declarations
# Variables: A..Z, negation: !, and: &, or: |, implication: >,
# equivalence: -, xor: +, parentheses: ()
t_OpenBracket = r'\('
t_CloseBracket = r'\)'
t_SingleOp = r'!'
t_DoubleOp = r'[&|>\-+]'
t_Variable = r'[A-Z]'
t_ignore = ' \t\r\n\f\v'


# Error rule
def t_error(t):
    raise LexError(t.value[0], t.lexpos)


_master = lex.lex(errorlog=logger)


class TokenKind(Enum):
    VARIABLE = 'Variable'
    SINGLE_OP = 'SingleOp'
    DOUBLE_OP = 'DoubleOp'
    OPEN_BRACKET = 'OpenBracket'
    CLOSE_BRACKET = 'CloseBracket'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    position: int = field(default=0, compare=False)

    def __str__(self):
        return self.value


def tokenize(source):
    """
    Split an expression into tokens.

    Whitespace is dropped. Raises LexError on the first character outside the
    vocabulary, so a partial token list is never returned.
    """
    lexer = _master.clone()
    lexer.input(source)
    result = []
    while True:
        tok = lexer.token()
        if tok is None:
            break
        result.append(Token(TokenKind(tok.type), tok.value, tok.lexpos))
    logger.debug("tokenized %r into %d tokens", source, len(result))
    return tuple(result)


class TokenStream:
    """Cursor over a tokenized expression. next() and peek() give None at the end."""

    def __init__(self, items):
        self._tokens = tuple(items)
        self._cur = 0

    def __len__(self):
        return len(self._tokens)

    @property
    def consumed(self):
        return self._cur

    def exhausted(self):
        return self._cur == len(self._tokens)

    def peek(self):
        if self.exhausted():
            return None
        return self._tokens[self._cur]

    def next(self):
        token = self.peek()
        if token is not None:
            self._cur += 1
        return token
