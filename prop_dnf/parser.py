import logging

from prop_dnf.config import DEFAULT_SETTINGS
from prop_dnf.errors import ParseError
from prop_dnf.lexer import TokenKind, TokenStream, tokenize
from prop_dnf.table import build_cnf, build_dnf, generate
from prop_dnf.tree import BinaryExpr, Negation, Var, execute

logger = logging.getLogger(__name__)

# 2. Grammar
# E = P | P D E
# P = V | S P | (E)
# V = one of (A....Z)
# S = !
# D = & | '|' | > | - | +
#
# Binary operators chain to the right: A & B | C is A & (B | C).
# Negation takes the next primary only: !A & B is (!A) & B.


class Parser:
    def __init__(self, stream):
        self.stream = stream

    def parse(self):
        if self.stream.exhausted():
            raise ParseError("empty input")
        node = self._parse_expr()
        leftover = self.stream.next()
        if leftover is not None:
            # Only a close bracket can stop a chain early
            raise ParseError(f"unexpected token {leftover}", leftover)
        return node

    def _parse_expr(self):
        left = self._parse_primary()
        follow = self.stream.peek()
        if follow is None or follow.kind is TokenKind.CLOSE_BRACKET:
            # A close bracket is left for the group that opened it
            return left
        if follow.kind is not TokenKind.DOUBLE_OP:
            raise ParseError(f"unknown operator {follow}", follow)
        self.stream.next()
        right = self._parse_expr()
        return BinaryExpr(left, follow.value, right)

    def _parse_primary(self):
        token = self.stream.next()
        if token is None:
            raise ParseError("unexpected end of input")

        if token.kind is TokenKind.VARIABLE:
            return Var(token.value)
        if token.kind is TokenKind.SINGLE_OP:
            return Negation(self._parse_primary())
        if token.kind is TokenKind.OPEN_BRACKET:
            inner = self._parse_expr()
            closing = self.stream.next()
            if closing is None:
                raise ParseError("unmatched (", token)
            return inner
        raise ParseError(f"unexpected token {token}", token)


class Expression:
    """A parsed expression: its sorted variables and its tree."""

    def __init__(self, source, tree, variables, settings=DEFAULT_SETTINGS):
        self.source = source
        self.tree = tree
        self.variables = variables
        self.settings = settings

    def __repr__(self):
        return f"Expression({self.source!r})"

    def __str__(self):
        return str(self.tree)

    def evaluate(self, assignment):
        return execute(self.tree, assignment)

    def truth_table(self):
        return generate(self.variables, self.tree, self.settings)

    def to_dnf(self):
        return build_dnf(self.truth_table(), self.settings)

    def to_cnf(self):
        return build_cnf(self.truth_table(), self.settings)


def parse(source, settings=DEFAULT_SETTINGS):
    """
    Tokenize and parse an expression.

    Raises LexError for characters outside the vocabulary and ParseError for
    malformed structure; nothing partial is returned.
    """
    items = tokenize(source)
    if len(items) > settings.max_tokens:
        raise ParseError(f"expression too long: {len(items)} tokens, limit {settings.max_tokens}")

    tree = Parser(TokenStream(items)).parse()
    variables = tuple(sorted({t.value for t in items if t.kind is TokenKind.VARIABLE}))
    logger.debug("parsed %r as %s over %s", source, tree, "".join(variables))
    return Expression(source, tree, variables, settings)
