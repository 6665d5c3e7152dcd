import logging

from radixcalc.errors import (
    EmptyExpression,
    TrailingTokens,
    UnbalancedParens,
    UnexpectedToken,
)
from radixcalc.node import Node, new_binary, new_number
from radixcalc.token import Radix, Token, TokenType, equal
from radixcalc.utils import Peekable

logger = logging.getLogger(__name__)


class Parse:
    """Recursive descent parser over the lexer's token stream.

    Grammar, loosest binding first::

        line    := expr OutputRadix
        expr    := term (("+" | "-") term)*
        term    := primary ("*" primary)*
        primary := Number | "(" expr ")"
    """

    tokens: Peekable[Token]

    def __init__(self, tokens: Peekable[Token], expression: str) -> None:
        self.tokens = tokens
        self.expression = expression

    def parse_line(self) -> tuple[Node, Radix]:
        token = self.tokens.peek()
        if equal(token, TokenType.OutputRadix):
            raise EmptyExpression(self.expression, token.location)
        node = self.expression_parse()
        token = next(self.tokens)
        if equal(token, TokenType.RParen):
            raise UnbalancedParens(
                self.expression, token.location, token.expression, "unmatched ')'"
            )
        if not equal(token, TokenType.OutputRadix):
            raise TrailingTokens(self.expression, token.location, token.expression)
        logger.debug("parsed %r into %s node", self.expression, node.kind.name)
        return node, token.radix

    def expression_parse(self) -> Node:
        return self.convert_add_token()

    def convert_add_token(self) -> Node:
        node = self.convert_mul_token()
        while True:
            token = self.tokens.peek()
            if equal(token, TokenType.Plus) or equal(token, TokenType.Minus):
                next(self.tokens)
                next_node = self.convert_mul_token()
                node = new_binary(token, node, next_node)
                continue
            return node

    def convert_mul_token(self) -> Node:
        node = self.primary_token()
        while True:
            token = self.tokens.peek()
            if equal(token, TokenType.Star):
                next(self.tokens)
                next_node = self.primary_token()
                node = new_binary(token, node, next_node)
                continue
            return node

    def primary_token(self) -> Node:
        token = self.tokens.peek()
        if equal(token, TokenType.LParen):
            next(self.tokens)
            node = self.expression_parse()
            closing = self.tokens.peek()
            if equal(closing, TokenType.RParen):
                next(self.tokens)
                return node
            if equal(closing, TokenType.OutputRadix):
                raise UnbalancedParens(
                    self.expression, token.location, token.expression, "unmatched '('"
                )
            raise TrailingTokens(self.expression, closing.location, closing.expression)
        if equal(token, TokenType.Number):
            next(self.tokens)
            return new_number(token)
        raise UnexpectedToken(self.expression, token.location, token.expression)
