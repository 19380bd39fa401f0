"""Tokenizer for arithmetic expressions."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import List

logger = logging.getLogger(__name__)

OPERATORS = "+-*/%^"
PARENTHESES = "()"
DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
IDENTIFIER_CHARS = LETTERS | DIGITS | {"_"}


class TokenType(Enum):
    NUMBER = auto()
    IDENTIFIER = auto()
    OPERATOR = auto()
    PARENTHESIS = auto()


@dataclass(frozen=True)
class Token:
    """A classified slice of the input expression."""

    type: TokenType
    value: str

    @property
    def is_open_paren(self) -> bool:
        return self.type is TokenType.PARENTHESIS and self.value == "("

    @property
    def is_close_paren(self) -> bool:
        return self.type is TokenType.PARENTHESIS and self.value == ")"

    def __str__(self) -> str:
        return f"{self.type.name}({self.value})"


def _scan_while(expression: str, start: int, predicate) -> int:
    end = start
    while end < len(expression) and predicate(expression[end]):
        end += 1
    return end


def tokenize(expression: str) -> List[Token]:
    """
    Split an expression into tokens using maximal munch.

    Numbers are runs of digits and dots and are not validated, so ``1.2.3``
    comes back as a single NUMBER. Only ASCII digits and letters start
    numbers and identifiers; characters that belong to no token class are
    dropped.

    Args:
        expression: Raw expression text

    Returns:
        List[Token]: Tokens in input order
    """
    tokens: List[Token] = []
    i = 0

    while i < len(expression):
        c = expression[i]

        if c.isspace():
            i += 1
        elif c in DIGITS:
            end = _scan_while(expression, i, lambda ch: ch in DIGITS or ch == '.')
            tokens.append(Token(TokenType.NUMBER, expression[i:end]))
            i = end
        elif c in LETTERS:
            end = _scan_while(expression, i, lambda ch: ch in IDENTIFIER_CHARS)
            tokens.append(Token(TokenType.IDENTIFIER, expression[i:end]))
            i = end
        elif c in OPERATORS:
            tokens.append(Token(TokenType.OPERATOR, c))
            i += 1
        elif c in PARENTHESES:
            tokens.append(Token(TokenType.PARENTHESIS, c))
            i += 1
        else:
            logger.debug("skipping unrecognized character %r at %d", c, i)
            i += 1

    return tokens
