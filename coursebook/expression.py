"""Tokenizer and parser for a tiny addition/subtraction language."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

__all__ = [
    "Op",
    "TokenKind",
    "Token",
    "Var",
    "Number",
    "Operation",
    "Expression",
    "TokenizerError",
    "ParserError",
    "tokenize",
    "parse",
    "main",
]

_U32_MAX = 2**32 - 1
_DIGITS = frozenset("0123456789")
_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_IDENT_TAIL = _LOWER | _DIGITS | {"_"}


class Op(Enum):
    """An arithmetic operator."""

    ADD = "+"
    SUB = "-"


class TokenKind(Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"


@dataclass(frozen=True)
class Token:
    """A token of the expression language."""

    kind: TokenKind
    value: Union[str, Op]


@dataclass(frozen=True)
class Var:
    """A reference to a variable."""

    name: str


@dataclass(frozen=True)
class Number:
    """A literal number."""

    value: int


@dataclass(frozen=True)
class Operation:
    """A binary operation."""

    left: "Expression"
    op: Op
    right: "Expression"


Expression = Union[Var, Number, Operation]


class TokenizerError(ValueError):
    """Raised on a character the language does not allow."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Unexpected character '{char}' in input")
        self.char = char


class ParserError(ValueError):
    """Raised when the input is not a valid expression."""

    def __init__(self, message: str, token: Token | None = None) -> None:
        super().__init__(message)
        self.token = token


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text``; raise TokenizerError on a bad character."""
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        start = pos
        pos += 1
        if char in _DIGITS:
            while pos < length and text[pos] in _DIGITS:
                pos += 1
            yield Token(TokenKind.NUMBER, text[start:pos])
        elif char in _LOWER:
            while pos < length and text[pos] in _IDENT_TAIL:
                pos += 1
            yield Token(TokenKind.IDENTIFIER, text[start:pos])
        elif char == "+":
            yield Token(TokenKind.OPERATOR, Op.ADD)
        elif char == "-":
            yield Token(TokenKind.OPERATOR, Op.SUB)
        else:
            raise TokenizerError(char)


def _next_token(tokens: Iterator[Token]) -> Token | None:
    try:
        return next(tokens)
    except StopIteration:
        return None
    except TokenizerError as error:
        raise ParserError(f"Tokenizer error: {error}") from error


def _operand(token: Token | None) -> Expression:
    if token is None:
        raise ParserError("Unexpected end of input")
    if token.kind is TokenKind.NUMBER:
        value = int(str(token.value))
        if value > _U32_MAX:
            raise ParserError("Invalid number", token)
        return Number(value)
    if token.kind is TokenKind.IDENTIFIER:
        return Var(str(token.value))
    raise ParserError(f"Unexpected token {token!r}", token)


def parse(text: str) -> Expression:
    """Parse ``text``; operators group to the right."""
    tokens = tokenize(text)
    operands: list[Expression] = []
    operators: list[Op] = []
    while True:
        operands.append(_operand(_next_token(tokens)))
        token = _next_token(tokens)
        if token is None:
            break
        if token.kind is not TokenKind.OPERATOR:
            raise ParserError(f"Unexpected token {token!r}", token)
        operators.append(token.value)  # type: ignore[arg-type]

    expression = operands.pop()
    for op in reversed(operators):
        expression = Operation(operands.pop(), op, expression)
    return expression


def main(argv: list[str] | None = None) -> int:
    """Parse an expression and print its tree."""
    parser = argparse.ArgumentParser(description="Parse an arithmetic expression.")
    parser.add_argument("expression", nargs="?", default="10+foo+20-30")
    args = parser.parse_args(argv)
    try:
        expression = parse(args.expression)
    except ParserError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(repr(expression))
    return 0