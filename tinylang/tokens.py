"""Token kinds of the TINY language and their listing representation."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Every kind of token the TINY scanner can produce."""

    # book-keeping tokens
    ENDFILE = enum.auto()
    ERROR = enum.auto()
    # reserved words
    IF = enum.auto()
    THEN = enum.auto()
    ELSE = enum.auto()
    END = enum.auto()
    REPEAT = enum.auto()
    UNTIL = enum.auto()
    READ = enum.auto()
    WRITE = enum.auto()
    # multicharacter tokens
    ID = enum.auto()
    NUM = enum.auto()
    # special symbols
    ASSIGN = enum.auto()
    EQ = enum.auto()
    LT = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    TIMES = enum.auto()
    OVER = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    SEMI = enum.auto()

    @property
    def is_reserved(self) -> bool:
        """True for the reserved-word token kinds."""
        return self in _RESERVED_KINDS


RESERVED_WORDS: dict[str, TokenType] = {
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "else": TokenType.ELSE,
    "end": TokenType.END,
    "repeat": TokenType.REPEAT,
    "until": TokenType.UNTIL,
    "read": TokenType.READ,
    "write": TokenType.WRITE,
}

_RESERVED_KINDS = frozenset(RESERVED_WORDS.values())

_SYMBOLS: dict[TokenType, str] = {
    TokenType.ASSIGN: ":=",
    TokenType.LT: "<",
    TokenType.EQ: "=",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.SEMI: ";",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.TIMES: "*",
    TokenType.OVER: "/",
}


@dataclass(frozen=True)
class Token:
    """A scanned token: its kind, the text it was read from and its line."""

    type: TokenType
    lexeme: str = ""
    lineno: int = 0

    def __str__(self) -> str:
        return format_token(self.type, self.lexeme)


def lookup_reserved(name: str) -> TokenType:
    """Return the reserved-word kind for ``name``, or ``TokenType.ID``."""
    return RESERVED_WORDS.get(name, TokenType.ID)


def format_token(token_type: TokenType, lexeme: str) -> str:
    """Describe a token as one listing line, without a line terminator."""
    if token_type.is_reserved:
        return f"reserved word: {lexeme}"
    symbol = _SYMBOLS.get(token_type)
    if symbol is not None:
        return symbol
    if token_type is TokenType.ENDFILE:
        return "EOF"
    if token_type is TokenType.NUM:
        return f"NUM, val= {lexeme}"
    if token_type is TokenType.ID:
        return f"ID, name= {lexeme}"
    if token_type is TokenType.ERROR:
        return f"ERROR: {lexeme}"
    raise ValueError(f"Unknown token: {token_type!r}")