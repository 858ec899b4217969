"""Deterministic scanner that turns TINY source text into tokens."""

from __future__ import annotations

import enum
import io
from collections.abc import Iterator
from typing import TextIO

from tinylang.tokens import Token, TokenType, format_token, lookup_reserved

MAX_TOKEN_LEN = 40
"""Longest lexeme kept for a token, not counting one extra stored character."""

_LINE_CHUNK = 254
"""Most characters taken from the source in one read; longer lines are split."""

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    ";": TokenType.SEMI,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "/": TokenType.OVER,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "<": TokenType.LT,
    "=": TokenType.EQ,
}


class _State(enum.Enum):
    START = enum.auto()
    IN_ASSIGN = enum.auto()
    IN_COMMENT = enum.auto()
    IN_NUM = enum.auto()
    IN_ID = enum.auto()
    DONE = enum.auto()


def _is_space(c: str | None) -> bool:
    return c is not None and c in _SPACE


def _is_digit(c: str | None) -> bool:
    return c is not None and c in _DIGITS


def _is_alpha(c: str | None) -> bool:
    return c is not None and c in _LETTERS


class Scanner:
    """Reads TINY source one token at a time, optionally writing a listing.

    ``source`` is either the program text or a readable text stream. When
    ``listing`` is given, source lines are echoed to it (``echo_source``) and
    each recognised token is reported (``trace_lex``).
    """

    def __init__(
        self,
        source: str | TextIO,
        listing: TextIO | None = None,
        echo_source: bool = True,
        trace_lex: bool = True,
    ) -> None:
        self._source: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self.listing = listing
        self.echo_source = echo_source
        self.trace_lex = trace_lex
        self.lineno = 0
        self._line = ""
        self._pos = 0
        self._at_eof = False

    def _emit(self, text: str) -> None:
        if self.listing is not None:
            self.listing.write(text)

    def _next_char(self) -> str | None:
        if self._pos >= len(self._line):
            self.lineno += 1
            line = self._source.readline(_LINE_CHUNK)
            if not line:
                self._at_eof = True
                return None
            if self.echo_source:
                ending = "" if line.endswith("\n") else "\n"
                self._emit(f"{self.lineno:4d}: {line}{ending}")
            self._line = line
            self._pos = 0
        c = self._line[self._pos]
        self._pos += 1
        return c

    def _unget_char(self) -> None:
        if not self._at_eof:
            self._pos -= 1

    def get_token(self) -> Token:
        """Return the next token; at end of input, ENDFILE on every call."""
        state = _State.START
        chars: list[str] = []
        token_type = TokenType.ERROR

        while state is not _State.DONE:
            c = None if self._at_eof else self._next_char()
            save = True

            if state is _State.IN_ID:
                if not _is_alpha(c):
                    if c is None:
                        self.lineno -= 1
                    self._unget_char()
                    save = False
                    state = _State.DONE
                    token_type = TokenType.ID
            elif state is _State.IN_ASSIGN:
                state = _State.DONE
                if c == "=":
                    token_type = TokenType.ASSIGN
                else:
                    self._unget_char()
                    save = False
                    token_type = TokenType.ERROR
            elif state is _State.IN_COMMENT:
                save = False
                if c == "}":
                    state = _State.START
                elif c is None:
                    state = _State.DONE
                    token_type = TokenType.ENDFILE
            elif state is _State.IN_NUM:
                if not _is_digit(c):
                    self._unget_char()
                    save = False
                    state = _State.DONE
                    token_type = TokenType.NUM
            else:  # START
                if c == "{":
                    state = _State.IN_COMMENT
                    save = False
                elif _is_space(c):
                    save = False
                elif _is_digit(c):
                    state = _State.IN_NUM
                elif _is_alpha(c):
                    state = _State.IN_ID
                elif c == ":":
                    state = _State.IN_ASSIGN
                elif c is None:
                    state = _State.DONE
                    save = False
                    token_type = TokenType.ENDFILE
                elif c in _SINGLE_CHAR_TOKENS:
                    state = _State.DONE
                    save = False
                    token_type = _SINGLE_CHAR_TOKENS[c]
                else:
                    state = _State.DONE
                    token_type = TokenType.ERROR

            if save and c is not None and len(chars) <= MAX_TOKEN_LEN:
                chars.append(c)

        lexeme = "".join(chars)
        if token_type is TokenType.ID:
            token_type = lookup_reserved(lexeme)

        if self.trace_lex:
            self._emit(f"\t{self.lineno}: {format_token(token_type, lexeme)}\n")
        return Token(token_type, lexeme, self.lineno)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first ENDFILE."""
        while True:
            token = self.get_token()
            yield token
            if token.type is TokenType.ENDFILE:
                return


def scan(text: str) -> list[Token]:
    """Scan ``text`` without a listing and return all tokens, ENDFILE last."""
    return list(Scanner(text))