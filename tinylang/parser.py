"""Recursive-descent parser that builds a syntax tree for TINY programs."""

from __future__ import annotations

from typing import TextIO

from tinylang.scanner import Scanner
from tinylang.tokens import Token, TokenType, format_token
from tinylang.tree import ExpKind, StmtKind, TreeNode

_SEQUENCE_END = frozenset(
    {TokenType.ENDFILE, TokenType.END, TokenType.ELSE, TokenType.UNTIL}
)

_EXP_END = frozenset(
    {
        TokenType.RPAREN,
        TokenType.THEN,
        TokenType.END,
        TokenType.UNTIL,
        TokenType.ELSE,
        TokenType.ENDFILE,
        TokenType.SEMI,
    }
)

_COMPARISON = frozenset({TokenType.LT, TokenType.EQ})
_ADDITIVE = frozenset({TokenType.PLUS, TokenType.MINUS})
_MULTIPLICATIVE = frozenset({TokenType.TIMES, TokenType.OVER})


class Parser:
    """Parses the tokens of a scanner into a tree of statement nodes.

    Syntax errors do not stop parsing: each one is written to ``listing``
    (when given) and recorded in ``errors``, and the parser carries on.
    """

    def __init__(self, scanner: Scanner, listing: TextIO | None = None) -> None:
        self._scanner = scanner
        self.listing = listing
        self.errors: list[str] = []
        self._token = Token(TokenType.ENDFILE)

    @property
    def has_errors(self) -> bool:
        """True once any syntax error has been reported."""
        return bool(self.errors)

    def _emit(self, text: str) -> None:
        if self.listing is not None:
            self.listing.write(text)

    def _advance(self) -> None:
        self._token = self._scanner.get_token()

    @property
    def _type(self) -> TokenType:
        return self._token.type

    def _syntax_error(self, message: str) -> None:
        text = f"Syntax error at line {self._scanner.lineno}: {message}"
        self._emit(f"\n>>> {text}")
        self.errors.append(text.rstrip("\n"))

    def _unexpected_token(self) -> None:
        description = format_token(self._type, self._token.lexeme)
        text = f"Syntax error at line {self._scanner.lineno}: unexpected token -> "
        self._emit(f"\n>>> {text}{description}\n")
        self.errors.append(text + description)

    def _match(self, expected: TokenType) -> None:
        if self._type is expected:
            self._advance()
        else:
            self._unexpected_token()
            self._emit("      ")

    def _stmt_node(self, kind: StmtKind) -> TreeNode:
        return TreeNode.stmt(kind, self._scanner.lineno)

    def _exp_node(self, kind: ExpKind) -> TreeNode:
        return TreeNode.exp(kind, self._scanner.lineno)

    def _stmt_sequence(self) -> TreeNode | None:
        first = self._statement()
        last = first
        while self._type not in _SEQUENCE_END:
            self._match(TokenType.SEMI)
            node = self._statement()
            if node is None:
                continue
            if first is None or last is None:
                first = last = node
            else:
                last.sibling = node
                last = node
        return first

    def _statement(self) -> TreeNode | None:
        kind = self._type
        if kind is TokenType.IF:
            return self._if_stmt()
        if kind is TokenType.REPEAT:
            return self._repeat_stmt()
        if kind is TokenType.ID:
            return self._assign_stmt()
        if kind is TokenType.READ:
            return self._read_stmt()
        if kind is TokenType.WRITE:
            return self._write_stmt()
        self._unexpected_token()
        self._advance()
        return None

    def _repeat_stmt(self) -> TreeNode:
        node = self._stmt_node(StmtKind.REPEAT)
        self._match(TokenType.REPEAT)
        node.children[0] = self._stmt_sequence()
        self._match(TokenType.UNTIL)
        node.children[1] = self._exp()
        return node

    def _if_stmt(self) -> TreeNode:
        node = self._stmt_node(StmtKind.IF)
        self._match(TokenType.IF)
        node.children[0] = self._exp()
        self._match(TokenType.THEN)
        node.children[1] = self._stmt_sequence()
        if self._type is TokenType.ELSE:
            self._match(TokenType.ELSE)
            node.children[2] = self._stmt_sequence()
        self._match(TokenType.END)
        return node

    def _assign_stmt(self) -> TreeNode:
        node = self._stmt_node(StmtKind.ASSIGN)
        node.name = self._token.lexeme
        self._match(TokenType.ID)
        self._match(TokenType.ASSIGN)
        node.children[0] = self._exp()
        return node

    def _read_stmt(self) -> TreeNode:
        node = self._stmt_node(StmtKind.READ)
        self._match(TokenType.READ)
        if self._type is TokenType.ID:
            node.name = self._token.lexeme
        self._match(TokenType.ID)
        return node

    def _write_stmt(self) -> TreeNode:
        node = self._stmt_node(StmtKind.WRITE)
        self._match(TokenType.WRITE)
        node.children[0] = self._exp()
        return node

    def _binary(self, left: TreeNode | None) -> TreeNode:
        node = self._exp_node(ExpKind.OP)
        node.children[0] = left
        node.op = self._type
        self._match(self._type)
        return node

    def _exp(self) -> TreeNode | None:
        tree = self._simple_exp()
        if self._type in _COMPARISON:
            tree = self._binary(tree)
            tree.children[1] = self._simple_exp()
        elif self._type not in _EXP_END:
            self._unexpected_token()
            self._match(self._type)
        return tree

    def _simple_exp(self) -> TreeNode | None:
        tree = self._term()
        while self._type in _ADDITIVE:
            tree = self._binary(tree)
            tree.children[1] = self._term()
        return tree

    def _term(self) -> TreeNode | None:
        tree = self._factor()
        while self._type in _MULTIPLICATIVE:
            tree = self._binary(tree)
            tree.children[1] = self._factor()
        return tree

    def _factor(self) -> TreeNode | None:
        kind = self._type
        if kind is TokenType.NUM:
            node = self._exp_node(ExpKind.CONST)
            node.val = int(self._token.lexeme)
            self._match(TokenType.NUM)
            return node
        if kind is TokenType.ID:
            node = self._exp_node(ExpKind.ID)
            node.name = self._token.lexeme
            self._match(TokenType.ID)
            return node
        if kind is TokenType.LPAREN:
            self._match(TokenType.LPAREN)
            node = self._exp()
            self._match(TokenType.RPAREN)
            return node
        self._unexpected_token()
        self._advance()
        return None

    def parse(self) -> TreeNode | None:
        """Parse a whole program and return its first statement node."""
        self._advance()
        tree = self._stmt_sequence()
        if self._type is not TokenType.ENDFILE:
            self._syntax_error("Code ends before file\n")
        return tree


def parse(text: str, listing: TextIO | None = None) -> TreeNode | None:
    """Parse TINY source ``text``; trace and errors go to ``listing`` if given."""
    scanner = Scanner(text, listing)
    return Parser(scanner, listing).parse()