"""Syntax tree nodes for TINY programs and their indented listing."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from tinylang.tokens import TokenType, format_token

MAX_CHILDREN = 3


class NodeKind(enum.Enum):
    STMT = enum.auto()
    EXP = enum.auto()


class StmtKind(enum.Enum):
    IF = enum.auto()
    REPEAT = enum.auto()
    ASSIGN = enum.auto()
    READ = enum.auto()
    WRITE = enum.auto()


class ExpKind(enum.Enum):
    OP = enum.auto()
    CONST = enum.auto()
    ID = enum.auto()


class ExpType(enum.Enum):
    """Type of an expression, used for type checking."""

    VOID = enum.auto()
    INTEGER = enum.auto()
    BOOLEAN = enum.auto()


def _empty_children() -> list[TreeNode | None]:
    return [None] * MAX_CHILDREN


@dataclass
class TreeNode:
    """A statement or expression node with up to three children and a sibling."""

    nodekind: NodeKind
    kind: StmtKind | ExpKind
    lineno: int = 0
    children: list[TreeNode | None] = field(default_factory=_empty_children)
    sibling: TreeNode | None = None
    op: TokenType | None = None
    val: int | None = None
    name: str | None = None
    type: ExpType = ExpType.VOID

    @classmethod
    def stmt(cls, kind: StmtKind, lineno: int) -> TreeNode:
        """Create a statement node of the given kind."""
        return cls(NodeKind.STMT, kind, lineno)

    @classmethod
    def exp(cls, kind: ExpKind, lineno: int) -> TreeNode:
        """Create an expression node of the given kind, typed as void."""
        return cls(NodeKind.EXP, kind, lineno, type=ExpType.VOID)

    def iter_siblings(self) -> Iterator[TreeNode]:
        """Yield this node and then each following sibling in order."""
        node: TreeNode | None = self
        while node is not None:
            yield node
            node = node.sibling


def _describe(node: TreeNode) -> str:
    name = node.name if node.name is not None else ""
    if node.nodekind is NodeKind.STMT:
        if node.kind is StmtKind.IF:
            return "If"
        if node.kind is StmtKind.REPEAT:
            return "Repeat"
        if node.kind is StmtKind.ASSIGN:
            return f"Assign to: {name}"
        if node.kind is StmtKind.READ:
            return f"Read: {name}"
        if node.kind is StmtKind.WRITE:
            return "Write"
        return "Unknown ExpNode kind"
    if node.nodekind is NodeKind.EXP:
        if node.kind is ExpKind.OP:
            op = format_token(node.op, "") if node.op is not None else ""
            return f"Op: {op}"
        if node.kind is ExpKind.CONST:
            return f"Const: {node.val}"
        if node.kind is ExpKind.ID:
            return f"Id: {name}"
        return "Unknown ExpNode kind"
    return "Unknown node kind"


def _tree_lines(tree: TreeNode | None, indent: int) -> Iterator[str]:
    indent += 2
    if tree is None:
        return
    for node in tree.iter_siblings():
        yield " " * indent + _describe(node)
        for child in node.children:
            yield from _tree_lines(child, indent)


def format_tree(tree: TreeNode | None) -> str:
    """Render a tree as indented lines, children two spaces deeper."""
    return "".join(line + "\n" for line in _tree_lines(tree, 0))