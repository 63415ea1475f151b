"""Graphviz DOT rendering of the abstract syntax tree."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Optional, Union

from minic.syntax_tree import AstNode, AstOperator

_OPERATOR_NAMES = {
    AstOperator.BLOCK: "block",
    AstOperator.RETURN: "return",
    AstOperator.FUNC_DEF: "func-def",
    AstOperator.COMPILE_UNIT: "compile-unit",
    AstOperator.FUNC_FORMAL_PARAMS: "formal-params",
    AstOperator.VAR_DECL: "var-decl",
    AstOperator.DECL_STMT: "decl-stmt",
    AstOperator.ADD: "+",
    AstOperator.SUB: "-",
    AstOperator.ASSIGN: "=",
    AstOperator.FUNC_CALL: "func-call",
    AstOperator.FUNC_REAL_PARAMS: "real-params",
    AstOperator.NEG: "-",
    AstOperator.MUL: "*",
    AstOperator.DIV: "/",
    AstOperator.MOD: "%",
}

_LEAF_ATTRIBUTES = (
    ("fontcolor", "black"),
    ("fontname", "SimSun"),
    ("shape", "record"),
    ("style", "filled"),
    ("fillcolor", "yellow"),
)

_INTERNAL_ATTRIBUTES = (("shape", "ellipse"),)


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _as_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def node_name(node: AstNode) -> str:
    """Return the text shown for ``node`` in the tree picture."""
    op = node.node_type
    if op is AstOperator.LEAF_LITERAL_UINT:
        return str(_as_int32(node.integer_val))
    if op is AstOperator.LEAF_LITERAL_FLOAT:
        return f"{_as_float32(node.float_val):f}"
    if op is AstOperator.LEAF_VAR_ID:
        return node.name
    if op is AstOperator.LEAF_TYPE:
        return str(node.type)
    return _OPERATOR_NAMES.get(op, "unknown")


def _quote(text: str, record: bool) -> str:
    special = '\\"{}|<>' if record else '\\"'
    escaped = "".join("\\" + ch if ch in special else ch for ch in text)
    return f'"{escaped}"'


class _DotBuilder:
    def __init__(self) -> None:
        self.lines: list[str] = []
        self._count = 0

    def _new_id(self) -> str:
        node_id = f"n{self._count}"
        self._count += 1
        return node_id

    def _emit_node(self, node_id: str, label: str, attributes, record: bool) -> None:
        parts = [f"label={_quote(label, record)}"]
        parts.extend(f"{key}={_quote(value, False)}" for key, value in attributes)
        self.lines.append(f"  {node_id} [{', '.join(parts)}];")

    def visit(self, node: Optional[AstNode]) -> Optional[str]:
        if node is None:
            return None
        if node.is_leaf():
            node_id = self._new_id()
            self._emit_node(node_id, node_name(node), _LEAF_ATTRIBUTES, record=True)
            return node_id
        child_ids = [cid for cid in map(self.visit, node.children) if cid is not None]
        node_id = self._new_id()
        self._emit_node(node_id, node_name(node), _INTERNAL_ATTRIBUTES, record=False)
        self.lines.extend(f"  {node_id} -> {child_id};" for child_id in child_ids)
        return node_id


def to_dot(root: Optional[AstNode]) -> str:
    """Return the tree as a directed Graphviz graph in DOT syntax.

    Children are emitted before their parent; edges keep the children's order.
    """
    builder = _DotBuilder()
    builder.visit(root)
    body = "\n".join(builder.lines)
    header = 'digraph ast {\n  dpi="600";'
    return f"{header}\n{body}\n}}\n" if body else f"{header}\n}}\n"


def output_ast(root: Optional[AstNode], file_path: Union[str, Path]) -> None:
    """Write the DOT description of the tree to ``file_path``."""
    Path(file_path).write_text(to_dot(root), encoding="utf-8")