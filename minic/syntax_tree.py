"""Abstract syntax tree nodes, lexical attributes and tree construction helpers."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

_UINT32_MASK = 0xFFFFFFFF


class BasicType(Enum):
    """Basic value types known to the front end."""

    NONE = 0
    VOID = 1
    INT = 2
    FLOAT = 3
    MAX = 4

    def __str__(self) -> str:
        return self.name.lower()


class AstOperator(Enum):
    """Kinds of syntax tree nodes."""

    # Leaf nodes
    LEAF_LITERAL_UINT = 0
    LEAF_LITERAL_FLOAT = 1
    LEAF_VAR_ID = 2
    LEAF_TYPE = 3

    # Internal nodes
    COMPILE_UNIT = 4
    FUNC_DEF = 5
    FUNC_FORMAL_PARAMS = 6
    FUNC_FORMAL_PARAM = 7
    FUNC_CALL = 8
    FUNC_REAL_PARAMS = 9
    BLOCK = 10
    COMPOUNDSTMT = 10
    RETURN = 11
    ASSIGN = 12
    DECL_STMT = 13
    VAR_DECL = 14
    ADD = 15
    SUB = 16
    MUL = 17
    DIV = 18
    MOD = 19
    NEG = 20
    MAX = 21


_LEAF_OPERATORS = frozenset(
    {
        AstOperator.LEAF_LITERAL_UINT,
        AstOperator.LEAF_LITERAL_FLOAT,
        AstOperator.LEAF_VAR_ID,
        AstOperator.LEAF_TYPE,
    }
)


@dataclass
class DigitIntAttr:
    """Unsigned integer literal as delivered by the lexer."""

    val: int
    lineno: int


@dataclass
class DigitRealAttr:
    """Real literal as delivered by the lexer."""

    val: float
    lineno: int


@dataclass
class VarIdAttr:
    """Identifier (variable or function name) as delivered by the lexer."""

    name: str
    lineno: int


@dataclass
class TypeAttr:
    """Type keyword as delivered by the lexer."""

    basic_type: BasicType
    lineno: int


@dataclass(eq=False)
class AstNode:
    """A node of the abstract syntax tree."""

    node_type: AstOperator
    type: BasicType = BasicType.VOID
    line_no: int = -1
    integer_val: int = 0
    float_val: float = 0.0
    name: str = ""
    parent: Optional["AstNode"] = field(default=None, repr=False)
    children: list["AstNode"] = field(default_factory=list)
    block_insts: list[Any] = field(default_factory=list, repr=False)
    value: Any = field(default=None, repr=False)
    need_scope: bool = True

    def is_leaf(self) -> bool:
        """Return True for literal, identifier and type nodes."""
        return self.node_type in _LEAF_OPERATORS

    def add_child(self, node: Optional["AstNode"]) -> "AstNode":
        """Append ``node`` as the last child; ``None`` is ignored. Returns self."""
        if node is not None:
            node.parent = self
            self.children.append(node)
        return self


def new_node(op: AstOperator, *args: Optional[AstNode]) -> AstNode:
    """Create a node of kind ``op`` whose children are the given nodes, in order."""
    parent = AstNode(op)
    for child in args:
        parent.add_child(child)
    return parent


def new_int_leaf(attr: DigitIntAttr) -> AstNode:
    """Create an unsigned integer literal leaf."""
    return AstNode(
        AstOperator.LEAF_LITERAL_UINT,
        type=BasicType.INT,
        line_no=attr.lineno,
        integer_val=attr.val & _UINT32_MASK,
    )


def new_id_leaf(name: str, line_no: int) -> AstNode:
    """Create an identifier leaf."""
    return AstNode(AstOperator.LEAF_VAR_ID, type=BasicType.VOID, line_no=line_no, name=name)


def new_type_leaf(basic_type: BasicType) -> AstNode:
    """Create a leaf that carries a type."""
    return AstNode(AstOperator.LEAF_TYPE, type=basic_type)


def type_attr_to_type(attr: TypeAttr) -> BasicType:
    """Map a lexical type attribute to a value type: int stays int, all else is void."""
    return BasicType.INT if attr.basic_type is BasicType.INT else BasicType.VOID


def create_contain_node(
    node_type: AstOperator,
    first_child: Optional[AstNode] = None,
    second_child: Optional[AstNode] = None,
    third_child: Optional[AstNode] = None,
) -> AstNode:
    """Create an internal node with up to three children."""
    return new_node(node_type, first_child, second_child, third_child)


def create_func_def(
    type_node: AstNode,
    name_node: AstNode,
    block_node: Optional[AstNode] = None,
    params_node: Optional[AstNode] = None,
) -> AstNode:
    """Create a function definition node: children are type, name, params and block."""
    node = AstNode(
        AstOperator.FUNC_DEF,
        type=type_node.type,
        line_no=name_node.line_no,
        name=name_node.name,
    )
    if params_node is None:
        params_node = AstNode(AstOperator.FUNC_FORMAL_PARAMS)
    if block_node is None:
        block_node = AstNode(AstOperator.BLOCK)
    node.add_child(type_node)
    node.add_child(name_node)
    node.add_child(params_node)
    node.add_child(block_node)
    return node


def create_func_def_from_attrs(
    type_attr: TypeAttr,
    id_attr: VarIdAttr,
    block_node: Optional[AstNode] = None,
    params_node: Optional[AstNode] = None,
) -> AstNode:
    """Create a function definition from lexical return type and name attributes."""
    type_node = create_type_node(type_attr)
    id_node = new_id_leaf(id_attr.name, id_attr.lineno)
    return create_func_def(type_node, id_node, block_node, params_node)


def create_func_call(funcname_node: AstNode, params_node: Optional[AstNode] = None) -> AstNode:
    """Create a function call node: children are the name and the actual parameters."""
    node = AstNode(AstOperator.FUNC_CALL, name=funcname_node.name)
    if params_node is None:
        params_node = AstNode(AstOperator.FUNC_REAL_PARAMS)
    node.add_child(funcname_node)
    node.add_child(params_node)
    return node


def create_type_node(attr: TypeAttr) -> AstNode:
    """Create a type leaf from a lexical type attribute."""
    return new_type_leaf(type_attr_to_type(attr))


def create_var_decl_node(basic_type: BasicType, id_attr: VarIdAttr) -> AstNode:
    """Create a variable declaration node holding a type leaf and a name leaf."""
    type_node = new_type_leaf(basic_type)
    id_node = new_id_leaf(id_attr.name, id_attr.lineno)
    decl_node = create_contain_node(AstOperator.VAR_DECL, type_node, id_node)
    decl_node.type = basic_type
    return decl_node


def create_var_decl_stmt_node(first_child: Optional[AstNode] = None) -> AstNode:
    """Create a declaration statement, optionally starting with one declaration."""
    stmt_node = create_contain_node(AstOperator.DECL_STMT)
    if first_child is not None:
        stmt_node.type = first_child.type
        stmt_node.add_child(first_child)
    return stmt_node


def create_var_decl_stmt_from_attrs(type_attr: TypeAttr, id_attr: VarIdAttr) -> AstNode:
    """Create a declaration statement declaring one variable."""
    decl_node = create_var_decl_node(type_attr_to_type(type_attr), id_attr)
    return create_var_decl_stmt_node(decl_node)


def add_var_decl_node(stmt_node: AstNode, id_attr: VarIdAttr) -> AstNode:
    """Append another variable of the statement's type to a declaration statement."""
    stmt_node.add_child(create_var_decl_node(stmt_node.type, id_attr))
    return stmt_node


class FrontEndExecutor(abc.ABC):
    """Base for front ends that turn a source file into a syntax tree."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.ast_root: Optional[AstNode] = None

    @abc.abstractmethod
    def run(self) -> bool:
        """Analyse the file and set ``ast_root``; return True on success."""