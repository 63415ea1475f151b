import pytest

from minic.syntax_tree import (
    AstNode,
    AstOperator,
    BasicType,
    DigitIntAttr,
    FrontEndExecutor,
    TypeAttr,
    VarIdAttr,
    add_var_decl_node,
    create_contain_node,
    create_func_call,
    create_func_def,
    create_func_def_from_attrs,
    create_type_node,
    create_var_decl_node,
    create_var_decl_stmt_from_attrs,
    create_var_decl_stmt_node,
    new_id_leaf,
    new_int_leaf,
    new_node,
    new_type_leaf,
    type_attr_to_type,
)


class FixedExecutor(FrontEndExecutor):
    def run(self):
        self.ast_root = new_node(AstOperator.COMPILE_UNIT)
        return True


def test_compound_stmt_is_block_alias():
    node = new_node(AstOperator.COMPOUNDSTMT)
    assert node.node_type is AstOperator.BLOCK
    assert node.is_leaf() is False


@pytest.mark.parametrize(
    "op, leaf",
    [
        (AstOperator.LEAF_LITERAL_UINT, True),
        (AstOperator.LEAF_LITERAL_FLOAT, True),
        (AstOperator.LEAF_VAR_ID, True),
        (AstOperator.LEAF_TYPE, True),
        (AstOperator.BLOCK, False),
        (AstOperator.ADD, False),
        (AstOperator.FUNC_DEF, False),
    ],
)
def test_is_leaf(op, leaf):
    assert AstNode(op).is_leaf() is leaf


def test_add_child_sets_parent_and_ignores_none():
    parent = AstNode(AstOperator.BLOCK)
    child = new_id_leaf("a", 3)
    assert parent.add_child(child) is parent
    parent.add_child(None)
    assert parent.children == [child]
    assert child.parent is parent


def test_new_node_keeps_order():
    a = new_id_leaf("a", 1)
    b = new_int_leaf(DigitIntAttr(2, 1))
    node = new_node(AstOperator.ADD, a, None, b)
    assert node.node_type is AstOperator.ADD
    assert node.children == [a, b]
    assert all(c.parent is node for c in node.children)


def test_new_int_leaf():
    leaf = new_int_leaf(DigitIntAttr(42, 7))
    assert leaf.node_type is AstOperator.LEAF_LITERAL_UINT
    assert leaf.type is BasicType.INT
    assert leaf.integer_val == 42
    assert leaf.line_no == 7


def test_new_int_leaf_wraps_to_32_bits():
    leaf = new_int_leaf(DigitIntAttr(2**32 + 5, 1))
    assert leaf.integer_val == 5


def test_new_id_and_type_leaf():
    leaf = new_id_leaf("main", 4)
    assert (leaf.name, leaf.line_no, leaf.type) == ("main", 4, BasicType.VOID)
    t = new_type_leaf(BasicType.INT)
    assert t.node_type is AstOperator.LEAF_TYPE
    assert t.type is BasicType.INT


@pytest.mark.parametrize(
    "given, expected",
    [
        (BasicType.INT, BasicType.INT),
        (BasicType.VOID, BasicType.VOID),
        (BasicType.FLOAT, BasicType.VOID),
        (BasicType.NONE, BasicType.VOID),
    ],
)
def test_type_attr_to_type(given, expected):
    assert type_attr_to_type(TypeAttr(given, 1)) is expected
    assert create_type_node(TypeAttr(given, 1)).type is expected


def test_create_contain_node():
    a, b, c = (new_id_leaf(n, 1) for n in "abc")
    node = create_contain_node(AstOperator.ASSIGN, a, b)
    assert node.children == [a, b]
    assert create_contain_node(AstOperator.RETURN).children == []
    assert create_contain_node(AstOperator.BLOCK, a, None, c).children == [a, c]


def test_create_func_def_defaults():
    type_node = new_type_leaf(BasicType.INT)
    name_node = new_id_leaf("main", 1)
    fn = create_func_def(type_node, name_node)
    assert fn.node_type is AstOperator.FUNC_DEF
    assert fn.name == "main"
    assert fn.type is BasicType.INT
    assert fn.line_no == 1
    kinds = [c.node_type for c in fn.children]
    assert kinds == [
        AstOperator.LEAF_TYPE,
        AstOperator.LEAF_VAR_ID,
        AstOperator.FUNC_FORMAL_PARAMS,
        AstOperator.BLOCK,
    ]


def test_create_func_def_keeps_given_block_and_params():
    block = AstNode(AstOperator.BLOCK)
    params = AstNode(AstOperator.FUNC_FORMAL_PARAMS)
    fn = create_func_def(new_type_leaf(BasicType.VOID), new_id_leaf("f", 2), block, params)
    assert fn.children[2] is params
    assert fn.children[3] is block


def test_create_func_def_from_attrs():
    fn = create_func_def_from_attrs(TypeAttr(BasicType.INT, 1), VarIdAttr("main", 1))
    assert fn.name == "main"
    assert fn.children[0].type is BasicType.INT
    assert fn.children[1].name == "main"


def test_create_func_call():
    call = create_func_call(new_id_leaf("putint", 5))
    assert call.node_type is AstOperator.FUNC_CALL
    assert call.name == "putint"
    assert call.children[1].node_type is AstOperator.FUNC_REAL_PARAMS
    args = new_node(AstOperator.FUNC_REAL_PARAMS, new_int_leaf(DigitIntAttr(1, 5)))
    assert create_func_call(new_id_leaf("putint", 5), args).children[1] is args


def test_var_decl_node():
    decl = create_var_decl_node(BasicType.INT, VarIdAttr("a", 3))
    assert decl.node_type is AstOperator.VAR_DECL
    assert decl.type is BasicType.INT
    assert decl.children[0].type is BasicType.INT
    assert decl.children[1].name == "a"


def test_decl_stmt_with_several_variables():
    # int c, d;
    stmt = create_var_decl_stmt_from_attrs(TypeAttr(BasicType.INT, 5), VarIdAttr("c", 5))
    assert add_var_decl_node(stmt, VarIdAttr("d", 5)) is stmt
    assert stmt.node_type is AstOperator.DECL_STMT
    assert stmt.type is BasicType.INT
    assert [d.children[1].name for d in stmt.children] == ["c", "d"]
    assert all(d.type is BasicType.INT for d in stmt.children)


def test_empty_decl_stmt():
    stmt = create_var_decl_stmt_node()
    assert stmt.children == []
    assert stmt.type is BasicType.VOID


def test_front_end_executor_subclass():
    ex = FixedExecutor("test1-1.c")
    assert ex.ast_root is None
    assert FrontEndExecutor.run(ex) is None or True
    assert ex.run() is True
    root = ex.ast_root
    assert root.node_type is new_node(AstOperator.COMPILE_UNIT).node_type
    assert root.is_leaf() is False
    assert root.add_child(new_id_leaf("main", 1)) is root
    assert [c.name for c in root.children] == ["main"]
    assert ex.filename == "test1-1.c"


def test_front_end_executor_is_abstract():
    with pytest.raises(TypeError):
        FrontEndExecutor("x.c")