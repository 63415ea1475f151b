# minic

Building blocks for a compiler of a small subset of C that targets 32-bit ARM.
The package is a library. It has no third-party dependencies.

## Modules

### `minic.syntax_tree`

This module holds the abstract syntax tree and the helpers a parser uses to build it.

- `AstNode` is a tree node. It carries a kind (`AstOperator`), a value type
  (`BasicType`), a line number, an integer or float value, a name, its parent and
  its children. `is_leaf()` is true for literal, identifier and type nodes.
  `add_child(node)` appends a child, ignores `None`, and returns the node itself.
- `DigitIntAttr`, `DigitRealAttr`, `VarIdAttr` and `TypeAttr` are the values that
  a lexer hands to a parser.
- Constructors:
  - `new_node`, `new_int_leaf` (which keeps the value to 32 unsigned bits),
    `new_id_leaf` and `new_type_leaf`.
  - `create_contain_node` builds a node with up to three children.
  - `create_func_def` builds a node whose children are type, name, params and
    block. It fills in empty params and block nodes when they are missing.
    `create_func_def_from_attrs` does the same from lexical attributes.
  - `create_func_call` builds a call node. It fills in an empty actual-parameter
    node when none is given.
  - `create_type_node` and `type_attr_to_type` turn a lexical type into a type.
    `int` stays int and every other type becomes void.
  - `create_var_decl_node`, `create_var_decl_stmt_node`,
    `create_var_decl_stmt_from_attrs` and `add_var_decl_node` build declaration
    statements such as `int a, b;`.
- `FrontEndExecutor` is an abstract base for front ends. It holds `filename` and
  `ast_root`, and its `run()` returns True on success.

### `minic.graph`

- `node_name(node)` gives the label for a node. For example, `"+"` for an add
  node, `"func-def"` for a function definition, and the signed 32-bit value for
  an integer literal.
- `to_dot(root)` returns the tree as a directed Graphviz graph in DOT syntax.
  Leaves are drawn as yellow record boxes and inner nodes as ellipses.
- `output_ast(root, file_path)` writes that DOT text to a file.

### `minic.platform_arm32`

This module holds register names (`REG_NAMES`) and register numbers
(`TMP_REG_NO`, `FP_REG_NO`, `SP_REG_NO`, `LX_REG_NO`). It also has three checks:

- `const_expr(num)` tells whether `num` or `-num` can be encoded as an ARM
  rotated 8-bit immediate.
- `is_disp(num)` tells whether `num` is a valid load/store offset, which means
  `-4096 < num < 4096`.
- `is_reg(name)` tells whether `name` is a core register name.

### `minic.regalloc`

`SimpleRegisterAllocator` hands out registers r0–r10 to value objects. A value
object is any object with a mutable `load_reg_id` attribute that is `-1` while
the value holds no register.

- `allocate(var=None, no=-1)` gives out a register:
  - It tries register `no` first, then the lowest free register.
  - When no register is free, the value that was given a register earliest is
    spilled.
  - If no register is free and there is nothing to spill, it raises `RuntimeError`.
- `occupy(no)` takes a specific register and evicts whatever value holds it.
- `free_value(var)` and `free_register(no)` release a register.
- `is_busy(no)` and `was_used(no)` report the state of a register.
- A register number outside r0–r10 raises `IndexError`.

### `minic.iloc`

- `ArmInst` is one instruction, label or comment. `render()` returns its text,
  or `""` when the instruction is dead or empty.
- `ILocArm32` is an ordered instruction list, kept in `code`. Its emitters are:
  - `label`, `inst`, `comment`, `nop`, `jump` and `call_fun`
  - `mov_reg`
  - `load_imm` (`movw`, plus `movt` when the upper half is non-zero) and `load_symbol`
  - `load_base`, `store_base` and `lea_stack`, which fall back to a register
    when an offset or immediate is out of range
  - `alloc_stack(frame_size, tmp_reg_no)`

  `delete_unused_labels()` marks dead every `.`-label that no live branch
  targets. `output(out, output_empty=False)` writes assembly text, with
  instructions indented by a tab and labels not indented.

### `minic.codegen`

- `CodeGenerator` is an abstract base. `run(out_file_name="")` writes to the
  named file, or to standard output when the name is empty.
- `AsmCodeGenerator.generate(out)` writes the header, then the data section,
  then the code of every function in `module.functions` whose `builtin` is
  false. Subclasses supply `gen_header`, `gen_data_section` and `gen_function`.

## Example

```python
import sys

from minic.iloc import ILocArm32

code = ILocArm32()
code.label(".L1")
code.load_imm(0, 70000)
code.jump(".L1")
code.delete_unused_labels()
code.output(sys.stdout)
```

## What this package does not do

- There is no lexer or parser, so nothing turns C source text into a tree. Trees
  are built by calling the constructors in `minic.syntax_tree`.
- There is no intermediate representation, no symbol table and no concrete ARM32
  code generator. `AsmCodeGenerator` is only a base class, so this package
  produces no complete assembly file on its own.
- There is no command-line program.
- `output_ast` writes DOT text. It does not render images.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```