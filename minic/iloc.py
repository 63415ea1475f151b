"""ARM32 instruction sequences: building, label pruning and assembly text output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from minic.platform_arm32 import (
    FP_REG_NO,
    MAX_REG_NUM,
    REG_NAMES,
    SP_REG_NO,
    const_expr,
    is_disp,
)

LABEL_MARK = ":"


def _reg(no: int) -> str:
    if not 0 <= no < MAX_REG_NUM:
        raise IndexError(f"register number {no} is outside r0-r{MAX_REG_NUM - 1}")
    return REG_NAMES[no]


@dataclass
class ArmInst:
    """One ARM32 assembly instruction, label or comment."""

    opcode: str
    result: str = ""
    arg1: str = ""
    arg2: str = ""
    cond: str = ""
    addition: str = ""
    dead: bool = False

    def replace(
        self,
        opcode: str,
        result: str = "",
        arg1: str = "",
        arg2: str = "",
        cond: str = "",
        addition: str = "",
    ) -> None:
        """Overwrite the instruction's fields in place."""
        self.opcode = opcode
        self.result = result
        self.arg1 = arg1
        self.arg2 = arg2
        self.cond = cond
        self.addition = addition

    def set_dead(self) -> None:
        """Mark the instruction as removed; it then renders as nothing."""
        self.dead = True

    @property
    def is_label(self) -> bool:
        return self.result == LABEL_MARK

    def render(self) -> str:
        """Return the instruction as assembly text, or '' for dead or empty ones."""
        if self.dead or not self.opcode:
            return ""
        text = self.opcode + self.cond
        if self.result:
            text += self.result if self.is_label else " " + self.result
        for operand in (self.arg1, self.arg2, self.addition):
            if operand:
                text += "," + operand
        return text


class ILocArm32:
    """An ordered ARM32 instruction sequence with helpers that emit common patterns."""

    def __init__(self) -> None:
        self.code: list[ArmInst] = []

    def _emit(self, *fields: str) -> None:
        self.code.append(ArmInst(*fields))

    def comment(self, text: str) -> None:
        """Emit an assembly comment line."""
        self._emit("@", text)

    def to_str(self, num: int, flag: bool = True) -> str:
        """Format ``num``; with ``flag`` it becomes an immediate operand (``#`` prefix)."""
        return ("#" if flag else "") + str(num)

    def label(self, name: str) -> None:
        """Emit a label definition."""
        self._emit(name, LABEL_MARK)

    def inst(self, op: str, rs: str, *args: str) -> None:
        """Emit ``op`` with a result operand and up to two source operands."""
        if len(args) > 2:
            raise TypeError(f"inst() takes at most two source operands, got {len(args)}")
        self._emit(op, rs, *args)

    def load_imm(self, rs_reg_no: int, constant: int) -> None:
        """Load a 32-bit constant with movw, adding movt when the upper half is non-zero."""
        reg = _reg(rs_reg_no)
        self._emit("movw", reg, f"#:lower16:{constant}")
        if (constant >> 16) & 0xFFFF:
            self._emit("movt", reg, f"#:upper16:{constant}")

    def load_symbol(self, rs_reg_no: int, name: str) -> None:
        """Load the address of symbol ``name`` into a register."""
        reg = _reg(rs_reg_no)
        self._emit("movw", reg, f"#:lower16:{name}")
        self._emit("movt", reg, f"#:upper16:{name}")

    def load_base(self, rs_reg_no: int, base_reg_no: int, offset: int) -> None:
        """Load from ``[base, #offset]``, going through the result register for large offsets."""
        rs_reg = _reg(rs_reg_no)
        base = _reg(base_reg_no)
        if is_disp(offset):
            if offset:
                base += "," + self.to_str(offset)
        else:
            self.load_imm(rs_reg_no, offset)
            base += "," + rs_reg
        self._emit("ldr", rs_reg, f"[{base}]")

    def store_base(self, src_reg_no: int, base_reg_no: int, disp: int, tmp_reg_no: int) -> None:
        """Store to ``[base, #disp]``, using ``tmp_reg_no`` for displacements out of range."""
        src = _reg(src_reg_no)
        base = _reg(base_reg_no)
        if is_disp(disp):
            if disp:
                base += "," + self.to_str(disp)
        else:
            self.load_imm(tmp_reg_no, disp)
            base += "," + _reg(tmp_reg_no)
        self._emit("str", src, f"[{base}]")

    def lea_stack(self, rs_reg_no: int, base_reg_no: int, offset: int) -> None:
        """Compute the address ``base + offset`` into a register."""
        rs_reg = _reg(rs_reg_no)
        base = _reg(base_reg_no)
        if const_expr(offset):
            self._emit("add", rs_reg, base, self.to_str(offset))
        else:
            self.load_imm(rs_reg_no, offset)
            self._emit("add", rs_reg, base, rs_reg)

    def mov_reg(self, rs_reg_no: int, src_reg_no: int) -> None:
        """Copy one register to another."""
        self._emit("mov", _reg(rs_reg_no), _reg(src_reg_no))

    def alloc_stack(self, frame_size: int, tmp_reg_no: int) -> None:
        """Set up fp and reserve ``frame_size`` bytes of stack; nothing for an empty frame."""
        if frame_size == 0:
            return
        self.mov_reg(FP_REG_NO, SP_REG_NO)
        if const_expr(frame_size):
            self._emit("sub", "sp", "sp", self.to_str(frame_size))
        else:
            self.load_imm(tmp_reg_no, frame_size)
            self._emit("sub", "sp", "sp", _reg(tmp_reg_no))

    def call_fun(self, name: str) -> None:
        """Emit a call to function ``name``."""
        self._emit("bl", name)

    def nop(self) -> None:
        """Emit an empty placeholder instruction."""
        self._emit("")

    def jump(self, label: str) -> None:
        """Emit an unconditional branch to ``label``."""
        self._emit("b", label)

    def delete_unused_labels(self) -> None:
        """Mark dead every label that no live branch instruction targets."""
        labels = [
            inst
            for inst in self.code
            if not inst.dead and inst.opcode.startswith(".") and inst.is_label
        ]
        targets = {
            inst.result
            for inst in self.code
            if not inst.dead and inst.opcode.startswith("b")
        }
        for label in labels:
            if label.opcode not in targets:
                label.set_dead()

    def output(self, out: TextIO, output_empty: bool = False) -> None:
        """Write the sequence as assembly text; labels are not indented."""
        for inst in self.code:
            text = inst.render()
            if inst.is_label:
                out.write(f"{text}\n")
            elif text:
                out.write(f"\t{text}\n")
            elif output_empty:
                out.write("\n")