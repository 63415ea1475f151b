"""ARM32 platform facts: register names and immediate/offset encodability."""

from __future__ import annotations

MAX_REG_NUM = 16
"""Number of ARM32 core registers."""

MAX_USABLE_REG_NUM = 11
"""General purpose registers r0-r10 available to the allocator."""

TMP_REG_NO = 10
"""Register borrowed for temporary use (large immediates and the like)."""

FP_REG_NO = 11
SP_REG_NO = 13
LX_REG_NO = 14

REG_NAMES = (
    "r0",
    "r1",
    "r2",
    "r3",
    "r4",
    "r5",
    "r6",
    "r7",
    "r8",
    "r9",
    "r10",
    "fp",
    "ip",
    "sp",
    "lr",
    "pc",
)

_REG_NAME_SET = frozenset(REG_NAMES)
_MASK32 = 0xFFFFFFFF


def _rotate_left_two(num: int) -> int:
    return ((num << 2) | (num >> 30)) & _MASK32


def _is_rotated_byte(num: int) -> bool:
    value = num & _MASK32
    for _ in range(16):
        if value <= 0xFF:
            return True
        value = _rotate_left_two(value)
    return False


def const_expr(num: int) -> bool:
    """Return True if ``num`` or its negation is an 8-bit value rotated by an even amount."""
    return _is_rotated_byte(num) or _is_rotated_byte(-num)


def is_disp(num: int) -> bool:
    """Return True if ``num`` is a valid load/store displacement."""
    return -4096 < num < 4096


def is_reg(name: str) -> bool:
    """Return True if ``name`` names an ARM32 core register."""
    return name in _REG_NAME_SET