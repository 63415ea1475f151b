"""A simple register allocator that spills the oldest holder when registers run out."""

from __future__ import annotations

from typing import Any, Optional

from minic.platform_arm32 import MAX_USABLE_REG_NUM

NO_REGISTER = -1


class SimpleRegisterAllocator:
    """Hands out registers r0-r10 to values.

    A value is any object with a mutable ``load_reg_id`` attribute that holds
    ``-1`` while it has no register.
    """

    def __init__(self) -> None:
        self._busy: set[int] = set()
        self._used: set[int] = set()
        self._holders: list[Any] = []

    @staticmethod
    def _check(no: int) -> None:
        if not 0 <= no < MAX_USABLE_REG_NUM:
            raise IndexError(f"register {no} is outside r0-r{MAX_USABLE_REG_NUM - 1}")

    def _mark(self, no: int) -> None:
        self._busy.add(no)
        self._used.add(no)

    def is_busy(self, no: int) -> bool:
        """Return True if register ``no`` is currently taken."""
        self._check(no)
        return no in self._busy

    def was_used(self, no: int) -> bool:
        """Return True if register ``no`` has ever been taken."""
        self._check(no)
        return no in self._used

    def allocate(self, var: Optional[Any] = None, no: int = NO_REGISTER) -> int:
        """Give a register to ``var`` and return its number.

        ``no`` is tried first; otherwise the lowest free register is taken.
        When none is free, the value that got its register earliest gives it up.
        """
        if var is not None and var.load_reg_id != NO_REGISTER:
            return var.load_reg_id

        if no != NO_REGISTER and not self.is_busy(no):
            regno = no
        else:
            regno = next(
                (k for k in range(MAX_USABLE_REG_NUM) if k not in self._busy),
                NO_REGISTER,
            )

        if regno != NO_REGISTER:
            self._mark(regno)
        else:
            if not self._holders:
                raise RuntimeError("no register is free and none can be spilled")
            oldest = self._holders.pop(0)
            regno = oldest.load_reg_id
            oldest.load_reg_id = NO_REGISTER

        if var is not None:
            var.load_reg_id = regno
            self._holders.append(var)
        return regno

    def occupy(self, no: int) -> None:
        """Take register ``no``, evicting whichever value holds it."""
        if self.is_busy(no):
            self.free_register(no)
        self._mark(no)

    def free_value(self, var: Optional[Any]) -> None:
        """Release the register held by ``var``, if any."""
        if var is None or var.load_reg_id == NO_REGISTER:
            return
        self._busy.discard(var.load_reg_id)
        if var in self._holders:
            self._holders.remove(var)
        var.load_reg_id = NO_REGISTER

    def free_register(self, no: int) -> None:
        """Release register ``no``; ``-1`` is ignored."""
        if no == NO_REGISTER:
            return
        self._check(no)
        self._busy.discard(no)
        holder = next((v for v in self._holders if v.load_reg_id == no), None)
        if holder is not None:
            holder.load_reg_id = NO_REGISTER
            self._holders.remove(holder)