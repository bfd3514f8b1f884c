"""Assembly generation with a small pool of registers."""

from __future__ import annotations

from typing import TextIO

from .tree import ASTNode, NodeOp


class RegisterError(Exception):
    """Raised when registers run out or are freed twice."""


_REGISTERS = ("%r8", "%r9", "%r10", "%r11")

_PREAMBLE = (
    "\tglobal\tmain\n"
    "\textern\tprintf\n"
    "\tsection\t.text\n"
    'LC0:\tdb\t"%d",10,0\n'
    "printint:\n"
    "\tpush\trbp\n"
    "\tmov\trbp, rsp\n"
    "\tsub\trsp, 16\n"
    "\tmov\t[rbp-4], edi\n"
    "\tmov\teax, [rbp-4]\n"
    "\tmov\tesi, eax\n"
    "\tlea\trdi, [rel LC0]\n"
    "\tmov\teax, 0\n"
    "\tcall\tprintf\n"
    "\tnop\n"
    "\tleave\n"
    "\tret\n"
    "\n"
    "main:\n"
    "\tpush\trbp\n"
    "\tmov\trbp, rsp\n"
)

_POSTAMBLE = "\tmov\teax, 0\n\tpop\trbp\n\tret\n"


class CodeGenerator:
    """Writes assembly for expression trees to a text stream."""

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self._free = [True] * len(_REGISTERS)

    def free_all(self) -> None:
        """Mark every register as available."""
        self._free = [True] * len(_REGISTERS)

    def _alloc(self) -> int:
        for reg, free in enumerate(self._free):
            if free:
                self._free[reg] = False
                return reg
        raise RegisterError("Out of registers!")

    def _release(self, reg: int) -> None:
        if self._free[reg]:
            raise RegisterError(f"Error trying to free register {reg}")
        self._free[reg] = True

    def preamble(self) -> None:
        """Write the program prologue and reset the registers."""
        self.free_all()
        self.out.write(_PREAMBLE)

    def postamble(self) -> None:
        """Write the program epilogue."""
        self.out.write(_POSTAMBLE)

    def load(self, value: int) -> int:
        """Load a constant into a fresh register and return its number."""
        reg = self._alloc()
        self.out.write(f"\tmovq ${value}, {_REGISTERS[reg]}\n")
        return reg

    def add(self, r1: int, r2: int) -> int:
        self.out.write(f"\taddq {_REGISTERS[r1]}, {_REGISTERS[r2]}\n")
        self._release(r1)
        return r2

    def sub(self, r1: int, r2: int) -> int:
        self.out.write(f"\tsubq {_REGISTERS[r1]}, {_REGISTERS[r2]}\n")
        self._release(r1)
        return r2

    def mul(self, r1: int, r2: int) -> int:
        self.out.write(f"\timulq {_REGISTERS[r1]}, {_REGISTERS[r2]}\n")
        self._release(r1)
        return r2

    def div(self, r1: int, r2: int) -> int:
        self.out.write(
            f"\tmovq {_REGISTERS[r1]}, %rax\n"
            "\tcqo\n"
            f"\tidivq {_REGISTERS[r2]}\n"
            f"\tmovq %rax, {_REGISTERS[r1]}\n"
        )
        self._release(r2)
        return r1

    def print_int(self, r: int) -> None:
        """Print the value held in register ``r`` and release it."""
        self.out.write(f"\tmovq {_REGISTERS[r]}, %rdi\n\tcall printint\n")
        self._release(r)

    def generate(self, node: ASTNode) -> int:
        """Emit code for ``node``; return the register holding its value."""
        if node.op is NodeOp.INTLIT:
            return self.load(node.intvalue)
        emitters = {
            NodeOp.ADD: self.add,
            NodeOp.SUBTRACT: self.sub,
            NodeOp.MULTIPLY: self.mul,
            NodeOp.DIVIDE: self.div,
        }
        emit = emitters.get(node.op)
        if emit is None:
            raise ValueError(f"Unknown AST operator {int(node.op)}")
        if node.left is None or node.right is None:
            raise ValueError(f"AST operator {int(node.op)} needs two operands")
        left = self.generate(node.left)
        right = self.generate(node.right)
        return emit(left, right)