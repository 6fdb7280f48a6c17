import logging
from dataclasses import dataclass

from .alu import ALU
from .decoder import Immediate, Instruction, Opcode, Operand, RegisterRef
from .registers import WORD_MASK, RegisterBank, reg_name, to_signed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class Output:
    text: str
    register: str = ""


@dataclass(frozen=True)
class Terminate:
    pass


CONTINUE = Continue()
TERMINATE = Terminate()

# opcode -> ALU op taking (source, operand2)
_ALU_OPS = {
    Opcode.ADD: "ADD",
    Opcode.SUB: "SUB",
    Opcode.LSL: "LSL",
    Opcode.LSR: "LSR",
    Opcode.ASR: "ASR",
    Opcode.ROR: "ROR",
}


def resolve(operand: Operand, bank: RegisterBank) -> int:
    """Current 32-bit value of an operand. Never fails."""
    if isinstance(operand, Immediate):
        return operand.value & WORD_MASK
    if isinstance(operand, RegisterRef):
        return bank[operand.index]
    raise TypeError(f"not an operand: {operand!r}")


def _write(bank: RegisterBank, dest: RegisterRef, value: int):
    bank[dest.index] = value
    logger.debug("%s <- 0x%08X", reg_name(dest.index), bank[dest.index])


def execute(instr: Instruction, bank: RegisterBank, signed: bool = True):
    """Apply one decoded instruction to the bank.

    Returns CONTINUE after a register write, Output for PRINT and
    TERMINATE for EXIT. ``signed`` selects how PRINT renders the word.
    """
    op = instr.opcode
    ops = instr.operands

    if op is Opcode.MOV:
        _write(bank, ops[0], resolve(ops[1], bank))
        return CONTINUE

    elif op in _ALU_OPS:
        a = resolve(ops[1], bank)
        b = resolve(ops[2], bank)
        _write(bank, ops[0], ALU.execute(_ALU_OPS[op], a, b))
        return CONTINUE

    elif op is Opcode.RRX:
        # carry-in is always 0
        _write(bank, ops[0], ALU.execute("RRX", resolve(ops[1], bank), 0))
        return CONTINUE

    elif op is Opcode.PRINT:
        value = resolve(ops[0], bank)
        if signed:
            value = to_signed(value)
        return Output(str(value), str(ops[0]))

    elif op is Opcode.EXIT:
        return TERMINATE

    raise AssertionError(f"unhandled opcode {op}")
