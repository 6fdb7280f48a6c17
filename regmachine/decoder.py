"""Text -> Instruction.

One line holds one instruction: an opcode, then a comma-separated operand
list. ``#`` marks an immediate (decimal or ``0x`` hex), anything else must
name a register ``r0``..``r15``.

    >>> decode("ADD r3, r1, #0x10")
    Instruction(opcode=<Opcode.ADD: 'ADD'>, operands=(RegisterRef(index=3), RegisterRef(index=1), Immediate(value=16)))
"""
import enum
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .registers import GENERAL_REGS, WORD_BITS, reg_name

IMM_MIN = -(1 << (WORD_BITS - 1))
IMM_MAX = (1 << WORD_BITS) - 1

_REG_RE = re.compile(r"[rR](\d+)", re.ASCII)
_DEC_RE = re.compile(r"[+-]?\d+", re.ASCII)
_HEX_RE = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]+)", re.ASCII)


class DecodeError(ValueError):
    """A line that does not match any instruction shape."""

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line


class Opcode(enum.Enum):
    MOV = "MOV"
    ADD = "ADD"
    SUB = "SUB"
    LSL = "LSL"
    LSR = "LSR"
    ASR = "ASR"
    ROR = "ROR"
    RRX = "RRX"
    PRINT = "PRINT"
    EXIT = "EXIT"


@dataclass(frozen=True)
class Immediate:
    value: int

    def __str__(self):
        return f"#{self.value}"


@dataclass(frozen=True)
class RegisterRef:
    index: int

    def __str__(self):
        return reg_name(self.index)


Operand = Union[Immediate, RegisterRef]


@dataclass(frozen=True)
class Instruction:
    opcode: Opcode
    operands: Tuple[Operand, ...] = ()

    def __str__(self):
        if not self.operands:
            return self.opcode.value
        return f"{self.opcode.value} " + ", ".join(str(o) for o in self.operands)


# Operand kinds per position: "reg" only accepts a register,
# "any" accepts an immediate or a register.
SHAPES = {
    Opcode.MOV:   (("reg", "any"),        "MOV <register>, <value>"),
    Opcode.ADD:   (("reg", "reg", "any"), "ADD <dest_register>, <reg_operand>, <operand>"),
    Opcode.SUB:   (("reg", "reg", "any"), "SUB <dest_register>, <reg_operand>, <operand>"),
    Opcode.LSL:   (("reg", "reg", "any"), "LSL <dest_register>, <source_register>, <shift_amount>"),
    Opcode.LSR:   (("reg", "reg", "any"), "LSR <dest_register>, <source_register>, <shift_amount>"),
    Opcode.ASR:   (("reg", "reg", "any"), "ASR <dest_register>, <source_register>, <shift_amount>"),
    Opcode.ROR:   (("reg", "reg", "any"), "ROR <dest_register>, <source_register>, <rotate_amount>"),
    Opcode.RRX:   (("reg", "reg"),        "RRX <dest_register>, <source_register>"),
    Opcode.PRINT: (("reg",),              "PRINT <register>"),
    Opcode.EXIT:  ((),                    "EXIT"),
}


def parse_immediate(body: str) -> int:
    """Parse the text after ``#``: signed decimal or ``0x`` hex."""
    m = _HEX_RE.fullmatch(body)
    try:
        if m:
            value = int(m.group(2), 16)
            if m.group(1) == "-":
                value = -value
        elif _DEC_RE.fullmatch(body):
            value = int(body, 10)
        else:
            raise DecodeError(f"Invalid immediate: #{body}")
    except DecodeError:
        raise
    except ValueError:
        # int() refuses digit strings past the interpreter limit
        raise DecodeError(f"Invalid immediate: #{body}") from None
    if not IMM_MIN <= value <= IMM_MAX:
        raise DecodeError(f"Immediate out of 32-bit range: #{body}")
    return value


def parse_register(token: str) -> int:
    m = _REG_RE.fullmatch(token)
    # length check first so int() never sees an oversized digit string
    if m is None or len(m.group(1)) > 2 or int(m.group(1)) >= GENERAL_REGS:
        raise DecodeError(f"Invalid register name: {token}. "
                          f"Use r0 through r{GENERAL_REGS - 1}.")
    return int(m.group(1))


def parse_operand(token: str) -> Operand:
    if token.startswith("#"):
        return Immediate(parse_immediate(token[1:]))
    return RegisterRef(parse_register(token))


def split_operands(text: str):
    if not text:
        return []
    fields = [f.strip() for f in text.split(",")]
    for f in fields:
        if not f:
            raise DecodeError("Syntax error: empty operand")
        if len(f.split()) > 1:
            raise DecodeError(f"Syntax error: missing comma in '{f}'")
    return fields


def decode(line: str) -> Instruction:
    """Decode one line of text, raising DecodeError when it is not a
    well-formed instruction."""
    parts = line.strip().split(None, 1)
    if not parts:
        raise DecodeError("Empty line", line)
    mnemonic = parts[0]
    try:
        opcode = Opcode(mnemonic.upper())
    except ValueError:
        raise DecodeError(f"Unknown instruction: {mnemonic}", line) from None

    kinds, usage = SHAPES[opcode]
    try:
        fields = split_operands(parts[1] if len(parts) > 1 else "")
        if len(fields) != len(kinds):
            raise DecodeError(f"Usage: {usage}")
        operands = []
        for kind, token in zip(kinds, fields):
            operand = parse_operand(token)
            if kind == "reg" and not isinstance(operand, RegisterRef):
                raise DecodeError(f"{opcode.value} expects a register, "
                                  f"not an immediate constant: {token}")
            operands.append(operand)
    except DecodeError as e:
        e.line = line
        raise
    return Instruction(opcode, tuple(operands))
