"""Interactive interpreter for a small RISC-style register machine."""
from .decoder import DecodeError, Immediate, Instruction, Opcode, RegisterRef, decode
from .engine import Continue, Output, Terminate, execute, resolve
from .registers import GENERAL_REGS, RegisterBank
from .session import Session, run_with_reader

__version__ = "0.1.0"

__all__ = [
    "DecodeError", "Immediate", "Instruction", "Opcode", "RegisterRef", "decode",
    "Continue", "Output", "Terminate", "execute", "resolve",
    "GENERAL_REGS", "RegisterBank",
    "Session", "run_with_reader",
]
