from dataclasses import dataclass, field
from typing import List

GENERAL_REGS = 16         # r0–r15
WORD_BITS = 32
WORD_MASK = 0xFFFFFFFF
SIGN_BIT = 1 << (WORD_BITS - 1)


def to_signed(value: int) -> int:
    """Two's-complement view of a 32-bit word, e.g. 0xFFFFFFFF -> -1."""
    value &= WORD_MASK
    return value - (1 << WORD_BITS) if value & SIGN_BIT else value


def reg_name(idx: int) -> str:
    return f"r{idx}"


@dataclass
class RegisterBank:
    gpr: List[int] = field(default_factory=lambda: [0]*GENERAL_REGS)

    def __getitem__(self, idx: int) -> int:
        if 0 <= idx < GENERAL_REGS:
            return self.gpr[idx]
        raise IndexError("Invalid register index")

    def __setitem__(self, idx: int, value: int) -> None:
        if 0 <= idx < GENERAL_REGS:
            self.gpr[idx] = value & WORD_MASK
        else:
            raise IndexError("Invalid register index")

    def __len__(self) -> int:
        return GENERAL_REGS

    def signed(self, idx: int) -> int:
        return to_signed(self[idx])

    def snapshot(self) -> List[int]:
        return list(self.gpr)

    def reset(self) -> None:
        """Zero every register."""
        self.gpr[:] = [0]*GENERAL_REGS
