import operator

from .registers import WORD_BITS, WORD_MASK, to_signed


def _lsl(a: int, n: int) -> int:
    return 0 if n >= WORD_BITS else a << n


def _lsr(a: int, n: int) -> int:
    return 0 if n >= WORD_BITS else a >> n


def _asr(a: int, n: int) -> int:
    # Python's >> on a negative int already fills with the sign bit
    return to_signed(a) >> min(n, WORD_BITS)


def _ror(a: int, n: int) -> int:
    n %= WORD_BITS
    return (a >> n) | (a << (WORD_BITS - n))


def _rrx(a: int, carry: int) -> int:
    return (a >> 1) | ((carry & 1) << (WORD_BITS - 1))


class ALU:
    """32-bit word operations. Both inputs are taken as unsigned words
    and the result is wrapped back into one."""

    OPS = {
        "ADD": operator.add,
        "SUB": operator.sub,
        "LSL": _lsl,
        "LSR": _lsr,
        "ASR": _asr,
        "ROR": _ror,
        "RRX": _rrx,     # b is the carry-in
    }

    @classmethod
    def execute(cls, op: str, a: int, b: int) -> int:
        try:
            fn = cls.OPS[op]
        except KeyError as e:
            raise ValueError(f"Unsupported ALU op {op}") from e
        return fn(a & WORD_MASK, b & WORD_MASK) & WORD_MASK
