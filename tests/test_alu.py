import pytest

from regmachine.alu import ALU

def test_add():
    assert ALU.execute("ADD", 2, 3) == 5

def test_add_wraps():
    assert ALU.execute("ADD", 0xFFFFFFFF, 1) == 0

def test_sub_wraps():
    assert ALU.execute("SUB", 0, 1) == 0xFFFFFFFF

@pytest.mark.parametrize("op,a,b,expected", [
    ("LSL", 1, 3, 8),
    ("LSL", 0x80000001, 1, 2),
    ("LSL", 1, 32, 0),
    ("LSR", 16, 2, 4),
    ("LSR", 0x80000000, 31, 1),
    ("LSR", 0xFFFFFFFF, 40, 0),
    ("ASR", 0xFFFFFFE0, 2, 0xFFFFFFF8),   # -32 >> 2 == -8
    ("ASR", 0x80000000, 32, 0xFFFFFFFF),
    ("ASR", 0x7FFFFFFF, 32, 0),
    ("ROR", 4, 1, 2),
    ("ROR", 1, 1, 0x80000000),
    ("ROR", 0x12345678, 32, 0x12345678),
    ("ROR", 0x12345678, 36, 0x81234567),
    ("RRX", 8, 0, 4),
    ("RRX", 1, 0, 0),
    ("RRX", 1, 1, 0x80000000),
])
def test_shifts(op, a, b, expected):
    assert ALU.execute(op, a, b) == expected

def test_unknown_op():
    with pytest.raises(ValueError):
        ALU.execute("DIV", 7, 3)
