"""Read-eval loop around decode/execute.

A ``Session`` owns one register bank; every session is independent, so
several can live side by side (the GUI keeps one, tests create many).
"""
import logging
import sys

from .decoder import DecodeError, decode
from .engine import Output, Terminate, execute
from .registers import RegisterBank

logger = logging.getLogger(__name__)

PROMPT = "> "
BANNER = "Welcome to the Assembly Interpreter."


class Session:
    def __init__(self, signed: bool = True):
        self.bank = RegisterBank()
        self.signed = signed
        self.terminated = False

    def feed(self, line: str):
        """Decode and execute one line.

        Blank lines return None. A DecodeError propagates and leaves the
        bank untouched.
        """
        if not line.strip():
            return None
        instr = decode(line)
        logger.debug("decoded %s", instr)
        result = execute(instr, self.bank, signed=self.signed)
        if isinstance(result, Terminate):
            self.terminated = True
        return result

    def reset(self):
        self.bank.reset()
        self.terminated = False


def format_output(result: Output) -> str:
    if result.register:
        return f"{result.register} = {result.text}"
    return result.text


def run_with_reader(reader, interactive: bool, out=None, session=None) -> int:
    """Feed lines from ``reader`` until EOF or EXIT.

    Interactive mode reports decode errors and keeps going; script mode
    stops at the first one and returns 1.
    """
    out = out or sys.stdout
    session = session or Session()
    while True:
        if interactive:
            out.write(PROMPT)
            out.flush()
        line = reader.readline()
        if not line:
            break
        try:
            result = session.feed(line)
        except DecodeError as e:
            logger.debug("decode error on %r: %s", e.line, e)
            out.write(f"{e}\n")
            if not interactive:
                out.write("Exiting due to error.\n")
                return 1
            continue
        if isinstance(result, Output):
            out.write(format_output(result) + "\n")
        elif isinstance(result, Terminate):
            break
    return 0
