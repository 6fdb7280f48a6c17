"""Application entry-point for the register-machine interpreter.
Run `python main.py` for the interactive prompt, `python main.py prog.s` to
run a script, or `python main.py --gui [prog.s]` to launch the desktop window
(with the script preloaded into its console)."""
import argparse
import io
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from regmachine import __version__
from regmachine.session import BANNER, Session, run_with_reader


def build_parser():
    parser = argparse.ArgumentParser(
        prog="regmachine",
        description="Line-oriented interpreter for a small RISC-style assembly language.")
    parser.add_argument("input_file", nargs="?",
                        help="script to execute; interactive mode if omitted "
                             "(with --gui, run in the window console)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--gui", action="store_true", help="open the desktop window")
    parser.add_argument("--unsigned", action="store_true",
                        help="PRINT registers as unsigned 32-bit values")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log decoded instructions and register writes")
    return parser


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def read_script(path):
    # undecodable bytes become U+FFFD and fail to decode as an instruction
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    signed = not args.unsigned

    script = None
    if args.input_file:
        try:
            script = read_script(args.input_file)
        except OSError as e:
            print(f"Cannot open {args.input_file}: {e.strerror}", file=sys.stderr)
            return 2

    if args.gui:
        from gui.main_window import run
        return run(signed=signed, script=script)

    session = Session(signed=signed)
    try:
        if script is not None:
            return run_with_reader(io.StringIO(script), interactive=False, session=session)
        print(BANNER)
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="replace")
        return run_with_reader(sys.stdin, interactive=True, session=session)
    except KeyboardInterrupt:
        print("\nCtrl-C pressed. Exiting...")
        return 0


if __name__ == "__main__":
    sys.exit(main())
