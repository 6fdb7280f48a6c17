import io
import sys
import types

import main

def test_script_file(tmp_path, capsys):
    prog = tmp_path / "prog.s"
    prog.write_text("MOV r1, #20\nMOV r2, #7\nSUB r3, r1, r2\nPRINT r3\nEXIT\n")
    assert main.main([str(prog)]) == 0
    assert capsys.readouterr().out == "r3 = 13\n"

def test_script_file_error(tmp_path, capsys):
    prog = tmp_path / "bad.s"
    prog.write_text("MOV r1, #1\nNOPE\n")
    assert main.main([str(prog)]) == 1
    assert "Exiting due to error." in capsys.readouterr().out

def test_unsigned_flag(tmp_path, capsys):
    prog = tmp_path / "neg.s"
    prog.write_text("SUB r1, r0, #1\nPRINT r1\n")
    assert main.main(["--unsigned", str(prog)]) == 0
    assert capsys.readouterr().out == "r1 = 4294967295\n"

def test_missing_file(tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.s")]) == 2
    assert "Cannot open" in capsys.readouterr().err

def test_interactive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("MOV r1, #0x10\nPRINT r1\nEXIT\n"))
    assert main.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Welcome to the Assembly Interpreter.\n")
    assert "r1 = 16\n" in out

def test_invalid_utf8_script(tmp_path, capsys):
    prog = tmp_path / "binary.s"
    prog.write_bytes(b"MOV r1, #1\nMOV r2, \xff\xfe\nPRINT r1\n")
    assert main.main([str(prog)]) == 1
    out = capsys.readouterr().out
    assert "Invalid register name" in out
    assert "Exiting due to error." in out

def test_ctrl_c_during_script(tmp_path, monkeypatch, capsys):
    prog = tmp_path / "prog.s"
    prog.write_text("MOV r1, #1\n")

    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(main, "run_with_reader", interrupted)
    assert main.main([str(prog)]) == 0
    assert "Ctrl-C pressed. Exiting..." in capsys.readouterr().out

def test_gui_receives_script(tmp_path, monkeypatch):
    prog = tmp_path / "prog.s"
    prog.write_text("MOV r1, #4\nPRINT r1\n")
    calls = []

    def fake_run(signed=True, script=None):
        calls.append((signed, script))
        return 0

    monkeypatch.setitem(sys.modules, "gui.main_window", types.SimpleNamespace(run=fake_run))
    assert main.main(["--gui", "--unsigned", str(prog)]) == 0
    assert calls == [(False, "MOV r1, #4\nPRINT r1\n")]
