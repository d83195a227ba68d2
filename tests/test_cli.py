"""
Tests for the command line entry point.
"""

import io
import sys

import pytest
from hexrev.__main__ import main, run
from hexrev.errors import ConfigError, InputError


def test_no_arguments_prints_usage(capsys):
    """Running without arguments shows usage and fails."""
    assert run([], {}) == 1
    assert "usage:" in capsys.readouterr().err


def test_help_exits_nonzero(capsys):
    """-h shows usage and fails."""
    assert run(["-h"], {}) == 1
    assert "usage:" in capsys.readouterr().err


def test_graphical_run(tmp_path):
    """The default mode dumps the file graphically."""
    path = tmp_path / "data.bin"
    path.write_bytes(b'AB')
    out = io.StringIO()
    assert run([str(path)], {}, out) == 0
    assert out.getvalue() == "00000000: 41 42 " + " " * 42 + " AB\n"


def test_hex_then_reverse_round_trip(tmp_path):
    """Hex output fed back through reverse mode gives the original file."""
    original = bytes(range(256)) * 2 + b'\x00\xff\x7f'
    source = tmp_path / "data.bin"
    source.write_bytes(original)

    out = io.StringIO()
    assert run([str(source), "mode=hex"], {}, out) == 0

    dump = tmp_path / "data.hex"
    dump.write_text(out.getvalue())
    raw = io.BytesIO()
    reversed_out = io.TextIOWrapper(raw)
    assert run([str(dump), "mode=reverse"], {}, reversed_out) == 0
    assert raw.getvalue() == original


def test_missing_file(tmp_path):
    """A missing input file is an input error."""
    with pytest.raises(InputError, match="Cannot read"):
        run([str(tmp_path / "missing.bin")], {}, io.StringIO())


def test_missing_path():
    """Settings without a path are a configuration error."""
    with pytest.raises(ConfigError, match="input file is required"):
        run(["mode=hex"], {}, io.StringIO())


def test_main_invalid_mode_exit_code(monkeypatch, tmp_path, capsys):
    """main exits with code 2 on a configuration error."""
    path = tmp_path / "data.bin"
    path.write_bytes(b'A')
    monkeypatch.setattr(sys, "argv", ["hexrev", str(path), "mode=octal"])
    monkeypatch.delenv("HEXREV_MODE", raising=False)
    monkeypatch.delenv("HEXREV_CONFIG", raising=False)

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code == 2
    assert "Invalid mode" in capsys.readouterr().err


def test_main_missing_file_exit_code(monkeypatch, tmp_path, capsys):
    """main exits with code 1 when the file cannot be read."""
    monkeypatch.setattr(sys, "argv", ["hexrev", str(tmp_path / "missing.bin")])
    monkeypatch.delenv("HEXREV_CONFIG", raising=False)

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code == 1
    assert "Cannot read" in capsys.readouterr().err


def test_main_output_error_silences_stdout(monkeypatch, capsys):
    """After a failed write, stdout is redirected to devnull before exiting."""
    import hexrev.__main__ as entry
    from hexrev.errors import OutputError

    class FakeStdout:
        def fileno(self):
            return 99

    def fail(argv):
        raise OutputError("Failed to write output: Broken pipe")

    redirected = []
    monkeypatch.setattr(entry, "run", fail)
    monkeypatch.setattr(entry.os, "open", lambda path, flags: 42)
    monkeypatch.setattr(entry.os, "dup2", lambda src, dst: redirected.append((src, dst)))
    monkeypatch.setattr(entry.os, "close", lambda fd: None)
    monkeypatch.setattr(sys, "argv", ["hexrev", "data.bin"])
    monkeypatch.setattr(sys, "stdout", FakeStdout())

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code == 1
    assert redirected == [(42, 99)]
    assert "Broken pipe" in capsys.readouterr().err
