# tests/test_cli.py
from pathlib import Path
from typing import Any, List, Tuple
import pytest # type: ignore
import os
import sys
import logging

# Adjust import path
try:
    from src.dna_codec import cli, codec # type: ignore
except ImportError:
     sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
     from dna_codec import cli, codec


# --- Helper function to assert log messages ---
def assert_log_message(caplog_records: List[logging.LogRecord], level: int, message_substring: str):
    """
    Helper to assert specific log message and level from caplog.records.
    """
    found = any(
        message_substring in rec.message and rec.levelno == level
        for rec in caplog_records
    )
    if not found:
        all_captured_messages = "\n".join([f"[{logging.getLevelName(rec.levelno)}] {rec.name}: {rec.message}" for rec in caplog_records])
        pytest.fail(
            f"Expected log (level {logging.getLevelName(level)}) containing '{message_substring}' not found. "
            f"Captured logs:\n{all_captured_messages}\n--- End caplog ---"
        )


def run_cli(args_list: List[str], monkeypatch, capsys) -> Tuple[int, str, str]:
    """
    Helper function to run cli.main with patched sys.argv and sys.exit.
    """
    full_args = ["dna_codec"] + args_list
    exit_code = -999 # Sentinel

    monkeypatch.setattr(sys, "argv", full_args)
    def mock_exit(code=0):
        nonlocal exit_code
        if exit_code == -999: exit_code = code # Set only if not already set by previous SystemExit
        raise SystemExit(code)
    monkeypatch.setattr(sys, "exit", mock_exit)

    try:
        cli.main()
        if exit_code == -999: exit_code = 0 # Success if no SystemExit caught by mock_exit
    except SystemExit as e:
        if exit_code == -999: exit_code = e.code if isinstance(e.code, int) else 1

    if not isinstance(exit_code, int): exit_code = 1 # Default to 1 if exit_code is weird
    captured = capsys.readouterr()
    return exit_code, captured.out, captured.err


# --- String modes ---

def test_cli_encode_string(hi_framed: str, monkeypatch, capsys, caplog: Any):
    caplog.set_level(logging.INFO)
    exit_code, out, _ = run_cli(["-e", "HI"], monkeypatch, capsys)

    assert exit_code == 0
    assert out.strip() == f"1.1 || Encoded: {hi_framed}"
    assert_log_message(caplog.records, logging.INFO, "Encoding message to DNA sequence.")

def test_cli_encode_string_verbose_summary(monkeypatch, capsys, caplog: Any):
    caplog.set_level(logging.DEBUG)
    exit_code, _, _ = run_cli(["-v", "-e", "HI"], monkeypatch, capsys)

    assert exit_code == 0
    assert_log_message(caplog.records, logging.DEBUG, "Encoded body: 36 nt, 12 codons")

def test_cli_decode_string(hi_framed: str, monkeypatch, capsys):
    exit_code, out, _ = run_cli(["-d", hi_framed], monkeypatch, capsys)
    assert exit_code == 0
    assert out.strip() == "Decoded: HI"

def test_cli_decode_string_strip_padding(monkeypatch, capsys):
    framed = codec.encode_string("A") # padded with one space
    exit_code, out, _ = run_cli(["-d", framed], monkeypatch, capsys)
    assert exit_code == 0
    assert out == "Decoded: A \n"

    exit_code, out, _ = run_cli(["--strip-padding", "-d", framed], monkeypatch, capsys)
    assert exit_code == 0
    assert out == "Decoded: A\n"

def test_cli_decode_string_invalid_frame(hi_framed: str, monkeypatch, capsys, caplog: Any):
    """A changed PROMOTER character fails with exit code 1 and no output."""
    caplog.set_level(logging.ERROR)
    exit_code, out, _ = run_cli(["-d", "C" + hi_framed[1:]], monkeypatch, capsys)

    assert exit_code == 1
    assert "Decoded:" not in out
    assert_log_message(caplog.records, logging.ERROR, "Codec error: Sequence does not start with PROMOTER")

def test_cli_decode_string_invalid_symbol(hi_framed: str, monkeypatch, capsys, caplog: Any):
    caplog.set_level(logging.ERROR)
    tampered = hi_framed[:12] + "N" + hi_framed[13:]
    exit_code, out, _ = run_cli(["-d", tampered], monkeypatch, capsys)

    assert exit_code == 1
    assert out == ""
    assert_log_message(caplog.records, logging.ERROR, "Codec error: Invalid nucleotide 'N'")


# --- File modes ---

def test_cli_file_round_trip(sample_input_file: Path, tmp_path: Path, monkeypatch, capsys, caplog: Any):
    caplog.set_level(logging.INFO)
    original = sample_input_file.read_bytes()

    exit_code, _, _ = run_cli(["-i", str(sample_input_file)], monkeypatch, capsys)
    assert exit_code == 0
    dna_file = tmp_path / "sample.bin.dna"
    assert dna_file.is_file()
    assert dna_file.read_text() == codec.encode_file(original, "sample.bin")
    assert_log_message(caplog.records, logging.INFO, f"Encoded {len(original)} bytes to")

    restore_dir = tmp_path / "restored"
    restore_dir.mkdir()
    exit_code, out, _ = run_cli(["-o", str(dna_file), "--output-dir", str(restore_dir)], monkeypatch, capsys)
    assert exit_code == 0
    restored = restore_dir / "sample.bin"
    assert restored.read_bytes() == original
    assert out.strip() == f"Decoded to file: {restored}"

def test_cli_encode_file_embeds_base_name(tmp_path: Path, monkeypatch, capsys):
    nested = tmp_path / "nested"
    nested.mkdir()
    source = nested / "notes.txt"
    source.write_bytes(b"hello dna")

    exit_code, _, _ = run_cli(["-i", str(source)], monkeypatch, capsys)
    assert exit_code == 0
    decoded = codec.decode_file((nested / "notes.txt.dna").read_text())
    assert decoded.file_name == "notes.txt"

def test_cli_encode_file_not_found(tmp_path: Path, monkeypatch, capsys, caplog: Any):
    caplog.set_level(logging.ERROR)
    missing = tmp_path / "missing.bin"
    exit_code, _, _ = run_cli(["-i", str(missing)], monkeypatch, capsys)

    assert exit_code == 1
    assert_log_message(caplog.records, logging.ERROR, f"I/O error: Input file not found: '{missing}'")

def test_cli_decode_file_wrong_suffix(tmp_path: Path, monkeypatch, capsys, caplog: Any):
    caplog.set_level(logging.ERROR)
    wrong = tmp_path / "sequence.txt"
    wrong.write_text(codec.encode_file(b"abc", "a.txt"))
    exit_code, _, _ = run_cli(["-o", str(wrong)], monkeypatch, capsys)

    assert exit_code == 1
    assert_log_message(caplog.records, logging.ERROR, "expecting a .dna file")

def test_cli_decode_file_string_payload(hi_framed: str, tmp_path: Path, monkeypatch, capsys, caplog: Any):
    """A .dna file holding a STRING payload is rejected and nothing is written."""
    caplog.set_level(logging.ERROR)
    dna_file = tmp_path / "message.dna"
    dna_file.write_text(hi_framed)
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    exit_code, _, _ = run_cli(["-o", str(dna_file), "--output-dir", str(out_dir)], monkeypatch, capsys)
    assert exit_code == 1
    assert list(out_dir.iterdir()) == []
    assert_log_message(caplog.records, logging.ERROR, "Expected a FILE payload")


def test_cli_encode_empty_file(tmp_path: Path, monkeypatch, capsys, caplog: Any):
    """An empty input file is refused and no undecodable .dna file is written."""
    caplog.set_level(logging.ERROR)
    empty = tmp_path / "abc"
    empty.write_bytes(b"")
    exit_code, _, _ = run_cli(["-i", str(empty)], monkeypatch, capsys)

    assert exit_code == 1
    assert not (tmp_path / "abc.dna").exists()
    assert_log_message(caplog.records, logging.ERROR, "Codec error: File content must not be empty.")


# --- Messages starting with '-' ---

def test_cli_encode_message_starting_with_dash(monkeypatch, capsys):
    """'-e -hello' is a usage error; '-e=-hello' encodes the message as given."""
    exit_code, out, err = run_cli(["-e", "-hello"], monkeypatch, capsys)
    assert exit_code == 2
    assert "expected one argument" in err
    assert out == ""

    exit_code, out, _ = run_cli(["-e=-hello"], monkeypatch, capsys)
    assert exit_code == 0
    assert out.strip() == f"1.1 || Encoded: {codec.encode_string('-hello')}"


# --- Usage errors ---

@pytest.mark.parametrize("args", [
    [],
    ["-e"],
    ["-e", "HI", "-d", "ATGC"],
    ["-x", "HI"],
])
def test_cli_usage_errors(args: List[str], monkeypatch, capsys):
    exit_code, out, err = run_cli(args, monkeypatch, capsys)
    assert exit_code != 0
    assert "usage:" in err
    assert out == ""
