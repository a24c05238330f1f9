"""
CLI tests for SHIFTCRACK: encrypt, decrypt, analyze, deduce.
"""

from typer.testing import CliRunner

from ciphers.caesar import encrypt
from main import app

runner = CliRunner()


def test_cli_encrypt():
    result = runner.invoke(app, ["encrypt", "Hello, World", "--shift", "3"])
    assert result.exit_code == 0
    assert "khoor, zruog" in result.output


def test_cli_decrypt_negative_shift():
    result = runner.invoke(app, ["decrypt", "abc", "--shift=-3"])
    assert result.exit_code == 0
    assert "def" in result.output


def test_cli_analyze(sample_ciphertext):
    result = runner.invoke(app, ["analyze", sample_ciphertext, "--top", "3"])
    assert result.exit_code == 0
    assert "Most likely shift: 11" in result.output


def test_cli_analyze_threaded(sample_ciphertext):
    result = runner.invoke(app, ["analyze", sample_ciphertext, "-n", "0", "-w", "4"])
    assert result.exit_code == 0
    assert "Most likely shift: 11" in result.output


def test_cli_analyze_no_letters():
    result = runner.invoke(app, ["analyze", "1234"])
    assert result.exit_code == 0
    assert "all shifts tie" in result.output


def test_cli_analyze_rejects_bad_options():
    result = runner.invoke(app, ["analyze", "abc", "--workers", "0"])
    assert result.exit_code != 0


def test_cli_deduce():
    result = runner.invoke(app, ["deduce", "hello", "olssv"])
    assert result.exit_code == 0
    assert "The key is likely 7" in result.output


def test_cli_deduce_mismatched_lengths():
    result = runner.invoke(app, ["deduce", "ab", "abc"])
    assert result.exit_code == 1


def test_cli_encrypt_long_text_is_not_wrapped(english_sample):
    result = runner.invoke(app, ["encrypt", english_sample, "--shift", "3"])
    assert result.exit_code == 0
    assert result.output.rstrip("\n") == encrypt(english_sample, 3)


def test_cli_decrypt_long_text_is_not_wrapped(sample_ciphertext, english_sample):
    result = runner.invoke(app, ["decrypt", sample_ciphertext, "--shift", "11"])
    assert result.exit_code == 0
    assert result.output.rstrip("\n") == english_sample.lower()
