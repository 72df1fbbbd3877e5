"""CLI integration smoke tests."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from rcli import __version__
from rcli.cli import app

HELLO_ZERO_KEY_TAG = "4PaL_sNhIW7AL8FXNmQ6cEcdliYLD-byc6kJu4ttvYE"

runner = CliRunner()


def test_cli_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"rcli version {__version__}" in result.stdout


def test_cli_text_sign_file_and_stdin(
    override_settings, zero_key_file: Path, message_file: Path
) -> None:
    """`rcli text sign` prints the same tag for a file and for stdin."""

    from_file = runner.invoke(
        app, ["text", "sign", "-i", str(message_file), "-k", str(zero_key_file)]
    )
    from_stdin = runner.invoke(
        app, ["text", "sign", "-k", str(zero_key_file), "--format", "blake3"], input=b"hello"
    )

    assert from_file.exit_code == 0, from_file.output
    assert from_stdin.exit_code == 0, from_stdin.output
    assert from_file.stdout.strip() == HELLO_ZERO_KEY_TAG
    assert from_stdin.stdout.strip() == HELLO_ZERO_KEY_TAG


def test_cli_text_verify_outcomes(override_settings, zero_key_file: Path, message_file: Path) -> None:
    base = ["text", "verify", "-i", str(message_file), "-k", str(zero_key_file)]

    valid = runner.invoke(app, [*base, "--sig", HELLO_ZERO_KEY_TAG])
    mismatch = runner.invoke(app, [*base, "--sig", HELLO_ZERO_KEY_TAG[::-1]])
    malformed = runner.invoke(app, [*base, "--sig", "%%%"])

    assert valid.exit_code == 0
    assert valid.stdout.strip() == "true"
    # A negative result is still a completed operation.
    assert mismatch.exit_code == 0
    assert mismatch.stdout.splitlines()[0] == "false"
    assert malformed.exit_code == 0
    assert malformed.stdout.splitlines()[0] == "false"


def test_cli_text_verify_strict_and_json(
    override_settings, zero_key_file: Path, message_file: Path
) -> None:
    base = ["text", "verify", "-i", str(message_file), "-k", str(zero_key_file)]

    strict = runner.invoke(app, [*base, "--sig", "%%%", "--strict", "--json"])
    ok = runner.invoke(app, [*base, "--sig", HELLO_ZERO_KEY_TAG, "--json"])

    assert strict.exit_code == 1
    assert ok.exit_code == 0
    payload = json.loads(ok.stdout)
    assert payload["schema_id"] == "text_verify"
    assert payload["valid"] is True
    assert payload["format"] == "blake3"
    assert payload["detail"] is None


def test_cli_ed25519_generate_sign_verify(override_settings, temp_dir: Path) -> None:
    keys_dir = temp_dir / "keys"
    keys_dir.mkdir()
    message = temp_dir / "message.txt"
    message.write_bytes(b"test message")

    generated = runner.invoke(
        app, ["text", "generate", "--format", "ed25519", "-o", str(keys_dir)]
    )
    assert generated.exit_code == 0, generated.output
    secret_path = keys_dir / "ed25519.sk"
    public_path = keys_dir / "ed25519.pk"
    assert generated.stdout.split() == [str(secret_path), str(public_path)]

    signed = runner.invoke(
        app,
        ["text", "sign", "-i", str(message), "-k", str(secret_path), "--format", "ed25519"],
    )
    assert signed.exit_code == 0, signed.output
    signature = signed.stdout.strip()
    assert len(signature) == 86

    verify_args = [
        "text", "verify", "-i", str(message), "-k", str(public_path),
        "--format", "ed25519", "--sig", signature,
    ]
    assert runner.invoke(app, verify_args).stdout.strip() == "true"

    message.write_bytes(b"test messagE")
    assert runner.invoke(app, verify_args).stdout.splitlines()[0] == "false"


def test_cli_generate_defaults_to_configured_key_dir(override_settings) -> None:
    result = runner.invoke(app, ["text", "generate", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    key_path = override_settings.get_key_dir() / "blake3.txt"
    assert payload["format"] == "blake3"
    assert payload["paths"] == [str(key_path)]
    assert len(key_path.read_bytes()) == 32


def test_cli_unknown_format_is_usage_error(override_settings, zero_key_file: Path) -> None:
    result = runner.invoke(
        app, ["text", "sign", "-k", str(zero_key_file), "--format", "Blake3"], input=b"x"
    )

    assert result.exit_code == 2


def test_cli_wrong_key_length_reports_error(override_settings, temp_dir: Path, message_file: Path) -> None:
    short_key = temp_dir / "short.key"
    short_key.write_bytes(b"tiny")

    result = runner.invoke(
        app, ["text", "sign", "-i", str(message_file), "-k", str(short_key)]
    )

    assert result.exit_code == 1
    assert "Error: Invalid blake3 signing key: expected 32 bytes, got 4" in result.output


def test_cli_missing_input_file_rejected(override_settings, zero_key_file: Path, temp_dir: Path) -> None:
    result = runner.invoke(
        app, ["text", "sign", "-i", str(temp_dir / "absent.txt"), "-k", str(zero_key_file)]
    )

    assert result.exit_code == 2


def test_cli_base64_round_trip(override_settings, temp_dir: Path) -> None:
    encoded = runner.invoke(app, ["base64", "encode", "--format", "urlsafe"], input=b"hello?>")
    assert encoded.exit_code == 0
    assert encoded.stdout.strip() == "aGVsbG8_Pg"

    source = temp_dir / "encoded.txt"
    source.write_text("aGVsbG8=\n")
    decoded = runner.invoke(app, ["base64", "decode", "-i", str(source)])
    assert decoded.exit_code == 0
    assert decoded.stdout == "hello\n"

    bad = runner.invoke(app, ["base64", "decode"], input=b"***")
    assert bad.exit_code == 1
    assert "Error: Invalid standard base64 input" in bad.output


def test_cli_csv_converts_with_default_output(override_settings, temp_dir: Path, monkeypatch) -> None:
    monkeypatch.chdir(temp_dir)
    source = temp_dir / "input.csv"
    source.write_text("Name,Kit Number\nMattia Perin,37\n", encoding="utf-8")

    result = runner.invoke(app, ["csv", "-i", str(source), "--format", "yaml"])

    assert result.exit_code == 0, result.output
    assert "Wrote 1 records to output.yaml" in result.stdout
    assert "Kit Number: '37'" in (temp_dir / "output.yaml").read_text(encoding="utf-8")


def test_cli_genpass(override_settings) -> None:
    result = runner.invoke(app, ["genpass", "-l", "20", "--no-symbol"])

    assert result.exit_code == 0
    password = result.stdout.strip()
    assert len(password) == 20
    assert password.isalnum()

    too_short = runner.invoke(app, ["genpass", "-l", "2"])
    assert too_short.exit_code == 1
    assert "Error:" in too_short.output


def test_cli_csv_unwritable_output_reports_error(override_settings, temp_dir: Path) -> None:
    source = temp_dir / "input.csv"
    source.write_text("a,b\n1,2\n", encoding="utf-8")
    taken = temp_dir / "outdir"
    taken.mkdir()

    result = runner.invoke(app, ["csv", "-i", str(source), "-o", str(taken)])

    assert result.exit_code == 1
    assert f"Error: Cannot write {taken}" in result.output
    assert not isinstance(result.exception, OSError)


def test_cli_invalid_environment_format_is_configuration_error(
    override_settings, zero_key_file: Path, monkeypatch
) -> None:
    import rcli.config as config_module

    monkeypatch.setattr(config_module, "_settings", None)
    monkeypatch.setenv("RCLI_DEFAULT_SIGN_FORMAT", "Blake3")

    result = runner.invoke(app, ["text", "sign", "-k", str(zero_key_file)], input=b"hello")

    assert result.exit_code == 2
    assert "Error: Invalid configuration: default_sign_format" in result.output
    assert not isinstance(result.exception, ValueError)
