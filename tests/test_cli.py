import io
import json
from types import SimpleNamespace

import pytest

import nicephrase
from nicephrase import cli

SAMPLE_BYTES = bytes(
    [0, 0, 17, 212, 12, 140, 90, 246, 46, 83, 254, 60, 54, 169, 255, 255]
)
SAMPLE_TEXT = "a bioengineering balloted gobbled creneled written depriving zyzzyva"


def test_cli_encode_decode_round_trip(tmp_path) -> None:
    payload_path = tmp_path / "payload.bin"
    text_path = tmp_path / "phrase.txt"
    recovered_path = tmp_path / "recovered.bin"
    payload_path.write_bytes(SAMPLE_BYTES)

    cli.main(
        [
            "encode",
            "--input-bytes",
            str(payload_path),
            "--output-text",
            str(text_path),
        ]
    )
    assert text_path.read_text() == SAMPLE_TEXT + "\n"

    cli.main(
        [
            "decode",
            "--input-text",
            str(text_path),
            "--output-bytes",
            str(recovered_path),
        ]
    )
    assert recovered_path.read_bytes() == SAMPLE_BYTES


def test_cli_hex_mode(tmp_path, capsys) -> None:
    hex_path = tmp_path / "payload.hex"
    hex_path.write_text(SAMPLE_BYTES.hex() + "\n")

    cli.main(
        [
            "encode",
            "--hex",
            "--separator",
            "-",
            "--input-bytes",
            str(hex_path),
            "--output-text",
            "-",
        ]
    )
    assert capsys.readouterr().out == SAMPLE_TEXT.replace(" ", "-") + "\n"

    text_path = tmp_path / "phrase.txt"
    text_path.write_text(SAMPLE_TEXT.upper())
    cli.main(
        ["decode", "--hex", "--input-text", str(text_path), "--output-bytes", "-"]
    )
    assert capsys.readouterr().out == SAMPLE_BYTES.hex() + "\n"


def test_cli_decode_from_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("You Love\n"))
    cli.main(["decode", "--hex", "--input-text", "-", "--output-bytes", "-"])
    expected = nicephrase.passphrase_to_bytes(["you", "love"]).hex()
    assert capsys.readouterr().out == expected + "\n"


def test_cli_odd_input_is_usage_error(tmp_path, capsys) -> None:
    payload_path = tmp_path / "payload.bin"
    payload_path.write_bytes(b"\x01\x02\x03")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(
            ["encode", "--input-bytes", str(payload_path), "--output-text", "-"]
        )
    assert excinfo.value.code == 2
    assert "odd size not supported: 3" in capsys.readouterr().err


def test_cli_unknown_word_is_usage_error(tmp_path, capsys) -> None:
    text_path = tmp_path / "phrase.txt"
    text_path.write_text("You love ninetales")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["decode", "--input-text", str(text_path), "--output-bytes", "-"])
    assert excinfo.value.code == 2
    assert "unknown word: ninetales" in capsys.readouterr().err


def test_cli_generate(capsys) -> None:
    cli.main(["generate", "--words", "4", "--count", "3"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    for line in lines:
        words = line.split(" ")
        assert len(words) == 4
        assert len(nicephrase.passphrase_to_bytes(words)) == 8


def test_cli_generate_uses_config(tmp_path, capsys) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"num_words": 5, "separator": ".", "count": 2}))
    cli.main(["generate", "--config", str(config_path)])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(len(line.split(".")) == 5 for line in lines)


def test_cli_generate_flags_override_config(tmp_path, capsys) -> None:
    config_path = tmp_path / "config.json"
    nicephrase.save_config(
        nicephrase.PassphraseConfig(num_words=5, separator=".", count=2), config_path
    )
    cli.main(["generate", "--config", str(config_path), "-w", "2", "-c", "1"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert len(lines[0].split(".")) == 2


def test_cli_generate_too_many_words(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["generate", "--words", "513"])
    assert excinfo.value.code == 2
    assert "number of words 513 cannot be greater than 512" in capsys.readouterr().err


def test_run_generate_rejects_zero_count() -> None:
    args = SimpleNamespace(words=2, count=0, separator=None, config=None)
    with pytest.raises(ValueError, match="count must be >= 1"):
        cli.run_generate(args)


def test_cli_requires_command() -> None:
    with pytest.raises(SystemExit):
        cli.main([])


def test_cli_generate_bad_config_value_is_usage_error(tmp_path, capsys) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"num_words": None}))
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["generate", "--config", str(config_path)])
    assert excinfo.value.code == 2
    assert "num_words must be an integer" in capsys.readouterr().err
