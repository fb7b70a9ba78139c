"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from cli.app import app

runner = CliRunner()


@pytest.fixture
def bank_file(tmp_path, make_voice, piano_voice):
    path = tmp_path / "voice.dat"
    path.write_bytes(piano_voice + make_voice(name=b"BASS", algorithm=2) + bytes(32))
    return path


class TestConvertCommand:
    def test_convert(self, tmp_path, bank_file):
        out = tmp_path / "out"
        result = runner.invoke(app, ["convert", str(bank_file), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert len(list(out.glob("*.rym2612"))) == 2
        assert "2 files written" in result.output

    def test_convert_mucom_format(self, tmp_path, bank_file):
        out = tmp_path / "out"
        result = runner.invoke(app, ["convert", str(bank_file), "-o", str(out), "-f", "mucom"])

        assert result.exit_code == 0, result.output
        assert len(list(out.glob("*.muc"))) == 2

    def test_missing_source(self, tmp_path):
        result = runner.invoke(app, ["convert", str(tmp_path / "missing.dat")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_prefix(self, tmp_path, bank_file):
        result = runner.invoke(
            app, ["convert", str(bank_file), "-o", str(tmp_path / "out"), "-p", "a/b"]
        )

        assert result.exit_code == 1
        assert "prefix" in result.output


class TestInfoCommand:
    def test_bank_summary(self, bank_file):
        result = runner.invoke(app, ["info", str(bank_file)])

        assert result.exit_code == 0, result.output
        assert "PIANO" in result.output
        assert "BASS" in result.output
        assert "3 voices, 2 named" in result.output

    def test_voice_detail(self, bank_file):
        result = runner.invoke(app, ["info", str(bank_file), "--index", "0", "--raw"])

        assert result.exit_code == 0, result.output
        assert "Voice 0" in result.output
        assert "Total" in result.output
        assert "Raw Data" in result.output

    def test_index_out_of_range(self, bank_file):
        result = runner.invoke(app, ["info", str(bank_file), "--index", "9"])

        assert result.exit_code == 1

    def test_unreadable_source(self, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestTextCommand:
    def test_stdout(self, bank_file):
        result = runner.invoke(app, ["text", str(bank_file)])

        assert result.exit_code == 0, result.output
        assert "  @0:{" in result.output
        assert '"PIANO"}' in result.output
        assert "  @2:{" in result.output

    def test_output_file(self, tmp_path, bank_file):
        out = tmp_path / "voices.muc"
        result = runner.invoke(app, ["text", str(bank_file), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8").count("@") == 3

    def test_unreadable_source(self, tmp_path):
        result = runner.invoke(app, ["text", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unwritable_output(self, tmp_path, bank_file):
        # The output path is an existing directory
        out = tmp_path / "voices.muc"
        out.mkdir()
        result = runner.invoke(app, ["text", str(bank_file), "-o", str(out)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert out.is_dir()


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "mucomvoice" in result.output
