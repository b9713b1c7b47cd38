"""Tests for the shared CLI helpers in flagcat.cli."""

import json
from pathlib import Path

import pytest
import typer

from flagcat.cli import error_exit, get_registry, json_print
from flagcat.registry import default_registry

# ---------------------------------------------------------------------------
# error_exit()
# ---------------------------------------------------------------------------


class TestErrorExit:
    def test_plain_stderr_and_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            error_exit("something broke")
        assert exc_info.value.exit_code == 1
        captured = capsys.readouterr()
        assert "something broke" in captured.err
        assert captured.out == ""

    def test_custom_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            error_exit("fatal", code=2)
        assert exc_info.value.exit_code == 2

    def test_markup_in_message_is_literal(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit):
            error_exit("expected a [long, short] list")
        assert "[long, short]" in capsys.readouterr().err

    def test_json_mode_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit):
            error_exit("bad input", json_mode=True)
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"error": "bad input"}
        assert captured.err == ""


# ---------------------------------------------------------------------------
# json_print()
# ---------------------------------------------------------------------------


class TestJsonPrint:
    def test_dict_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        json_print({"key": "OUTPUT_PATH", "short": None})
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"key": "OUTPUT_PATH", "short": None}
        assert captured.err == ""

    def test_list_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        json_print(["--output-path", "out.json"])
        assert json.loads(capsys.readouterr().out) == ["--output-path", "out.json"]


# ---------------------------------------------------------------------------
# get_registry()
# ---------------------------------------------------------------------------


class TestGetRegistry:
    def test_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert get_registry() is default_registry()

    def test_missing_config_exits(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            get_registry(tmp_path / "missing.toml", json_mode=True)
        assert exc_info.value.exit_code == 1
        assert "missing.toml" in json.loads(capsys.readouterr().out)["error"]

    def test_collision_exits_with_keys(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "flagcat.toml"
        config.write_text(
            '[catalogs.extra]\nFORCE = ["--force", "-f"]\n\n[commands]\nb = ["base", "extra"]\n',
            encoding="utf-8",
        )
        with pytest.raises(typer.Exit):
            get_registry(config, json_mode=True)
        error = json.loads(capsys.readouterr().out)["error"]
        assert "base.FORMAT" in error
        assert "extra.FORCE" in error
