"""Tests for the command-line entrypoint."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from dircli.main import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DIRCLI_OPTIONS_PATH",
        "DIRCLI_STRICT",
        "DIRCLI_PRETTY",
        "DIRCLI_MODEL",
        "DIRCLI_WORKERS",
        "DIRCLI_DEV_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


def _output(capsys: pytest.CaptureFixture[str]) -> list[dict]:
    return json.loads(capsys.readouterr().out)


class TestSelectors:
    def test_file(
        self,
        tmp_path: Path,
        canonical_response: bytes,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        target = tmp_path / "ok.json"
        target.write_bytes(canonical_response)
        assert main(["--file", str(target)]) == 0
        assert _output(capsys) == [
            {
                "input": {"type": "file", "filename": str(target)},
                "success": True,
                "converts_back": True,
                "error": None,
            }
        ]

    def test_directory(
        self,
        tmp_path: Path,
        canonical_response: bytes,
        malformed_response_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        (tmp_path / "1.json").write_bytes(canonical_response)
        (tmp_path / "2.json").write_bytes(canonical_response)
        (tmp_path / "3.json").write_bytes(malformed_response_path.read_bytes())
        assert main(["--dir", str(tmp_path)]) == 1
        data = _output(capsys)
        assert len(data) == 3
        assert [d["success"] for d in data] == [True, True, False]
        assert data[2]["error"]

    def test_inline_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "not a json string"]) == 1
        data = _output(capsys)
        assert len(data) == 1
        assert data[0]["input"] == {"type": "string"}
        assert data[0]["success"] is False
        assert data[0]["converts_back"] is False
        assert data[0]["error"]

    def test_stdin(
        self,
        monkeypatch: pytest.MonkeyPatch,
        canonical_response: bytes,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(canonical_response)))
        assert main(["--stdin"]) == 0
        assert _output(capsys)[0]["input"] == {"type": "stdin"}

    def test_empty_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-d", str(tmp_path)]) == 0
        assert _output(capsys) == []

    def test_missing_path_is_a_usage_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--file", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No such file or directory" in captured.err

    def test_selector_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_selectors_are_exclusive(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--json", "{}", "--dir", str(tmp_path)])
        assert exc_info.value.code == 2


class TestModifiers:
    def test_help_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--help", "--strict", "--pretty"]) == 0
        assert "usage:" in capsys.readouterr().out

    def test_help_wins_over_a_bad_flag_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--workers", "abc", "--help"]) == 0
        assert "usage:" in capsys.readouterr().out

    def test_help_wins_over_conflicting_selectors(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["-j", "{}", "-s", "-h"]) == 0
        captured = capsys.readouterr()
        assert "usage:" in captured.out
        assert captured.err == ""

    def test_strict_fails_on_mismatch(
        self, reformatted_response_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["-f", str(reformatted_response_path)]) == 0
        assert main(["-f", str(reformatted_response_path), "--strict"]) == 1

    def test_pretty_output(
        self, reformatted_response_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["-f", str(reformatted_response_path), "--pretty", "--strict"])
        out = capsys.readouterr().out
        assert out.startswith("\033[31m")
        assert '\n  {\n    "input"' in out

    def test_refresh_model(
        self, canonical_refresh: bytes, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["-j", canonical_refresh.decode(), "-m", "directions-refresh", "--strict"]) == 0
        assert _output(capsys)[0]["converts_back"] is True

    def test_invalid_workers_is_a_usage_error(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-d", str(tmp_path), "--workers", "0"])
        assert exc_info.value.code == 2

    def test_env_enables_strict(
        self,
        monkeypatch: pytest.MonkeyPatch,
        reformatted_response_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("DIRCLI_STRICT", "true")
        assert main(["-f", str(reformatted_response_path)]) == 1
