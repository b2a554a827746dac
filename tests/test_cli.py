from __future__ import annotations

import pytest

from safe_unzip.cli import main as cli_main
from safe_unzip.cli_helpers import map_exception_to_exit_code
from safe_unzip.config import ExtractSettings
from safe_unzip.constants import CONTINUE_ON_ERROR_ENV, LOG_LEVEL_ENV, ExitCodes
from safe_unzip.errors import ArchiveOpenError, ExtractionError, InvalidPathError


def run_cli(args):
    with pytest.raises(SystemExit) as excinfo:
        cli_main(args)
    return excinfo.value.code


def test_cli_extracts_and_lists_names(make_zip, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv(CONTINUE_ON_ERROR_ENV, raising=False)
    archive = make_zip([("a.txt", "a"), ("b/c.txt", "c")])
    target = tmp_path / "out"

    assert run_cli([str(archive), str(target)]) == ExitCodes.OK
    assert capsys.readouterr().out.splitlines() == ["a.txt", "b/c.txt"]
    assert (target / "b" / "c.txt").read_text() == "c"


def test_cli_quiet(make_zip, tmp_path, capsys):
    archive = make_zip([("a.txt", "a")])

    assert run_cli(["--quiet", str(archive), str(tmp_path / "out")]) == ExitCodes.OK
    assert capsys.readouterr().out == ""


def test_cli_invalid_path_exit_code(make_zip, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv(CONTINUE_ON_ERROR_ENV, raising=False)
    archive = make_zip([("ok.txt", "ok"), ("/etc/evil", "x")])

    assert run_cli([str(archive), str(tmp_path / "out")]) == ExitCodes.INVALID_PATH
    assert "Error: Invalid filename path in zip archive: /etc/evil" in capsys.readouterr().err


def test_cli_continue_on_error_flag(make_zip, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv(CONTINUE_ON_ERROR_ENV, raising=False)
    archive = make_zip([("ok.txt", "ok"), ("../evil", "x")])

    assert run_cli(["--continue-on-error", str(archive), str(tmp_path / "out")]) == ExitCodes.OK
    assert capsys.readouterr().out.splitlines() == ["ok.txt"]


def test_cli_continue_on_error_from_env(make_zip, tmp_path, capsys, monkeypatch):
    monkeypatch.setenv(CONTINUE_ON_ERROR_ENV, "yes")
    archive = make_zip([("../evil", "x"), ("ok.txt", "ok")])

    assert run_cli([str(archive), str(tmp_path / "out")]) == ExitCodes.OK
    assert capsys.readouterr().out.splitlines() == ["ok.txt"]


def test_cli_missing_archive(tmp_path, capsys):
    missing = tmp_path / "missing.zip"

    assert run_cli([str(missing), str(tmp_path / "out")]) == ExitCodes.ARCHIVE_OPEN_FAILED
    assert f"Error: No such file(9): {missing}" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_extract_settings_from_env(monkeypatch):
    monkeypatch.delenv(CONTINUE_ON_ERROR_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    settings = ExtractSettings.from_env()
    assert settings.continue_on_error is False
    assert settings.log_level is None

    monkeypatch.setenv(CONTINUE_ON_ERROR_ENV, "1")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    settings = ExtractSettings.from_env()
    assert settings.continue_on_error is True
    assert settings.log_level == "debug"

    merged = ExtractSettings().merged(continue_on_error=True, log_level="INFO")
    assert merged == ExtractSettings(continue_on_error=True, log_level="INFO")


def test_map_exception_to_exit_code():
    assert map_exception_to_exit_code(ArchiveOpenError(9, "x.zip")) == ExitCodes.ARCHIVE_OPEN_FAILED
    assert map_exception_to_exit_code(InvalidPathError("../x")) == ExitCodes.INVALID_PATH
    assert map_exception_to_exit_code(ExtractionError(7)) == ExitCodes.EXTRACTION_FAILED
    assert map_exception_to_exit_code(ValueError("other")) is None
