from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from utils.config import DEFAULT_APPS_DIR, AppConfig, load_config
from utils.languages import locale_variants, system_languages
from utils.logging import configure_logging, get_logger
from utils.paths import find_program_in_path, is_executable_valid


def test_load_config_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yml")
    assert isinstance(config, AppConfig)
    assert config.apps_dir == DEFAULT_APPS_DIR
    assert config.languages is None


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("apps_dir: /opt/apps\nlanguages: [de_DE, de, C]\n", encoding="utf-8")
    config = load_config(path)
    assert config.apps_dir == Path("/opt/apps")
    assert config.languages == ["de_DE", "de", "C"]


def test_load_config_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == AppConfig()


def test_load_config_rejects_bad_types(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("languages: 42\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(path)


@pytest.mark.parametrize(
    "locale, expected",
    [
        ("C", ["C"]),
        ("de", ["de"]),
        ("en_US", ["en_US", "en"]),
        ("en_US.UTF-8", ["en_US.UTF-8", "en_US", "en.UTF-8", "en"]),
        ("sr_RS@latin", ["sr_RS@latin", "sr@latin", "sr_RS", "sr"]),
    ],
)
def test_locale_variants(locale: str, expected: list[str]) -> None:
    assert locale_variants(locale) == expected


def test_system_languages_defaults_to_c() -> None:
    assert system_languages({}) == ["C"]


def test_system_languages_prefers_language_list() -> None:
    environ = {"LANGUAGE": "fr_FR:de", "LANG": "en_US.UTF-8"}
    assert system_languages(environ) == ["fr_FR", "fr", "de", "C"]


def test_system_languages_falls_through_empty_variables() -> None:
    environ = {"LANGUAGE": "", "LC_ALL": "", "LC_MESSAGES": "pt_BR", "LANG": "en_US"}
    assert system_languages(environ) == ["pt_BR", "pt", "C"]


def test_system_languages_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LANG", "nl_BE.UTF-8")
    assert system_languages()[:2] == ["nl_BE.UTF-8", "nl_BE"]
    assert system_languages()[-1] == "C"


def test_executable_found_on_path(install) -> None:
    bin_dir = install("firefox")
    assert is_executable_valid("firefox")
    assert find_program_in_path("firefox") == bin_dir / "firefox"


@pytest.mark.parametrize("name", [None, "", "missing-browser"])
def test_executable_not_found(bin_dir: Path, name: str | None) -> None:
    assert not is_executable_valid(name)


def test_non_executable_file_is_not_valid(bin_dir: Path) -> None:
    (bin_dir / "plain").write_text("data", encoding="utf-8")
    (bin_dir / "plain").chmod(0o644)
    assert not is_executable_valid("plain")


def test_executable_given_as_path(install, tmp_path: Path) -> None:
    bin_dir = install("xterm")
    assert is_executable_valid(str(bin_dir / "xterm"))
    assert not is_executable_valid(str(tmp_path / "nowhere" / "xterm"))


def test_logging_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO")
    get_logger("defaultapps.loader").info("Loaded %d entries", 3)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Loaded 3 entries" in captured.err
    assert "defaultapps.loader" in captured.err


def test_logging_respects_level(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("WARNING")
    get_logger("defaultapps.loader").debug("dropped entry")
    get_logger("defaultapps.loader").warning("skipped document")
    captured = capsys.readouterr()
    assert "dropped entry" not in captured.err
    assert "skipped document" in captured.err
