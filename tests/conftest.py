from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest
from loguru import logger

LANGUAGE_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


@pytest.fixture(autouse=True)
def _configure_test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in LANGUAGE_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    project_root = Path(__file__).resolve().parents[1]
    src_root = project_root / "src"
    if str(src_root) not in sys.path:
        sys.path.insert(0, str(src_root))


@pytest.fixture
def bin_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A private directory that is the only entry of ``PATH``."""

    path = tmp_path / "bin"
    path.mkdir()
    monkeypatch.setenv("PATH", str(path))
    return path


@pytest.fixture
def install(bin_dir: Path) -> Callable[..., Path]:
    def _install(*names: str) -> Path:
        for name in names:
            program = bin_dir / name
            program.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
            program.chmod(0o755)
        return bin_dir

    return _install


@pytest.fixture
def apps_dir(tmp_path: Path) -> Path:
    path = tmp_path / "default-apps"
    path.mkdir()
    return path


def write_document(path: Path, body: str) -> Path:
    path.write_text(
        f'<?xml version="1.0" encoding="UTF-8"?>\n<default-apps>{body}</default-apps>\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    logger.remove()
    logging.getLogger().handlers.clear()
