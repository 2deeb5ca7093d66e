# Shared fixtures for gokapi_cli tests.
# Every test starts outside a container deployment unless it opts in.

from __future__ import annotations

from pathlib import Path

import pytest

from gokapi_cli import environment


@pytest.fixture(autouse=True)
def _no_docker(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(environment.DOCKER_ENV_VAR, raising=False)


@pytest.fixture
def drop_folder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # A container deployment whose drop folder is a temporary directory.
    folder = tmp_path / "upload"
    folder.mkdir()
    monkeypatch.setenv(environment.DOCKER_ENV_VAR, "true")
    monkeypatch.setattr(environment, "DOCKER_FOLDER_UPLOAD", str(folder))
    return folder
