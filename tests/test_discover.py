# Unit tests for gokapi_cli.discover.
# These tests validate drop-folder auto-discovery and its ambiguity policy.

from __future__ import annotations

import os
from pathlib import Path

from gokapi_cli.discover import find_docker_upload


def test_find_docker_upload_outside_container_is_noop(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    assert find_docker_upload(False, str(tmp_path)) == (False, "")
    assert find_docker_upload(True, str(tmp_path)) == (False, "")


def test_find_docker_upload_single_file(drop_folder: Path) -> None:
    (drop_folder / "report.pdf").write_text("x", encoding="utf-8")
    found, path = find_docker_upload(False)
    assert found is True
    assert path == os.path.join(str(drop_folder), "report.pdf")


def test_find_docker_upload_refuses_to_guess(drop_folder: Path) -> None:
    (drop_folder / "a.txt").write_text("a", encoding="utf-8")
    (drop_folder / "b.txt").write_text("b", encoding="utf-8")
    assert find_docker_upload(False) == (False, "")


def test_find_docker_upload_ignores_directories(drop_folder: Path) -> None:
    (drop_folder / "sub").mkdir()
    (drop_folder / "only.txt").write_text("x", encoding="utf-8")
    found, path = find_docker_upload(False)
    assert found is True
    assert path.endswith("only.txt")


def test_find_docker_upload_empty_folder(drop_folder: Path) -> None:
    (drop_folder / "sub").mkdir()
    assert find_docker_upload(False) == (False, "")
    assert find_docker_upload(True) == (False, "")


def test_find_docker_upload_archive_returns_folder(drop_folder: Path) -> None:
    (drop_folder / "a.txt").write_text("a", encoding="utf-8")
    (drop_folder / "b.txt").write_text("b", encoding="utf-8")
    assert find_docker_upload(True) == (True, str(drop_folder))


def test_find_docker_upload_missing_folder_is_not_found(drop_folder: Path) -> None:
    missing = drop_folder / "nope"
    assert find_docker_upload(False, str(missing)) == (False, "")
    assert find_docker_upload(True, str(missing)) == (False, "")
