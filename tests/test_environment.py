# Unit tests for gokapi_cli.environment.
# These tests validate container detection and config file selection.

from __future__ import annotations

import pytest

from gokapi_cli import environment
from gokapi_cli.environment import get_config_location, is_docker_instance
from gokapi_cli.errors import MissingValueError


def test_is_docker_instance_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert is_docker_instance() is False
    monkeypatch.setenv("DOCKER", "true")
    assert is_docker_instance() is True
    monkeypatch.setenv("DOCKER", "1")
    assert is_docker_instance() is False


def test_get_config_location_default() -> None:
    assert get_config_location(["prog", "login"]) == (
        environment.DEFAULT_CONFIG_FILE_NAME,
        True,
    )


def test_get_config_location_container(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCKER", "true")
    assert get_config_location(["prog", "login"]) == (
        environment.DOCKER_FOLDER_CONFIG_FILE,
        True,
    )


def test_get_config_location_explicit_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCKER", "true")
    assert get_config_location(["prog", "logout", "-c", "/tmp/c.json"]) == ("/tmp/c.json", False)
    assert get_config_location(["prog", "upload", "-j", "--configuration", "x.json"]) == (
        "x.json",
        False,
    )


def test_get_config_location_ignores_mode_token() -> None:
    # Index 1 is the command and is never read as a flag.
    assert get_config_location(["prog", "-c", "x.json"]) == (
        environment.DEFAULT_CONFIG_FILE_NAME,
        True,
    )


def test_get_config_location_missing_value() -> None:
    with pytest.raises(MissingValueError):
        get_config_location(["prog", "login", "-c"])
