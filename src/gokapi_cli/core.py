# Action dispatch for gokapi_cli.
# Runs once the invocation has been resolved into a mode and, for uploads,
# a validated UploadConfig.
#
# It contains no argument parsing. Transfer and credential exchange with
# the server are collaborators outside this package.

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from gokapi_cli.environment import get_config_location
from gokapi_cli.flags import parse_upload_parameters
from gokapi_cli.models import OperationMode, UploadConfig

console = Console()


def run(mode: OperationMode, args: Sequence[str]) -> None:
    # Entry point for every resolved mode except invalid.
    config_path, _ = get_config_location(args)

    if mode is OperationMode.login:
        run_login(Path(config_path))
    elif mode is OperationMode.logout:
        run_logout(Path(config_path))
    elif mode in (OperationMode.upload, OperationMode.archive_upload):
        config = parse_upload_parameters(
            args, is_archive=mode is OperationMode.archive_upload
        )
        run_upload(config, mode, Path(config_path))
    else:
        raise ValueError(f"No action for mode {mode.value}")


def run_login(config_path: Path) -> None:
    console.print(f"Credentials will be stored in {escape(str(config_path))}")


def run_logout(config_path: Path) -> None:
    # Deleting the configuration file is all logout amounts to.
    if not config_path.exists():
        console.print(f"Not logged in, no configuration at {escape(str(config_path))}")
        return
    config_path.unlink()
    console.print(f"Logged out, removed {escape(str(config_path))}")


def run_upload(config: UploadConfig, mode: OperationMode, config_path: Path) -> None:
    if config.json_output:
        data = config.to_dict()
        # Never echo the password itself.
        data["password"] = bool(config.password)
        console.print(json.dumps(data), markup=False, highlight=False, soft_wrap=True)
        return
    _print_summary(config, mode, config_path)


def _print_summary(config: UploadConfig, mode: OperationMode, config_path: Path) -> None:
    # Human-readable block describing the resolved request.
    target = config.directory or config.file
    console.print("[bold]Upload request[/bold]")
    console.print(f"Mode:      {mode.value}")
    console.print(f"Source:    {escape(target)}")
    if config.file_name:
        console.print(f"Name:      {escape(config.file_name)}")
    if mode is OperationMode.archive_upload and config.tmp_folder:
        console.print(f"Temp:      {escape(config.tmp_folder)}")
    console.print(f"Expiry:    {_limit(config.expiry_days, 'days')}")
    console.print(f"Downloads: {_limit(config.expiry_downloads, 'downloads')}")
    console.print(f"Password:  {'yes' if config.password else 'no'}")
    console.print(f"E2E:       {'disabled' if config.disable_e2e else 'enabled'}")
    console.print(f"Config:    {escape(str(config_path))}")


def _limit(value: int, unit: str) -> str:
    return "unlimited" if value == 0 else f"{value} {unit}"
