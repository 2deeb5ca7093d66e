# Argument resolution for gokapi_cli.
# This file turns the raw argument list into an operation mode and,
# for uploads, into a validated UploadConfig.
#
# Nothing here prints or exits. Failures are raised as CliError
# subclasses and handled once, in cli.

from __future__ import annotations

import re
from dataclasses import replace
from typing import Dict, List, Sequence

from gokapi_cli import __version__, environment
from gokapi_cli.discover import find_docker_upload
from gokapi_cli.errors import (
    HelpRequested,
    InvalidIntegerError,
    MissingParameterError,
    MissingValueError,
)
from gokapi_cli.models import OperationMode, UploadConfig
from gokapi_cli.naming import sanitize_filename

_MODES: Dict[str, OperationMode] = {
    "login": OperationMode.login,
    "logout": OperationMode.logout,
    "upload": OperationMode.upload,
    "upload-dir": OperationMode.archive_upload,
}

# Flags that take the following argument as their value, mapped to the
# UploadConfig field they set. -c is consumed here but resolved by
# environment.get_config_location.
_STRING_FLAGS: Dict[str, str] = {
    "-f": "file",
    "--file": "file",
    "-D": "directory",
    "--directory": "directory",
    "-t": "tmp_folder",
    "--tempfolder": "tmp_folder",
    "--tmpfolder": "tmp_folder",
    "-n": "file_name",
    "--name": "file_name",
    "-p": "password",
    "--password": "password",
}
_INT_FLAGS: Dict[str, str] = {
    "-e": "expiry_days",
    "--expiry-days": "expiry_days",
    "-d": "expiry_downloads",
    "--expiry-downloads": "expiry_downloads",
}
_TOGGLE_FLAGS: Dict[str, str] = {
    "-j": "json_output",
    "--json": "json_output",
    "-x": "disable_e2e",
    "--disable-e2e": "disable_e2e",
}
_HELP_FLAGS = ("-h", "--help")

# Base-10 with an optional sign; no whitespace or digit separators.
_INT_RE = re.compile(r"[+-]?[0-9]+")

# Values must fit a signed 64-bit integer.
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1


def resolve_mode(args: Sequence[str]) -> OperationMode:
    # Select the operation from the first token after the program name.
    # Missing and unknown commands both resolve to invalid.
    if len(args) < 2:
        return OperationMode.invalid
    if args[1] == "help":
        raise HelpRequested()
    return _MODES.get(args[1], OperationMode.invalid)


def parse_upload_parameters(args: Sequence[str], is_archive: bool) -> UploadConfig:
    # Build the upload configuration from args[2:].
    # Raises HelpRequested for -h/--help, MissingValueError when a flag is
    # the last argument, InvalidIntegerError for a bad expiry value and
    # MissingParameterError when no upload target can be determined.
    # Unknown tokens are skipped.
    values: Dict[str, object] = {}

    i = 2
    while i < len(args):
        token = args[i]
        if token in _TOGGLE_FLAGS:
            values[_TOGGLE_FLAGS[token]] = True
        elif token in _STRING_FLAGS:
            i = _next_index(args, i)
            values[_STRING_FLAGS[token]] = args[i]
        elif token in _INT_FLAGS:
            i = _next_index(args, i)
            values[_INT_FLAGS[token]] = _require_int(args[i])
        elif token in environment.CONFIG_FLAGS:
            i = _next_index(args, i)
        elif token in _HELP_FLAGS:
            raise HelpRequested()
        i += 1

    config = UploadConfig(**values)
    config = replace(
        config,
        expiry_days=max(config.expiry_days, 0),
        expiry_downloads=max(config.expiry_downloads, 0),
        file_name=sanitize_filename(config.file_name),
    )
    return require_upload_target(config, is_archive)


def require_upload_target(config: UploadConfig, is_archive: bool) -> UploadConfig:
    # Ensure the config names something to upload.
    # Inside a container the drop folder is consulted before giving up;
    # elsewhere a missing flag is immediately fatal.
    if is_archive and config.directory:
        return config
    if not is_archive and config.file:
        return config

    if not environment.is_docker_instance():
        if is_archive:
            raise MissingParameterError("Missing parameter --directory")
        raise MissingParameterError("Missing parameter --file")

    folder = environment.DOCKER_FOLDER_UPLOAD
    found, upload_path = find_docker_upload(is_archive, folder)
    if not found:
        if is_archive:
            raise MissingParameterError(
                f"Missing parameter --file and no file found in {folder}"
            )
        raise MissingParameterError(
            f"Missing parameter --file and no file or more than one file found in {folder}"
        )

    return replace(config, file=upload_path)


def _next_index(args: Sequence[str], i: int) -> int:
    # Position of the value belonging to the flag at i.
    if i + 1 >= len(args):
        raise MissingValueError(args[i])
    return i + 1


def _require_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise InvalidIntegerError(token)
    value = int(token)
    if not _INT_MIN <= value <= _INT_MAX:
        raise InvalidIntegerError(token)
    return value


def usage_lines() -> List[str]:
    # Full usage text, one entry per output line.
    return [
        f"gokapi-cli {__version__}",
        "",
        "Usage:",
        "  gokapi-cli [command] [options]",
        "",
        "Commands:",
        "  login          Save login credentials",
        "  upload         Upload a file to the Gokapi instance",
        "  upload-dir     Upload a folder as a zip file to the Gokapi instance",
        "  logout         Delete login credentials",
        "  help           Show this help message",
        "",
        "Options:",
        '  -f, --file <path>               File to upload (required for "upload")',
        '  -D, --directory <path>          Folder to upload (required for "upload-dir")',
        f"  -c, --configuration <path>      Path to configuration file (default: {environment.DEFAULT_CONFIG_FILE_NAME})",
        "  -j, --json                      Output the result in JSON only",
        "  -x, --disable-e2e               Disable end-to-end encryption",
        "  -e, --expiry-days <int>         Set file expiry in days (default: unlimited)",
        "  -d, --expiry-downloads <int>    Set max allowed downloads (default: unlimited)",
        "  -p, --password <string>         Set a password for the file",
        "  -n, --name <string>             Change final filename for uploaded file",
        "  -t, --tmpfolder <path>          Folder for temporary Zip file when uploading a directory",
        "  -h, --help                      Show this help message",
        "",
        "Examples:",
        "  gokapi-cli login",
        "  gokapi-cli logout -c /path/to/config",
        "  gokapi-cli upload -f /file/to/upload --expiry-days 7 --json",
        "  gokapi-cli upload-dir -D /path/to/upload -t /mnt/tmp",
    ]
