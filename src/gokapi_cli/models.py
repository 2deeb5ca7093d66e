# Shared data models for gokapi_cli.
# Lives in its own module to avoid circular imports between flags and core.

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class OperationMode(str, Enum):
    login = "login"
    logout = "logout"
    upload = "upload"
    archive_upload = "upload-dir"
    invalid = "invalid"


@dataclass(frozen=True)
class UploadConfig:
    file: str = ""
    directory: str = ""
    tmp_folder: str = ""
    file_name: str = ""

    json_output: bool = False
    disable_e2e: bool = False

    # 0 means unlimited for both expiry fields.
    expiry_days: int = 0
    expiry_downloads: int = 0

    password: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
