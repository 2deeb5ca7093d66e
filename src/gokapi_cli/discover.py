# Drop-folder auto-discovery for gokapi_cli.
# Inside a container deployment the upload target may be left implicit:
# files placed in the well-known drop folder are picked up instead.
#
# Nothing is mutated here and read failures are never surfaced.

from __future__ import annotations

import os
from typing import List, Optional, Tuple

from gokapi_cli import environment


def _regular_files(folder: str) -> List[str]:
    # One snapshot of the folder. Symlinks and subdirectories do not count.
    with os.scandir(folder) as it:
        return [entry.name for entry in it if entry.is_file(follow_symlinks=False)]


def find_docker_upload(is_archive: bool, folder: Optional[str] = None) -> Tuple[bool, str]:
    # Return (found, path) for the implicit upload target.
    # Archive mode uploads the whole folder once it holds any file.
    # Single-file mode refuses to guess when more than one file is present.
    if not environment.is_docker_instance():
        return False, ""

    if folder is None:
        folder = environment.DOCKER_FOLDER_UPLOAD

    try:
        names = _regular_files(folder)
    except OSError:
        return False, ""

    if is_archive:
        return (True, folder) if names else (False, "")

    if len(names) != 1:
        return False, ""
    return True, os.path.join(folder, names[0])
