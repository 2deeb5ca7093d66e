# Deployment environment and well-known paths for gokapi_cli.
# Container deployments change the default configuration location and
# enable drop-folder auto-discovery.
#
# Values are read at call time so tests can adjust them.

from __future__ import annotations

import os
from typing import Sequence, Tuple

from gokapi_cli.errors import MissingValueError

DOCKER_ENV_VAR = "DOCKER"

DEFAULT_CONFIG_FILE_NAME = "gokapi-cli.json"
DOCKER_FOLDER_CONFIG = "/app/config/"
DOCKER_FOLDER_CONFIG_FILE = DOCKER_FOLDER_CONFIG + DEFAULT_CONFIG_FILE_NAME
DOCKER_FOLDER_UPLOAD = "/upload/"

CONFIG_FLAGS = ("-c", "--configuration")


def is_docker_instance() -> bool:
    # Report whether the process runs inside the container image.
    return os.environ.get(DOCKER_ENV_VAR) == "true"


def get_config_location(args: Sequence[str]) -> Tuple[str, bool]:
    # Return the configuration file path and whether it is the default.
    # An explicit -c/--configuration wins; otherwise the container path is
    # used inside a container deployment and the plain file name elsewhere.
    for i in range(2, len(args)):
        if args[i] in CONFIG_FLAGS:
            if i + 1 >= len(args):
                raise MissingValueError(args[i])
            return args[i + 1], False

    if is_docker_instance():
        return DOCKER_FOLDER_CONFIG_FILE, True
    return DEFAULT_CONFIG_FILE_NAME, True
