# Error types for gokapi_cli.
# Parsing code raises these; only the CLI entry point turns them into
# printed messages and process exit codes.

from __future__ import annotations

EXIT_OK = 0
EXIT_MISUSE = 2
EXIT_USAGE = 3


class CliError(Exception):
    exit_code = EXIT_MISUSE


class UsageError(CliError):
    # The invocation is malformed; the caller prints usage.
    exit_code = EXIT_USAGE


class MissingValueError(UsageError):
    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"Missing value for {flag}")


class HelpRequested(UsageError):
    exit_code = EXIT_OK

    def __init__(self) -> None:
        super().__init__("Help requested")


class ParameterError(CliError):
    # A required or well-formed parameter is missing; printed as one line.
    exit_code = EXIT_MISUSE


class InvalidIntegerError(ParameterError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"{token} is not a valid integer")


class MissingParameterError(ParameterError):
    pass
