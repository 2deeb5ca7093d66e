# Package initialization for gokapi_cli.
# This file intentionally contains only minimal metadata.
# Argument resolution lives in flags; actions live in core.

__all__ = [
    "__version__",
]

# Package version.
# This is duplicated in pyproject.toml; keep them in sync.
__version__ = "1.0.0"
