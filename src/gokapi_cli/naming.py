# Target filename sanitization for gokapi_cli.
# This module is pure logic and must remain side-effect free.

from __future__ import annotations

import re

# Characters rejected on Windows filenames plus ASCII control characters.
# Each match is replaced one for one; runs are not collapsed.
_ILLEGAL_CHARS_RE = re.compile(r'[<>:"/\\|?*\x00-\x1F]')

# Both separators count, so a Windows-style name cannot smuggle a directory.
_SEPARATORS_RE = re.compile(r"[/\\]")

# Whitespace trimmed from both ends. str.strip() alone would also remove
# 0x1C-0x1F, which must be replaced instead.
_TRIM_CHARS = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def sanitize_filename(name: str) -> str:
    # Reduce a user-supplied name to a single safe path segment.
    if not name:
        return name

    # Keep only the final segment. A trailing separator leaves an empty
    # segment, in which case the last non-empty one is used; a name made
    # only of separators collapses to a single one.
    segments = [s for s in _SEPARATORS_RE.split(name) if s]
    base = segments[-1] if segments else "/"

    base = base.strip(_TRIM_CHARS)
    return _ILLEGAL_CHARS_RE.sub("_", base)
