"""
.env parsing — raw environment-file text to an ordered key/value dict.

Only the plain ``KEY=VALUE`` grammar is understood.  Keys must be
upper-case identifiers; anything else is silently dropped.
"""

from __future__ import annotations

import re

_LINE_RE = re.compile(r"^([A-Z][A-Z0-9_]*)=(.*)$")


def parse_env(content: str) -> dict[str, str]:
    """Parse .env content into a key → value dict.

    Handles:
    - KEY=value (value is everything after the first ``=``, trimmed)
    - Comments (#)
    - Empty lines

    Lines without ``=`` or with a non-matching key are skipped.
    Duplicate keys keep the last value.  Never raises.
    """
    result: dict[str, str] = {}
    for line in content.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        m = _LINE_RE.match(line)
        if not m:
            continue

        result[m.group(1)] = m.group(2).strip()

    return result
