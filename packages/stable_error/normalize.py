"""Message normalization for stable error identifiers.

Variable substrings (UUIDs, timestamps, numbers) are replaced with fixed
placeholders so that two occurrences of the same failure normalize to the same
text. Rules run in declaration order; earlier rules are more specific than
later ones and must fire first.
"""

from __future__ import annotations

import re
from typing import Any

UUID_PLACEHOLDER = "UUID"
TIMESTAMP_PLACEHOLDER = "TIMESTAMP"
TIMESTAMP_MS_PLACEHOLDER = "TIMESTAMP_MS"
NUMBER_PLACEHOLDER = "NUMBER"

NORMALIZATION_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (
        re.compile(
            r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
            re.IGNORECASE,
        ),
        UUID_PLACEHOLDER,
    ),
    (
        re.compile(
            r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z?",
            re.IGNORECASE | re.ASCII,
        ),
        TIMESTAMP_PLACEHOLDER,
    ),
    # Millisecond epochs; must precede the generic number rule.
    (re.compile(r"\b\d{13}\b", re.ASCII), TIMESTAMP_MS_PLACEHOLDER),
    (re.compile(r"\b\d+\b", re.ASCII), NUMBER_PLACEHOLDER),
)

# Whitespace as ECMAScript defines it for `trim()` and `\s`; differs from
# `str.isspace` (no \x1c-\x1f or \x85, adds \ufeff).
JS_WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_WHITESPACE_RE = re.compile(f"[{re.escape(JS_WHITESPACE)}]+")


def normalize_message(message: Any) -> str:
    """Return the canonical form of ``message`` used for identifier derivation.

    ``None`` and non-string input normalize to an empty string.
    """
    if not message or not isinstance(message, str):
        return ""

    normalized = message.lower().strip(JS_WHITESPACE)
    for pattern, placeholder in NORMALIZATION_RULES:
        normalized = pattern.sub(placeholder, normalized)

    return _WHITESPACE_RE.sub(" ", normalized)


__all__ = [
    "JS_WHITESPACE",
    "NORMALIZATION_RULES",
    "NUMBER_PLACEHOLDER",
    "TIMESTAMP_MS_PLACEHOLDER",
    "TIMESTAMP_PLACEHOLDER",
    "UUID_PLACEHOLDER",
    "normalize_message",
]
