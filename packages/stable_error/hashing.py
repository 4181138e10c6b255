"""Stable identifier derivation.

Identifiers are an equivalence-grouping key, not a security token. The hash is
a 32-bit polynomial (multiplier 31) over UTF-16 code units with signed
wraparound, rendered as the zero-padded hex of its absolute value. This keeps
identifiers bit-exact with ones already stored by existing consumers.
"""

from __future__ import annotations

import math
import struct
from decimal import Decimal
from typing import Any, Mapping

from .metadata import filter_metadata
from .normalize import JS_WHITESPACE, normalize_message

ID_LENGTH = 8

_UINT32_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def rolling_hash32(text: str) -> int:
    """Return the signed 32-bit polynomial hash of ``text``."""
    acc = 0
    for (unit,) in struct.iter_unpack("<H", text.encode("utf-16-le", "surrogatepass")):
        acc = (acc * 31 + unit) & _UINT32_MASK
    return acc - (1 << 32) if acc & _SIGN_BIT else acc


def build_canonical_string(
    message: Any, category: str | None, metadata: Mapping[str, Any] | None
) -> str:
    """Build the ``message:...|category:...[|metadata:...]`` hash input."""
    parts = [
        f"message:{normalize_message(message)}",
        f"category:{(category or '').lower().strip(JS_WHITESPACE)}",
    ]

    filtered = filter_metadata(metadata)
    if filtered:
        rendered = ",".join(
            f"{key}:{_stringify(filtered[key]).lower().strip(JS_WHITESPACE)}"
            for key in sorted(filtered)
        )
        parts.append(f"metadata:{rendered}")

    return "|".join(parts)


def generate_stable_id(
    message: Any, category: str | None, metadata: Mapping[str, Any] | None
) -> str:
    """Derive the 8-character lowercase hex identifier for an error."""
    digest = abs(rolling_hash32(build_canonical_string(message, category, metadata)))
    return format(digest, "x").rjust(ID_LENGTH, "0")


def _stringify(value: Any) -> str:
    """Render a metadata value the way existing identifiers were computed."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _number_to_string(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _stringify(item) for item in value)
    return str(value)


def _number_to_string(value: float) -> str:
    """Format a float with ECMAScript ``Number.prototype.toString`` rules.

    Shortest round-trip digits come from ``repr``; the decimal point sits
    where the exponent puts it, switching to ``e+N``/``e-N`` notation outside
    ``1e-7 < |value| < 1e21``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        rendered = digits + "0" * (n - k)
    elif 0 < n <= 21:
        rendered = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        rendered = f"0.{'0' * -n}{digits}"
    else:
        power = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        rendered = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"

    return f"-{rendered}" if value < 0 else rendered


__all__ = [
    "ID_LENGTH",
    "build_canonical_string",
    "generate_stable_id",
    "rolling_hash32",
]
