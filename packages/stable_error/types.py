"""Canonical value types for stable errors.

``ErrorRecord`` is the transport-agnostic value produced by the builder. It is
the canonical shape; ``StableError`` adapts it into Python's exception flow
only where a caller needs to raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from .exceptions import StableError

STABLE_ERROR_NAME = "StableError"
DEFAULT_CATEGORY = "general"
DEFAULT_STATUS_CODE = 500


class Severity(str, Enum):
    """Closed set of error severities."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


DEFAULT_SEVERITY = Severity.MEDIUM


@dataclass(frozen=True)
class ErrorRecord:
    """One error occurrence with its stable identifier.

    ``metadata`` keeps every key the caller supplied; only the allow-listed
    subset contributed to ``id``.
    """

    id: str
    message: str
    category: str = DEFAULT_CATEGORY
    metadata: Mapping[str, Any] = field(default_factory=dict)
    severity: Severity = DEFAULT_SEVERITY
    status_code: int = DEFAULT_STATUS_CODE
    timestamp: str = ""
    stack: str | None = None
    name: str = field(default=STABLE_ERROR_NAME, init=False)

    def to_json(self) -> dict[str, Any]:
        """Return the wire representation consumed by logging and HTTP layers."""
        return {
            "id": self.id,
            "message": self.message,
            "category": self.category,
            "metadata": dict(self.metadata),
            "severity": self.severity.value,
            "timestamp": self.timestamp,
            "statusCode": self.status_code,
            "stack": self.stack,
        }

    def as_exception(self) -> StableError:
        """Wrap this record in a raisable ``StableError``."""
        from .exceptions import StableError

        return StableError(self)
