"""Exception adapter for stable error records."""

from __future__ import annotations

from typing import Any, Mapping

from .types import ErrorRecord, Severity


class StableError(Exception):
    """Raisable wrapper around one ``ErrorRecord``."""

    def __init__(self, record: ErrorRecord) -> None:
        super().__init__(record.message)
        self.record = record

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def message(self) -> str:
        return self.record.message

    @property
    def category(self) -> str:
        return self.record.category

    @property
    def metadata(self) -> Mapping[str, Any]:
        return self.record.metadata

    @property
    def severity(self) -> Severity:
        return self.record.severity

    @property
    def status_code(self) -> int:
        return self.record.status_code

    @property
    def timestamp(self) -> str:
        return self.record.timestamp

    @property
    def stack(self) -> str | None:
        return self.record.stack

    def to_json(self) -> dict[str, Any]:
        """Return the wrapped record's wire representation."""
        return self.record.to_json()
