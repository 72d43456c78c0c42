"""Record and ChangeTracker contracts, plus an in-memory TrackedRecord.

A Record is whatever the orchestrator validates: it exposes attribute
reads, a persisted flag, an error collection, and change tracking.
Rules never write attribute values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from canhas.domain.errors import ErrorCollection


@runtime_checkable
class ChangeTracker(Protocol):
    """Per-attribute change queries for the current validation pass."""

    def was_changed(self, attribute: str) -> bool: ...

    def prior_value(self, attribute: str) -> Any: ...


@runtime_checkable
class Record(Protocol):
    """What a rule needs from the object being validated."""

    @property
    def errors(self) -> ErrorCollection: ...

    @property
    def persisted(self) -> bool: ...

    @property
    def changes(self) -> ChangeTracker: ...

    def read_attribute(self, attribute: str) -> Any: ...


class TrackedRecord:
    """Dictionary-backed record with write tracking.

    Any write marks the attribute changed, even when the new value equals
    the old one. Prior values are those seen at construction or at the
    last :meth:`commit`.

    Usage::

        rec = TrackedRecord({"owner_id": 7}, persisted=True)
        rec["owner_id"] = 8
        rec.was_changed("owner_id")  # True
        rec.prior_value("owner_id")  # 7
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        *,
        persisted: bool = False,
    ) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self._committed: dict[str, Any] = dict(self._values)
        self._written: set[str] = set()
        self._persisted = persisted
        self._errors = ErrorCollection()

    @property
    def errors(self) -> ErrorCollection:
        return self._errors

    @property
    def persisted(self) -> bool:
        return self._persisted

    @property
    def changes(self) -> TrackedRecord:
        return self

    def read_attribute(self, attribute: str) -> Any:
        return self._values.get(attribute)

    def write_attribute(self, attribute: str, value: Any) -> None:
        self._values[attribute] = value
        self._written.add(attribute)

    def was_changed(self, attribute: str) -> bool:
        return attribute in self._written

    def prior_value(self, attribute: str) -> Any:
        return self._committed.get(attribute)

    def changed_attributes(self) -> list[str]:
        return sorted(self._written)

    def commit(self) -> None:
        """Mark as persisted and snapshot current values. Does not validate."""
        self._committed = dict(self._values)
        self._written.clear()
        self._persisted = True

    def __getitem__(self, attribute: str) -> Any:
        return self.read_attribute(attribute)

    def __setitem__(self, attribute: str, value: Any) -> None:
        self.write_attribute(attribute, value)

    def __repr__(self) -> str:
        state = "persisted" if self._persisted else "new"
        return f"TrackedRecord({self._values!r}, {state})"
