"""ValidationFailure, ErrorCollection, and RecordInvalid.

INVARIANT: Rules only append to an ErrorCollection. Reading, clearing,
and rendering belong to the orchestrator and its callers.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from canhas.domain.messages import humanize, lookup_message

if TYPE_CHECKING:
    from canhas.domain.record import Record


class ValidationFailure(BaseModel):
    """One failed check on one attribute.

    Attributes:
        attribute: Name of the attribute that failed.
        kind: Symbolic failure kind (e.g. ``"invalid_url"``).
        options: The rule's options bag, kept for message interpolation.
    """

    model_config = {"frozen": True}

    attribute: str
    kind: str
    options: dict[str, Any] = Field(default_factory=dict)

    def message(self, catalog: dict[str, str] | None = None) -> str:
        """Custom ``message`` option if present, otherwise the catalog/default text."""
        custom = self.options.get("message")
        if custom:
            return str(custom)
        return lookup_message(self.kind, catalog)

    def full_message(self, catalog: dict[str, str] | None = None) -> str:
        return f"{humanize(self.attribute)} {self.message(catalog)}"


class ErrorCollection:
    """Ordered multimap of attribute name to :class:`ValidationFailure`."""

    def __init__(self) -> None:
        self._entries: list[ValidationFailure] = []

    def add(
        self,
        attribute: str,
        kind: str,
        options: dict[str, Any] | None = None,
    ) -> ValidationFailure:
        """Append a failure and return it."""
        failure = ValidationFailure(attribute=attribute, kind=str(kind), options=dict(options or {}))
        self._entries.append(failure)
        return failure

    def on(self, attribute: str) -> list[ValidationFailure]:
        """Failures recorded for *attribute*, in insertion order."""
        return [e for e in self._entries if e.attribute == attribute]

    def kinds(self, attribute: str) -> list[str]:
        return [e.kind for e in self.on(attribute)]

    def added(self, attribute: str, kind: str) -> bool:
        """Whether a failure of *kind* was recorded for *attribute*."""
        return any(e.attribute == attribute and e.kind == kind for e in self._entries)

    def attributes(self) -> list[str]:
        """Attribute names with failures, in first-seen order."""
        return list(dict.fromkeys(e.attribute for e in self._entries))

    def full_messages(self, catalog: dict[str, str] | None = None) -> list[str]:
        return [e.full_message(catalog) for e in self._entries]

    def as_dict(self, catalog: dict[str, str] | None = None) -> dict[str, list[str]]:
        """Group messages by attribute (``{"website": ["is not a valid URL"]}``)."""
        grouped: dict[str, list[str]] = {}
        for entry in self._entries:
            grouped.setdefault(entry.attribute, []).append(entry.message(catalog))
        return grouped

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"ErrorCollection({self.as_dict()!r})"


class RecordInvalid(Exception):
    """Raised when an orchestrator refuses to proceed with an invalid record."""

    def __init__(self, record: Record, catalog: dict[str, str] | None = None) -> None:
        self.record = record
        messages = record.errors.full_messages(catalog)
        super().__init__("Validation failed: " + ", ".join(messages))
