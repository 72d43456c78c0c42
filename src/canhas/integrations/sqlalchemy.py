"""SQLAlchemy ORM adapter.

:class:`SqlAlchemyRecord` exposes a mapped instance through the Record and
ChangeTracker contracts using attribute history. :func:`install_validations`
runs the configured rules from ``before_flush`` and aborts the flush with
:class:`RecordInvalid` when a new or dirty instance fails.

SQLAlchemy only reports an attribute as changed when the new value differs
from the committed one, so identical re-assignments never reach write-once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from itertools import chain
from typing import Any

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from canhas.domain.errors import ErrorCollection, RecordInvalid
from canhas.validators.validations import Validations

logger = logging.getLogger(__name__)


class SqlAlchemyRecord:
    """Record/ChangeTracker view over one mapped instance."""

    def __init__(self, instance: object) -> None:
        self.instance = instance
        self._state = inspect(instance)
        self._errors = ErrorCollection()

    @property
    def errors(self) -> ErrorCollection:
        return self._errors

    @property
    def persisted(self) -> bool:
        """True once the instance has an identity key (loaded or flushed)."""
        return self._state.has_identity

    @property
    def changes(self) -> SqlAlchemyRecord:
        return self

    def read_attribute(self, attribute: str) -> Any:
        return getattr(self.instance, attribute)

    def was_changed(self, attribute: str) -> bool:
        return self._state.attrs[attribute].load_history().has_changes()

    def prior_value(self, attribute: str) -> Any:
        """The committed value (None when there is none)."""
        history = self._state.attrs[attribute].load_history()
        if history.deleted:
            return history.deleted[0]
        if history.unchanged:
            return history.unchanged[0]
        return None

    def __repr__(self) -> str:
        return f"SqlAlchemyRecord({self.instance!r})"


def validations_for(
    instance: object,
    model_validations: Mapping[type, Validations],
) -> Validations | None:
    """Find the Validations registered for *instance*'s class or nearest base."""
    for cls in type(instance).__mro__:
        validations = model_validations.get(cls)
        if validations is not None:
            return validations
    return None


def _receive_set(target: object, value: Any, oldvalue: Any, initiator: Any) -> None:
    """No-op listener; registering it with active_history loads replaced values."""


def _track_prior_values(model: type, validations: Validations) -> None:
    mapper = inspect(model, raiseerr=False)
    if mapper is None:
        return
    for validator in validations.validators:
        for attribute in validator.attributes:
            if attribute in mapper.attrs:
                event.listen(
                    getattr(model, attribute),
                    "set",
                    _receive_set,
                    active_history=True,
                    propagate=True,
                )


def install_validations(
    target: Session | type[Session] | Any,
    model_validations: Mapping[type, Validations],
) -> Callable[..., None]:
    """Validate new and dirty instances before every flush on *target*.

    *target* is anything SQLAlchemy accepts for session events: a Session,
    a sessionmaker, or the Session class. Validated attributes switch to
    active history so an overwrite of an expired value still records the
    committed one. Returns the listener so it can be removed with
    ``sqlalchemy.event.remove(target, "before_flush", listener)``.

    Raises (from the flush):
        RecordInvalid: For the first instance that fails validation.
    """
    registry = dict(model_validations)
    for model, validations in registry.items():
        _track_prior_values(model, validations)

    def _validate_before_flush(session: Session, flush_context: Any, instances: Any) -> None:
        for instance in chain(list(session.new), list(session.dirty)):
            validations = validations_for(instance, registry)
            if validations is None:
                continue
            record = SqlAlchemyRecord(instance)
            if not validations.validate(record):
                logger.debug("Aborting flush: %s invalid", type(instance).__name__)
                raise RecordInvalid(record)

    event.listen(target, "before_flush", _validate_before_flush)
    return _validate_before_flush
