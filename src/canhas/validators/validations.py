"""Validations: the orchestrator that runs rules against a record.

Usage::

    validations = (
        Validations()
        .validates("website", url={"allow_nil": True})
        .validates("owner_id", write_once=True)
    )
    if not validations.validate(record):
        print(record.errors.full_messages())
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from canhas.domain.errors import RecordInvalid
from canhas.validators.base import EachValidator, RuleContext
from canhas.validators.options import RuleOptions
from canhas.validators.registry import get_rule

if TYPE_CHECKING:
    from canhas.domain.record import Record

logger = logging.getLogger(__name__)


class Validations:
    """Ordered list of rules for one kind of record."""

    def __init__(
        self,
        context: RuleContext | None = None,
        *,
        catalog: dict[str, str] | None = None,
    ) -> None:
        self._context = context or RuleContext()
        self._catalog = catalog
        self._validators: list[EachValidator] = []

    @property
    def validators(self) -> tuple[EachValidator, ...]:
        return tuple(self._validators)

    def validates(
        self,
        *attributes: str,
        **rules: bool | RuleOptions | Mapping[str, Any] | None,
    ) -> Validations:
        """Register one rule per keyword for *attributes*.

        ``True`` uses default options, a mapping or options model configures
        the rule, ``False``/``None`` skips it.

        Raises:
            ValueError: If no attributes are given.
            KeyError: If a keyword does not name a registered rule.
        """
        if not attributes:
            msg = "validates() requires at least one attribute"
            raise ValueError(msg)

        for name, config in rules.items():
            if config is None or config is False:
                continue
            rule_cls = get_rule(name)
            options = None if config is True else config
            validator = rule_cls.from_config(attributes, options, self._context)
            self._validators.append(validator)
            logger.debug("Registered %s on %s", name, ", ".join(attributes))
        return self

    def add(self, validator: EachValidator) -> Validations:
        """Register an already constructed rule."""
        self._validators.append(validator)
        return self

    def validate(self, record: Record) -> bool:
        """Clear ``record.errors``, run every rule, and report validity."""
        record.errors.clear()
        for validator in self._validators:
            validator.validate(record)
        if record.errors:
            logger.debug("Record invalid: %s", record.errors.full_messages(self._catalog))
        return not record.errors

    def validate_or_raise(self, record: Record) -> None:
        """Like :meth:`validate`, but raise RecordInvalid on failure."""
        if not self.validate(record):
            raise RecordInvalid(record, self._catalog)

    def __len__(self) -> int:
        return len(self._validators)
