"""Write-once, read-many rule.

Lets an attribute go from nil to a value once; afterwards the persisted
value is immutable. Pair it with a presence check to get a read-only
column that reports an error instead of silently dropping the write.

eg: ``validations.validates("owner_id", write_once=True)``

With ``ignore_identical`` a blind update that re-assigns the stored
value is accepted:

eg: ``validations.validates("owner_id", write_once={"ignore_identical": True})``
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from canhas.domain.types import ErrorKind
from canhas.validators.base import EachValidator
from canhas.validators.options import WriteOnceOptions

if TYPE_CHECKING:
    from canhas.domain.record import Record

logger = logging.getLogger(__name__)


class WriteOnceValidator(EachValidator):
    """Rejects changes to an attribute whose persisted value is not None."""

    rule_name = "write_once"
    options_model = WriteOnceOptions

    def validate(self, record: Record) -> None:
        # allow_nil/allow_blank must not let a value be cleared back to None.
        for attribute in self.attributes:
            self.validate_each(record, attribute, record.read_attribute(attribute))

    def validate_each(self, record: Record, attribute: str, value: Any) -> None:
        if not record.persisted:
            return
        changes = record.changes
        if not changes.was_changed(attribute):
            return
        prior = changes.prior_value(attribute)
        if prior is None:
            return

        assert isinstance(self.options, WriteOnceOptions)
        if self.options.ignore_identical and value == prior:
            return

        logger.debug("Rejected change of %s from %r to %r", attribute, prior, value)
        record.errors.add(attribute, ErrorKind.UNCHANGEABLE, self.error_metadata())
