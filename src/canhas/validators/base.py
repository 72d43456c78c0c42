"""EachValidator: the per-attribute rule contract.

A rule is built once per (model, attributes) registration and then called
for every record validated. ``validate(record)`` loops the configured
attributes and applies the nil/blank skip policy before delegating to
``validate_each``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from canhas.uri.parsers import StrictUriParser, UriParser
from canhas.validators.options import RuleOptions

if TYPE_CHECKING:
    from canhas.domain.record import Record


@dataclass(frozen=True)
class RuleContext:
    """Capabilities injected into rules at construction time."""

    uri_parser: UriParser = field(default_factory=StrictUriParser)


def is_blank(value: Any) -> bool:
    """``None``, ``False``, whitespace-only strings, and empty collections are blank."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


class EachValidator(ABC):
    """Base class for rules that check one attribute value at a time.

    Subclasses set ``rule_name`` and ``options_model`` and implement
    :meth:`validate_each`.
    """

    rule_name: ClassVar[str] = ""
    options_model: ClassVar[type[RuleOptions]] = RuleOptions

    def __init__(
        self,
        attributes: Iterable[str],
        options: RuleOptions | Mapping[str, Any] | None = None,
    ) -> None:
        attrs = tuple(attributes)
        if not attrs:
            msg = f"{type(self).__name__} requires at least one attribute"
            raise ValueError(msg)
        self.attributes: tuple[str, ...] = attrs
        self.options = self._coerce_options(options)

    @classmethod
    def from_config(
        cls,
        attributes: Iterable[str],
        options: RuleOptions | Mapping[str, Any] | None,
        context: RuleContext,
    ) -> EachValidator:
        """Build the rule from registry configuration.

        Rules that need an injected capability override this.
        """
        return cls(attributes, options)

    @classmethod
    def _coerce_options(cls, options: RuleOptions | Mapping[str, Any] | None) -> RuleOptions:
        if options is None:
            return cls.options_model()
        if isinstance(options, cls.options_model):
            return options
        if isinstance(options, RuleOptions):
            return cls.options_model.model_validate(options.model_dump())
        return cls.options_model.model_validate(dict(options))

    def validate(self, record: Record) -> None:
        """Run :meth:`validate_each` for every configured attribute."""
        for attribute in self.attributes:
            value = record.read_attribute(attribute)
            if value is None and self.options.allow_nil:
                continue
            if self.options.allow_blank and is_blank(value):
                continue
            self.validate_each(record, attribute, value)

    @abstractmethod
    def validate_each(self, record: Record, attribute: str, value: Any) -> None:
        """Append failures for *attribute* to ``record.errors``."""

    def error_metadata(self) -> dict[str, Any]:
        return self.options.error_metadata()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.attributes)!r}, {self.options!r})"
