"""URL rule: the value must be an absolute http/https URL.

eg: ``validations.validates("website", url=True)``
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from canhas.domain.types import ErrorKind
from canhas.uri.parsers import ParsedUri, StrictUriParser, UriParser
from canhas.validators.base import EachValidator, RuleContext
from canhas.validators.options import RuleOptions, UrlOptions

if TYPE_CHECKING:
    from canhas.domain.record import Record

logger = logging.getLogger(__name__)

HTTP_SCHEMES = frozenset({"http", "https"})


class UrlValidator(EachValidator):
    """Rejects values that are not absolute http/https URLs.

    Parse failures, relative references, host-less URIs, and any other
    scheme all record ``invalid_url``. Parse errors never escape.
    """

    rule_name = "url"
    options_model = UrlOptions

    def __init__(
        self,
        attributes: Iterable[str],
        options: RuleOptions | Mapping[str, Any] | None = None,
        *,
        uri_parser: UriParser | None = None,
    ) -> None:
        super().__init__(attributes, options)
        self.uri_parser: UriParser = uri_parser or StrictUriParser()

    @classmethod
    def from_config(
        cls,
        attributes: Iterable[str],
        options: RuleOptions | Mapping[str, Any] | None,
        context: RuleContext,
    ) -> UrlValidator:
        return cls(attributes, options, uri_parser=context.uri_parser)

    def validate_each(self, record: Record, attribute: str, value: Any) -> None:
        uri = self.parse(value)
        if uri is None or uri.is_relative or not uri.host or uri.scheme not in HTTP_SCHEMES:
            logger.debug("Rejected %r for %s as a URL", value, attribute)
            record.errors.add(attribute, ErrorKind.INVALID_URL, self.error_metadata())

    def parse(self, value: Any) -> ParsedUri | None:
        """Parse *value*, returning None for anything that is not a URI."""
        if value is None:
            return None
        try:
            if isinstance(value, (bytes, bytearray)):
                text = bytes(value).decode("utf-8")
            else:
                text = value if isinstance(value, str) else str(value)
            return self.uri_parser.parse(text)
        except Exception as exc:
            # Conversion and parser failures of any kind mean "not a URL".
            logger.debug("Could not parse %r as a URI: %s", value, exc)
            return None
