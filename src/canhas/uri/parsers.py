"""URI parsing strategies selected by configuration.

Two built-in parsers:
- ``strict``: RFC 3986 ASCII syntax, checked with :mod:`rfc3986`.
- ``idna``: :class:`httpx.URL`, which accepts internationalized hostnames.

A parser returns a :class:`ParsedUri` or raises :class:`UriParseError`.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx
import rfc3986
from pydantic import BaseModel
from rfc3986.exceptions import ValidationError
from rfc3986.validators import Validator

logger = logging.getLogger(__name__)

_SYNTAX_VALIDATOR = Validator().check_validity_of(
    "scheme", "userinfo", "host", "port", "path", "query", "fragment"
)


class UriParseError(ValueError):
    """Raised when text is not syntactically a URI."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r} as a URI: {reason}")


class ParsedUri(BaseModel):
    """Components of a parsed URI. Absent components are ``None``."""

    model_config = {"frozen": True}

    scheme: str | None = None
    userinfo: str | None = None
    host: str | None = None
    port: int | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None

    @property
    def is_relative(self) -> bool:
        """A relative reference carries no scheme."""
        return self.scheme is None


@runtime_checkable
class UriParser(Protocol):
    """Capability: ``parse(text) -> ParsedUri``, raising UriParseError."""

    def parse(self, text: str) -> ParsedUri: ...


class StrictUriParser:
    """ASCII-only RFC 3986 parser. Scheme and host are lower-cased."""

    name = "strict"

    def parse(self, text: str) -> ParsedUri:
        if not text:
            raise UriParseError(text, "empty")
        # rfc3986 anchors with ``$``, which also matches before a trailing newline.
        if not (text.isascii() and text.isprintable()) or " " in text:
            raise UriParseError(text, "contains characters outside RFC 3986")

        ref = rfc3986.uri_reference(text)
        if _was_escaped(text, ref):
            raise UriParseError(text, "contains characters outside RFC 3986")
        try:
            _SYNTAX_VALIDATOR.validate(ref)
        except ValidationError as exc:
            raise UriParseError(text, str(exc)) from exc

        host = ref.host
        if host and host.startswith("["):
            host = host[1:-1]
        return ParsedUri(
            scheme=ref.scheme.lower() if ref.scheme else None,
            userinfo=ref.userinfo or None,
            host=host.lower() if host else None,
            port=int(ref.port) if ref.port else None,
            path=ref.path or "",
            query=ref.query or None,
            fragment=ref.fragment or None,
        )


def _was_escaped(text: str, ref: rfc3986.URIReference) -> bool:
    """True when uri_reference percent-encoded part of *text*.

    Path, query and fragment are escaped on parse, so stray characters and
    broken ``%`` escapes only show up as a longer reference.
    """
    size = len(ref.path or "")
    if ref.scheme is not None:
        size += len(ref.scheme) + 1
    if ref.authority is not None:
        size += len(ref.authority) + 2
    if ref.query is not None:
        size += len(ref.query) + 1
    if ref.fragment is not None:
        size += len(ref.fragment) + 1
    return size != len(text)


class IdnaUriParser:
    """Lenient parser backed by :class:`httpx.URL` with IDNA hostname support."""

    name = "idna"

    def parse(self, text: str) -> ParsedUri:
        if not text:
            raise UriParseError(text, "empty")
        try:
            url = httpx.URL(text)
        except httpx.InvalidURL as exc:
            raise UriParseError(text, str(exc)) from exc

        return ParsedUri(
            scheme=url.scheme or None,
            userinfo=url.userinfo.decode("ascii") or None,
            host=url.host or None,
            port=url.port,
            path=url.path,
            query=url.query.decode("ascii") or None,
            fragment=url.fragment or None,
        )


URI_PARSERS: dict[str, type[UriParser]] = {
    StrictUriParser.name: StrictUriParser,
    IdnaUriParser.name: IdnaUriParser,
}

DEFAULT_URI_PARSER = StrictUriParser.name


def get_uri_parser(name: str = DEFAULT_URI_PARSER) -> UriParser:
    """Instantiate the parser registered under *name*.

    Raises:
        KeyError: If no parser is registered for *name*.
    """
    parser_cls = URI_PARSERS.get(name)
    if parser_cls is None:
        msg = f"No URI parser registered for name={name!r}"
        raise KeyError(msg)
    logger.debug("Using URI parser %s", name)
    return parser_cls()


def register_uri_parser(name: str, parser_cls: type[UriParser]) -> None:
    """Register an additional parser name. Built-in names are reserved."""
    normalized_name = name.strip()
    if not normalized_name:
        msg = "URI parser name must not be empty"
        raise ValueError(msg)
    if normalized_name in (StrictUriParser.name, IdnaUriParser.name):
        msg = f"URI parser {normalized_name!r} conflicts with a built-in registration"
        raise ValueError(msg)
    if not callable(getattr(parser_cls, "parse", None)):
        msg = f"URI parser {normalized_name!r} must define parse()"
        raise TypeError(msg)

    existing = URI_PARSERS.get(normalized_name)
    if existing is not None and existing is not parser_cls:
        msg = f"URI parser {normalized_name!r} is already registered"
        raise ValueError(msg)

    URI_PARSERS[normalized_name] = parser_cls
