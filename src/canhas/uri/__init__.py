"""URI parsing strategies for the URL rule."""

from canhas.uri.parsers import (
    IdnaUriParser,
    ParsedUri,
    StrictUriParser,
    UriParseError,
    UriParser,
    get_uri_parser,
)

__all__ = [
    "IdnaUriParser",
    "ParsedUri",
    "StrictUriParser",
    "UriParseError",
    "UriParser",
    "get_uri_parser",
]
