"""Default error messages and attribute humanization."""

from __future__ import annotations

DEFAULT_MESSAGES: dict[str, str] = {
    "invalid_url": "is not a valid URL",
    "unchangeable": "cannot be changed",
}


def humanize(attribute: str) -> str:
    """Turn an attribute name into a label.

    Examples:
        >>> humanize("website")
        'Website'
        >>> humanize("owner_id")
        'Owner'
        >>> humanize("home_page_url")
        'Home page url'
    """
    text = attribute.removesuffix("_id").replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def lookup_message(kind: str, catalog: dict[str, str] | None = None) -> str:
    """Resolve the message for *kind*: catalog override, then default, then the kind itself."""
    if catalog and catalog.get(kind):
        return catalog[kind]
    return DEFAULT_MESSAGES.get(kind, kind.replace("_", " "))
