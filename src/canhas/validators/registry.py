"""Rule registry: keyword name -> rule class.

Built-ins: ``url`` and ``write_once``. Plugins add more through the
``register_rules`` hook. Built-in names are reserved.
"""

from __future__ import annotations

from canhas.validators.base import EachValidator
from canhas.validators.url import UrlValidator
from canhas.validators.write_once import WriteOnceValidator

RULE_REGISTRY: dict[str, type[EachValidator]] = {}


def _builtin_rule_map() -> dict[str, type[EachValidator]]:
    return {
        UrlValidator.rule_name: UrlValidator,
        WriteOnceValidator.rule_name: WriteOnceValidator,
    }


def get_rule(name: str) -> type[EachValidator]:
    """Look up the rule class registered under *name*.

    Raises:
        KeyError: If no rule is registered for *name*.
    """
    if name in RULE_REGISTRY:
        return RULE_REGISTRY[name]
    msg = f"No validation rule registered for name={name!r}"
    raise KeyError(msg)


def register_rule(name: str, rule_cls: type[EachValidator]) -> None:
    """Register a custom rule class under a keyword name."""
    normalized_name = name.strip()
    if not normalized_name:
        msg = "Rule name must not be empty"
        raise ValueError(msg)

    if not isinstance(rule_cls, type) or not issubclass(rule_cls, EachValidator):
        msg = f"Rule {normalized_name!r} must extend EachValidator"
        raise TypeError(msg)

    if normalized_name in _builtin_rule_map():
        msg = f"Rule {normalized_name!r} conflicts with a built-in registration"
        raise ValueError(msg)

    existing = RULE_REGISTRY.get(normalized_name)
    if existing is not None and existing is not rule_cls:
        msg = f"Rule {normalized_name!r} is already registered"
        raise ValueError(msg)

    RULE_REGISTRY[normalized_name] = rule_cls


def unregister_rule(name: str) -> None:
    """Remove a custom rule. Built-ins cannot be removed."""
    if name in _builtin_rule_map():
        msg = f"Rule {name!r} is built in"
        raise ValueError(msg)
    RULE_REGISTRY.pop(name, None)


def _register_rules() -> None:
    """Populate :data:`RULE_REGISTRY` with built-in rules."""
    RULE_REGISTRY.update(_builtin_rule_map())


_register_rules()
