"""Localized rule messages."""

from ruleforge.locale.catalog import DEFAULT_LOCALE, LocaleCatalog

__all__ = [
    "DEFAULT_LOCALE",
    "LocaleCatalog",
]
