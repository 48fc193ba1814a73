"""Bundled message catalogs, keyed by locale code."""

from ruleforge.locale.lang import en, fr

BUNDLED_MESSAGES: dict[str, dict[str, str]] = {
    "en": en.MESSAGES,
    "fr": fr.MESSAGES,
}
