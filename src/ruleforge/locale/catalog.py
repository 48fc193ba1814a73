"""Per-instance store of rule message templates by locale.

A catalog starts with a private copy of the bundled ``en`` and ``fr``
messages. Additions are shallow overlays: new keys replace old ones and
unspecified keys persist. Nothing here is shared between catalogs.
"""

import copy
import logging
from typing import Mapping, Sequence

from ruleforge.locale.lang import BUNDLED_MESSAGES

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


class LocaleCatalog:
    """Rule messages keyed by locale code, then by rule name.

    Example:
        catalog = LocaleCatalog()
        catalog.get_rule_message("required")          # English
        catalog.get_rule_message("required", "fr")    # French
        catalog.translate("es", {"required": "Este campo es obligatorio."})
        catalog.use("es")
    """

    def __init__(
        self,
        messages: Mapping[str, Mapping[str, str]] | None = None,
        locale: str | None = None,
    ):
        self._messages: dict[str, dict[str, str]] = copy.deepcopy(BUNDLED_MESSAGES)
        self._active: str | None = None
        for lang, overrides in (messages or {}).items():
            if overrides:
                self.put_messages(overrides, lang)
        if locale:
            self.use(locale)

    @property
    def active_locale(self) -> str:
        """Locale used when a lookup does not name one."""
        return self._active or DEFAULT_LOCALE

    def locales(self) -> list[str]:
        return list(self._messages.keys())

    def has_locale(self, lang: str) -> bool:
        return lang in self._messages

    def use(self, lang: str) -> None:
        """Make ``lang`` the active locale.

        Raises:
            ValueError: If lang is not a non-empty string
        """
        if not isinstance(lang, str) or not lang:
            raise ValueError("The language must be a valid string")
        if lang not in self._messages:
            logger.debug("Locale %r has no messages yet; lookups fall back to %r", lang, DEFAULT_LOCALE)
        self._active = lang

    # =========================================================================
    # Lookups
    # =========================================================================

    def get_messages(self, locale: str | None = None) -> dict[str, str]:
        """Messages for ``locale``, falling back to the active locale, then English."""
        for lang in (locale, self.active_locale, DEFAULT_LOCALE):
            if lang and lang in self._messages:
                return dict(self._messages[lang])
        return dict(self._messages[DEFAULT_LOCALE])

    def get_rule_message(self, rule: str, locale: str | None = None) -> str:
        """Template for ``rule``, or the locale's ``default`` entry."""
        messages = self.get_messages(locale)
        if rule in messages:
            return messages[rule]
        return messages.get("default", "")

    # =========================================================================
    # Mutations
    # =========================================================================

    def put_messages(self, messages: Mapping[str, str], locale: str | None = None) -> None:
        """Overlay ``messages`` onto the catalog of ``locale``.

        A locale seen for the first time starts from the English messages, so
        rules it does not translate still have a template.

        Raises:
            ValueError: If messages is empty or not a mapping
        """
        if not isinstance(messages, Mapping) or not messages:
            raise ValueError("The 'messages' argument must be a non-empty mapping")
        lang = locale or self.active_locale
        merged = dict(self._messages.get(lang) or self._messages[DEFAULT_LOCALE])
        merged.update(messages)
        self._messages[lang] = merged

    def add_message(self, rule: str, message: str | None, locale: str | None = None) -> None:
        """Set the template of one rule; empty messages are ignored."""
        if message:
            self.put_messages({rule: message}, locale)

    def translate(self, lang: str, messages: Mapping[str, str]) -> None:
        """Add or extend a translation.

        Raises:
            ValueError: If lang is empty or messages is not a mapping
        """
        if not isinstance(lang, str) or not lang:
            raise ValueError("The first argument must be a string with one or more characters")
        if not isinstance(messages, Mapping):
            raise ValueError("The second argument must be a valid key/value mapping")
        merged = dict(self._messages.get(lang) or self._messages[DEFAULT_LOCALE])
        merged.update(messages)
        self._messages[lang] = merged

    def rewrite(self, lang: str, rule: str, message: str) -> None:
        self.add_message(rule, message, lang)

    def rewrite_many(self, lang: str, rules: Sequence[str], messages: Sequence[str]) -> None:
        """Rewrite several rule messages of one locale at once.

        Raises:
            ValueError: If the arguments are malformed or of unequal length
        """
        if not isinstance(lang, str) or not lang:
            raise ValueError("The 'lang' argument must be a string with one or more characters")
        if not isinstance(rules, (list, tuple)) or not isinstance(messages, (list, tuple)):
            raise ValueError("The 'rules' and 'messages' arguments must be lists")
        if len(rules) != len(messages):
            raise ValueError("The 'rules' and 'messages' lists must have the same length")
        for rule, message in zip(rules, messages):
            self.rewrite(lang, rule, message)

    def copy(self) -> "LocaleCatalog":
        clone = LocaleCatalog()
        clone._messages = copy.deepcopy(self._messages)
        clone._active = self._active
        return clone
