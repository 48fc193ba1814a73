"""ValidationContext: one rule registry and one locale catalog, wired together.

Create a context once, configure it, and build forms and fields from it:

    ctx = ValidationContext(locale="fr")
    ctx.rule("even", even, "The :field field must be even.", "en")

    form = ctx.form({"age": "required|integer|even"}, {"age": 3})
    form.is_valid()

Contexts share nothing: rules and messages added to one are invisible to
every other.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Mapping, Sequence

from ruleforge.config import RuleforgeConfig
from ruleforge.field import FieldValidator, InputParams
from ruleforge.form import FormConfig, FormValidator
from ruleforge.loader import load_rule_spec
from ruleforge.locale.catalog import LocaleCatalog
from ruleforge.registry import RuleRegistry
from ruleforge.rules import register_builtin_rules
from ruleforge.types import ConfigurationError, RuleCallback, RuleParam, RuleState

logger = logging.getLogger(__name__)


class ValidationContext:
    """Entry point owning the rules and messages used by its forms and fields."""

    def __init__(
        self,
        rules: Mapping[str, RuleCallback] | None = None,
        messages: Mapping[str, str] | None = None,
        locale: str | None = None,
        config: RuleforgeConfig | None = None,
    ):
        self.config = config or RuleforgeConfig.from_env()
        self.registry = register_builtin_rules(RuleRegistry())
        self.catalog = LocaleCatalog(locale=locale or self.config.locale)
        self._forms: dict[str, FormValidator] = {}
        self._inputs: dict[str, FieldValidator] = {}

        if rules:
            self.set_rules(rules)
        if messages:
            self.set_messages(messages, locale)

    # =========================================================================
    # Forms and fields
    # =========================================================================

    def form(
        self,
        inputs: Any = None,
        data: Mapping[str, Any] | None = None,
        config: FormConfig | Mapping[str, Any] | None = None,
    ) -> FormValidator:
        """Create a form; a named form is kept for get_form()."""
        form_config = replace(config) if isinstance(config, FormConfig) else FormConfig.from_dict(config)
        if form_config.fail_fast is None:
            form_config.fail_fast = self.config.fail_fast
        form = FormValidator(self.registry, self.catalog, inputs, data, form_config)
        if form_config.name:
            self._forms[form_config.name] = form
        return form

    def input(self, params: InputParams | Mapping[str, Any]) -> FieldValidator:
        """Create a standalone field; a named field is kept for get_input()."""
        input_params = InputParams.from_spec(params)
        if input_params.fail_fast is None:
            input_params.fail_fast = self.config.fail_fast
        field = FieldValidator(self.registry, self.catalog, input_params)
        if field.name:
            self._inputs[field.name] = field
        return field

    def get_form(self, name: str) -> FormValidator | None:
        return self._forms.get(name)

    def get_input(self, name: str) -> FieldValidator | None:
        return self._inputs.get(name)

    def validate(
        self,
        data: Mapping[str, Any],
        inputs: Any,
        config: FormConfig | Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Validate ``data`` in one call and return ``{valid, errors}``."""
        return self.form(inputs, data, config).to_dict()

    def from_spec(self, path: Path, data: Mapping[str, Any] | None = None) -> FormValidator:
        """Build a form from a rule spec file.

        The file's messages are added to the catalog; its locale and
        fail-fast setting apply to the form.

        Raises:
            RuleSpecError: If the file is invalid or names unknown rules
        """
        spec = load_rule_spec(Path(path), registry=self.registry)
        for lang, messages in spec.messages.items():
            if messages:
                self.catalog.translate(lang, messages)
        logger.debug("Loaded %d field(s) from %s", len(spec.fields), path)
        return self.form(
            spec.fields,
            data,
            FormConfig(locale=spec.locale, fail_fast=spec.fail_fast),
        )

    # =========================================================================
    # Rules
    # =========================================================================

    def run(
        self,
        rule: str,
        value: Any,
        param: RuleParam = None,
        input_type: str | None = None,
    ) -> RuleState:
        """Run a single rule directly.

        Raises:
            UnknownRuleError: If the rule is not registered
        """
        callback = self.registry.get(rule)
        return RuleState.coerce(callback(value, param, input_type))

    def rule(
        self,
        name: str,
        callback: RuleCallback,
        message: str | None = None,
        locale: str | None = None,
    ) -> None:
        """Register a custom rule, optionally with its message."""
        self.registry.add(name, callback)
        if message:
            self.catalog.add_message(name, message, locale)

    def set_rules(self, rules: Mapping[str, RuleCallback]) -> None:
        """Register several rules at once.

        Raises:
            ConfigurationError: If rules is not a mapping
            TypeError: If a callback is not callable
        """
        if not isinstance(rules, Mapping):
            raise ConfigurationError("Rules must be a mapping of rule names to callbacks")
        for name, callback in rules.items():
            self.registry.add(name, callback)

    def has_rule(self, name: str) -> bool:
        return self.registry.has(name)

    def get_rule(self, name: str) -> RuleCallback:
        return self.registry.get(name)

    def rule_names(self) -> list[str]:
        return self.registry.list_registered()

    # =========================================================================
    # Messages and locales
    # =========================================================================

    def message(self, rule: str, message: str, locale: str | None = None) -> None:
        self.catalog.add_message(rule, message, locale)

    def set_messages(self, messages: Mapping[str, str], locale: str | None = None) -> None:
        """Set several rule messages at once.

        Raises:
            ConfigurationError: If messages is not a mapping
        """
        if not isinstance(messages, Mapping):
            raise ConfigurationError(
                "Messages must be a mapping with rule names as keys and messages as values"
            )
        for rule, message in messages.items():
            self.catalog.add_message(rule, message, locale)

    def get_message(self, rule: str, locale: str | None = None) -> str:
        return self.catalog.get_rule_message(rule, locale or self.catalog.active_locale)

    def set_locale(self, locale: str) -> None:
        self.catalog.use(locale)

    def get_locale(self) -> str:
        return self.catalog.active_locale

    def translate(self, locale: str, messages: Mapping[str, str]) -> None:
        self.catalog.translate(locale, messages)

    def rewrite(self, locale: str, rule: str, message: str) -> None:
        self.catalog.rewrite(locale, rule, message)

    def rewrite_many(self, locale: str, rules: Sequence[str], messages: Sequence[str]) -> None:
        self.catalog.rewrite_many(locale, rules, messages)
