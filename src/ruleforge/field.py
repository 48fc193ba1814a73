"""Field validators: one rule chain and engine bound to one field name."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Mapping

from ruleforge.chain import RuleChain
from ruleforge.engine import DEFAULT_INPUT_TYPE, ValidationEngine
from ruleforge.hooks import HookSet
from ruleforge.locale.catalog import LocaleCatalog
from ruleforge.registry import RuleRegistry
from ruleforge.types import (
    INPUT_TYPES,
    RuleCallback,
    RuleExecuted,
    RuleParam,
    RuleSpecError,
    ValidationOutcome,
)

logger = logging.getLogger(__name__)

FieldCallback = Callable[["FieldValidator"], Any]


@dataclass
class InputParams:
    """Declaration of one field.

    Attributes:
        name: Field path in the data (e.g. "user.email")
        rules: Rule spec (pipe-delimited string, list, ...)
        messages: Override messages (mapping, list or pipe-delimited string)
        attribute: Display name used for ``:field``, defaults to name
        fail_fast: Stop at the first failing rule; None means True
        type: Type hint handed to the first rule
        auto_validate: Validate whenever the value is set
    """

    name: str = ""
    rules: Any = None
    messages: Any = None
    attribute: str | None = None
    fail_fast: bool | None = None
    type: str = DEFAULT_INPUT_TYPE
    auto_validate: bool = True

    @classmethod
    def from_spec(cls, spec: Any, name: str | None = None) -> "InputParams":
        """Build InputParams from a rule spec or a field mapping.

        Strings, lists and callables are taken as the rules themselves.
        Mappings accept ``rules``, ``messages``, ``name``, ``attribute``,
        ``type``, ``failsOnFirst`` (or ``fail_fast``) and ``autoValidate``.

        Raises:
            RuleSpecError: If spec is of an unsupported type
        """
        if isinstance(spec, InputParams):
            params = replace(spec)
            if name and not params.name:
                params.name = name
            return params
        if isinstance(spec, Mapping):
            return cls.from_dict(spec, name)
        if spec is None or isinstance(spec, (str, list, tuple)) or callable(spec):
            return cls(name=name or "", rules=spec)
        raise RuleSpecError(f"Invalid field specification for '{name}': {spec!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], name: str | None = None) -> "InputParams":
        fail_fast = data.get("fail_fast", data.get("failsOnFirst", data.get("failsOnfirst")))
        auto_validate = data.get("auto_validate", data.get("autoValidate", True))
        input_type = data.get("type") or DEFAULT_INPUT_TYPE
        if input_type not in INPUT_TYPES:
            logger.debug("Field %r uses custom type hint %r", name or data.get("name"), input_type)
        return cls(
            name=data.get("name") or name or "",
            rules=data.get("rules"),
            messages=data.get("messages"),
            attribute=data.get("attribute"),
            fail_fast=None if fail_fast is None else bool(fail_fast),
            type=input_type,
            auto_validate=bool(auto_validate),
        )


class FieldValidator:
    """Validates the value of one field against its rule chain.

    Example:
        field = FieldValidator(registry, catalog, InputParams(name="age", rules="required|number|min:18"))
        field.set_value("17")   # validates
        field.errors            # {"min": "The age field must be greater than or equal to '18'."}
        field.on_fails(lambda f: print(f.first_error))
    """

    def __init__(
        self,
        registry: RuleRegistry,
        catalog: LocaleCatalog,
        params: InputParams | Mapping[str, Any] | None = None,
        locale: str | None = None,
    ):
        self.registry = registry
        self.catalog = catalog
        self.params = InputParams.from_spec(params or InputParams())
        self.hooks = HookSet()
        self._value: Any = None
        self._chain = RuleChain(registry, self.params.rules, self.params.messages)
        self._engine = ValidationEngine(
            catalog,
            attribute=self.params.attribute or self.params.name,
            input_type=self.params.type,
            fail_fast=True if self.params.fail_fast is None else self.params.fail_fast,
            locale=locale,
        )

    @property
    def name(self) -> str:
        return self.params.name

    @property
    def attribute(self) -> str:
        return self._engine.attribute

    @attribute.setter
    def attribute(self, value: str) -> None:
        self._engine.attribute = value or self.name

    @property
    def chain(self) -> RuleChain:
        return self._chain

    def is_named(self, name: str) -> bool:
        return self.name == name

    # =========================================================================
    # Value and validation
    # =========================================================================

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self.set_value(value)

    def set_value(self, value: Any, validate: bool | None = None) -> "FieldValidator":
        """Set the value, then validate it unless told otherwise.

        Args:
            value: New field value
            validate: Force (True) or skip (False) validation; None follows auto_validate
        """
        self._value = value
        self.hooks.emit("input.updated", self)
        should_validate = self.params.auto_validate if validate is None else validate
        if should_validate:
            self.validate()
        return self

    def validate(self) -> bool:
        """Run the chain against the current value.

        Raises:
            ConfigurationError: If a rule is unknown or misconfigured
        """
        outcome = self._engine.validate(self._value, self._chain)
        self.hooks.emit("input.validated", self)
        self.hooks.emit("input.passes" if outcome.ok else "input.fails", self)
        return outcome.ok

    def valid(self) -> bool:
        return self.validate()

    def passes(self) -> bool:
        return self.validate()

    def fails(self) -> bool:
        return not self.validate()

    @property
    def outcome(self) -> ValidationOutcome:
        """Outcome of the last validation."""
        return self._engine.outcome

    @property
    def previous_outcome(self) -> ValidationOutcome | None:
        return self._engine.previous_outcome

    @property
    def errors(self) -> dict[str, str]:
        """Messages of the failing rules from the last validation."""
        return self._engine.outcome.errors

    @property
    def first_error(self) -> str | None:
        return self._engine.outcome.first_error

    def get_rule_executed(self) -> list[RuleExecuted]:
        return list(self._engine.outcome.executed)

    # =========================================================================
    # Rules
    # =========================================================================

    def get_rules(self) -> list[str]:
        return self._chain.names()

    def has_rule(self, rule: str) -> bool:
        return self._chain.has(rule)

    def has_rules(self) -> bool:
        return len(self._chain) > 0

    def set_rules(self, rules: Any, messages: Any = None) -> "FieldValidator":
        self._chain.set(rules, messages)
        return self

    def append_rule(
        self,
        rule: str,
        message: str | None = None,
        params: RuleParam = None,
        callback: RuleCallback | None = None,
        locale: str | None = None,
    ) -> "FieldValidator":
        self._chain.append(rule, message, params, callback, locale)
        return self

    def prepend_rule(
        self,
        rule: str,
        message: str | None = None,
        params: RuleParam = None,
        callback: RuleCallback | None = None,
        locale: str | None = None,
    ) -> "FieldValidator":
        self._chain.prepend(rule, message, params, callback, locale)
        return self

    def remove_rule(self, rule: str) -> "FieldValidator":
        self._chain.remove(rule)
        return self

    def remove_rules(self, rules: list[str]) -> "FieldValidator":
        for rule in rules:
            self.remove_rule(rule)
        return self

    def replace_rule(self, old: str, new: str) -> "FieldValidator":
        self._chain.replace(old, new)
        return self

    def set_type(self, input_type: str) -> "FieldValidator":
        self._engine.input_type = input_type or DEFAULT_INPUT_TYPE
        return self

    def fail_fast(self, flag: bool = True) -> "FieldValidator":
        self._engine.fail_fast = flag
        return self

    # =========================================================================
    # Hooks
    # =========================================================================

    def on_fails(self, callback: FieldCallback) -> "FieldValidator":
        self.hooks.add("input.fails", callback)
        return self

    def on_passes(self, callback: FieldCallback) -> "FieldValidator":
        self.hooks.add("input.passes", callback)
        return self

    def on_update(self, callback: FieldCallback) -> "FieldValidator":
        self.hooks.add("input.updated", callback)
        return self

    def on_validate(self, callback: FieldCallback) -> "FieldValidator":
        self.hooks.add("input.validated", callback)
        return self

    def on_destroy(self, callback: FieldCallback) -> "FieldValidator":
        self.hooks.add("destroy", callback)
        return self

    def _add_rule_hook(self, event: str, callback: FieldCallback) -> "FieldValidator":
        self._chain.add_hook(event, lambda: callback(self))
        return self

    def before_rule(self, rule: str, callback: FieldCallback) -> "FieldValidator":
        return self._add_rule_hook(f"before.{rule}.run", callback)

    def after_rule(self, rule: str, callback: FieldCallback) -> "FieldValidator":
        return self._add_rule_hook(f"after.{rule}.run", callback)

    def on_rule_fails(self, rule: str, callback: FieldCallback) -> "FieldValidator":
        return self._add_rule_hook(f"after.{rule}.fails", callback)

    def on_rule_passes(self, rule: str, callback: FieldCallback) -> "FieldValidator":
        return self._add_rule_hook(f"after.{rule}.passes", callback)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def destroy(self) -> None:
        """Drop the rules, fire ``destroy`` and release every hook."""
        self._chain.clear()
        self.params.rules = []
        self.hooks.emit("destroy", self)
        self.hooks.clear()
        self._chain.hooks.clear()

    def copy(self) -> "FieldValidator":
        """A new validator with the same declaration and current rules, without hooks."""
        clone = FieldValidator(self.registry, self.catalog, replace(self.params), self._engine.locale)
        clone._chain.set(self._chain.all())
        clone._engine.input_type = self._engine.input_type
        clone._engine.fail_fast = self._engine.fail_fast
        clone._engine.attribute = self._engine.attribute
        clone._value = self._value
        return clone

    def to_dict(self) -> dict[str, Any]:
        """Result of the last validation: ``{name, passed, errors}``."""
        return {
            "name": self.name,
            "passed": self._engine.outcome.ok,
            "errors": self.errors,
        }

    def __repr__(self) -> str:
        return f"FieldValidator(name={self.name!r}, rules={self.get_rules()!r})"
