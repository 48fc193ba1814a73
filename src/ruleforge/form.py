"""Form validators: a set of field validators over one data record.

Fields are declared by path. Paths containing a ``*`` segment are templates
re-expanded against the data every time it is set or merged:

    form = FormValidator(registry, catalog, {
        "email": "required|email",
        "users.*": "required",
        "items.*.qty": {"rules": "required|integer|min:1", "attribute": "quantity"},
    })
    form.set_data(payload)
    form.is_valid()
    form.errors   # {"items.1.qty": "The quantity field must be ..."}
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any, TypeVar

from ruleforge.field import FieldValidator, InputParams
from ruleforge.hooks import HookSet
from ruleforge.locale.catalog import LocaleCatalog
from ruleforge.paths import data_get, expand_wildcard, has_wildcard
from ruleforge.registry import RuleRegistry
from ruleforge.types import RuleSpecError

logger = logging.getLogger(__name__)

T = TypeVar("T")

FormCallback = Callable[["FormValidator"], Any]
FormCheck = Callable[["FormValidator"], bool]

FORM_EVENTS = ("form.validated", "form.passes", "form.fails", "form.destroy")


@dataclass
class FormConfig:
    """Form-wide settings.

    Attributes:
        name: Name under which a context keeps the form
        locale: Locale of the messages, None for the catalog's active locale
        fail_fast: Default policy for fields that do not set their own
    """

    name: str | None = None
    locale: str | None = None
    fail_fast: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "FormConfig":
        data = data or {}
        fail_fast = data.get("fail_fast", data.get("failsOnFirst"))
        return cls(
            name=data.get("name"),
            locale=data.get("locale") or data.get("local"),
            fail_fast=None if fail_fast is None else bool(fail_fast),
        )


class FormValidator:
    """Aggregates field validators and form-level checks into one verdict.

    ``form.passes`` and ``form.fails`` fire once per transition between a
    passing and a failing form; ``form.validated`` fires on every check.
    """

    def __init__(
        self,
        registry: RuleRegistry,
        catalog: LocaleCatalog,
        inputs: Any = None,
        data: Mapping[str, Any] | None = None,
        config: FormConfig | Mapping[str, Any] | None = None,
    ):
        self.registry = registry
        self.catalog = catalog
        self.config = config if isinstance(config, FormConfig) else FormConfig.from_dict(config)
        self.hooks = HookSet()
        self._inputs: list[FieldValidator] = []
        self._data: dict[str, Any] = {}
        self._checks: list[FormCheck] = []
        self._wildcards: list[tuple[str, InputParams]] = []
        self._expanded: dict[str, list[str]] = {}
        self._literals: set[str] = set()
        self._can_emit_passes = True
        self._can_emit_fails = True

        if inputs:
            self.make(inputs)
        if data:
            self.merge_data(data)

    # =========================================================================
    # Declaration
    # =========================================================================

    def make(self, inputs: Any) -> "FormValidator":
        """Declare fields.

        Accepts a mapping of path -> rule spec, or a list of InputParams
        (or mappings carrying a ``name``).

        Raises:
            RuleSpecError: If inputs is neither a mapping nor a list
        """
        if isinstance(inputs, Mapping):
            for name, spec in inputs.items():
                self._boot_input(InputParams.from_spec(spec, str(name)))
        elif isinstance(inputs, (list, tuple)):
            for spec in inputs:
                self._boot_input(InputParams.from_spec(spec))
        else:
            raise RuleSpecError(f"Invalid arguments passed to make: {inputs!r}")
        return self

    def add(self, params: InputParams | Mapping[str, Any]) -> "FormValidator":
        return self.make([params])

    def _boot_input(self, params: InputParams) -> None:
        if not params.name:
            raise RuleSpecError("Every field needs a name")
        if params.fail_fast is None and self.config.fail_fast is not None:
            params.fail_fast = self.config.fail_fast

        if has_wildcard(params.name):
            self._wildcards = [(p, i) for p, i in self._wildcards if p != params.name]
            self._wildcards.append((params.name, params))
            self._handle_wildcards()
        else:
            self.add_input(self._make_field(params))

    def _make_field(self, params: InputParams) -> FieldValidator:
        return FieldValidator(self.registry, self.catalog, params, locale=self.config.locale)

    def add_input(self, field: FieldValidator) -> "FormValidator":
        """Add a field, destroying any existing field of the same name first.

        A field added by name takes precedence over wildcard templates:
        re-expansion neither replaces nor removes it.
        """
        self._literals.add(field.name)
        return self._replace_field(field)

    def _replace_field(self, field: FieldValidator) -> "FormValidator":
        old = self.get(field.name)
        if old is not None and old is not field:
            old.destroy()
        self._inputs = [f for f in self._inputs if not f.is_named(field.name)]
        self._inputs.append(field)
        return self

    def _handle_wildcards(self) -> None:
        """Re-expand every wildcard template against the current data.

        Paths found again get a fresh validator; paths a template no longer
        matches are removed. Paths declared by name are left alone.
        """
        current: dict[str, list[str]] = {}
        for pattern, params in self._wildcards:
            current[pattern] = [
                path for path in expand_wildcard(pattern, self._data) if path not in self._literals
            ]

        produced = {path for paths in current.values() for path in paths}
        for pattern, paths in self._expanded.items():
            for stale in paths:
                if stale not in produced and stale not in self._literals:
                    logger.debug("Dropping %s, no longer matched by %s", stale, pattern)
                    self.remove(stale)

        for pattern, params in self._wildcards:
            for path in current[pattern]:
                self._replace_field(self._make_field(replace(params, name=path)))
        self._expanded = current

    # =========================================================================
    # Data
    # =========================================================================

    def set_data(self, data: Any) -> "FormValidator":
        self._data = dict(data) if isinstance(data, Mapping) else {}
        self._handle_wildcards()
        return self

    def merge_data(self, data: Mapping[str, Any] | None) -> "FormValidator":
        self._data = {**self._data, **(data or {})}
        self._handle_wildcards()
        return self

    def get_data(self) -> dict[str, Any]:
        return self._data

    def value(self, name: str, default: Any = None) -> Any:
        field = self.get(name)
        if field is None or field.value is None:
            return default
        return field.value

    # =========================================================================
    # Validation
    # =========================================================================

    def is_valid(self) -> bool:
        """Validate every field, then run every form-level check.

        Each field's value is read from the data by path. Checks all run,
        after all fields, whatever the field results.

        Raises:
            ConfigurationError: If a rule is unknown or misconfigured
        """
        for field in self._inputs:
            field.set_value(data_get(self._data, field.name), validate=False)

        fields_valid = all([field.validate() for field in self._inputs])
        checks_valid = all([bool(check(self)) for check in self._checks])
        valid = fields_valid and checks_valid

        if valid:
            self._emit_passes()
        else:
            self._emit_fails()
        self.hooks.emit("form.validated", self)
        return valid

    @property
    def valid(self) -> bool:
        return self.is_valid()

    def with_check(self, check: FormCheck) -> "FormValidator":
        """Add a form-level predicate receiving the form."""
        if not callable(check):
            raise TypeError("Form checks must be callable")
        self._checks.append(check)
        return self

    def _emit_passes(self) -> None:
        if self._can_emit_passes:
            self.hooks.emit("form.passes", self)
            self._can_emit_passes = False
            self._can_emit_fails = True

    def _emit_fails(self) -> None:
        if self._can_emit_fails:
            self.hooks.emit("form.fails", self)
            self._can_emit_fails = False
            self._can_emit_passes = True

    def validated(self) -> list[FieldValidator]:
        """Fields passing validation with their current values."""
        return [field for field in self._inputs if field.passes()]

    def failed(self) -> list[FieldValidator]:
        """Fields failing validation with their current values."""
        return [field for field in self._inputs if field.fails()]

    @property
    def errors(self) -> dict[str, str]:
        """First message of each field that failed its last validation."""
        return {
            field.name: field.first_error or ""
            for field in self._inputs
            if not field.outcome.ok
        }

    def to_dict(self) -> dict[str, Any]:
        """Validate and return ``{valid, errors}``."""
        valid = self.is_valid()
        return {"valid": valid, "errors": self.errors}

    # =========================================================================
    # Events
    # =========================================================================

    def on(self, event: str, callback: FormCallback) -> "FormValidator":
        if event not in FORM_EVENTS:
            raise ValueError(f"Unknown form event '{event}'. Expected one of {', '.join(FORM_EVENTS)}")
        self.hooks.add(event, callback)
        return self

    def on_passes(self, callback: FormCallback) -> "FormValidator":
        return self.on("form.passes", callback)

    def on_fails(self, callback: FormCallback) -> "FormValidator":
        return self.on("form.fails", callback)

    def on_validate(self, callback: FormCallback) -> "FormValidator":
        return self.on("form.validated", callback)

    # =========================================================================
    # Collection
    # =========================================================================

    def get(self, name: str) -> FieldValidator | None:
        for field in self._inputs:
            if field.is_named(name):
                return field
        return None

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    def remove(self, name: str) -> "FormValidator":
        field = self.get(name)
        if field is not None:
            field.destroy()
            self._inputs = [f for f in self._inputs if not f.is_named(name)]
        self._literals.discard(name)
        return self

    def all(self) -> list[FieldValidator]:
        return list(self._inputs)

    def names(self) -> list[str]:
        return [field.name for field in self._inputs]

    def each(self, fn: Callable[[FieldValidator], Any]) -> None:
        for field in list(self._inputs):
            fn(field)

    def map(self, fn: Callable[[FieldValidator], T]) -> list[T]:
        return [fn(field) for field in self._inputs]

    def every(self, fn: Callable[[FieldValidator], Any]) -> bool:
        return all(fn(field) for field in self._inputs)

    def reset(self) -> "FormValidator":
        """Clear every field value without validating."""
        for field in self._inputs:
            field.set_value(None, validate=False)
        return self

    def destroy(self) -> None:
        """Destroy every field and forget the wildcard templates."""
        for field in self._inputs:
            field.destroy()
        self._inputs = []
        self._wildcards = []
        self._expanded = {}
        self._literals = set()
        self.hooks.emit("form.destroy", self)

    def clear(self) -> "FormValidator":
        self.destroy()
        return self

    def copy(self) -> "FormValidator":
        """An independent form with the same fields, templates, checks and data."""
        form = FormValidator(self.registry, self.catalog, config=replace(self.config))
        form._data = dict(self._data)
        form._wildcards = list(self._wildcards)
        form._expanded = {pattern: list(paths) for pattern, paths in self._expanded.items()}
        form._checks = list(self._checks)
        for field in self._inputs:
            form._replace_field(field.copy())
        form._literals = set(self._literals)
        return form

    def __len__(self) -> int:
        return len(self._inputs)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)
