"""Rule chains: the ordered rules bound to one field.

A chain is built from a rule spec:
- a pipe-delimited string: ``"required|min:3|between:3,30"``
- a list of rule strings, mappings or callables:
  ``["required", {"rule": "min", "params": 3, "message": "Too small"}, even]``

Everything after the first ``:`` of a rule string is kept as one parameter
string; rules split it on commas themselves.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import Any, Mapping

from ruleforge.hooks import HookCallback, HookSet
from ruleforge.messages import parse_messages
from ruleforge.registry import RuleRegistry
from ruleforge.types import RuleCallback, RuleParam, RuleSpecError

logger = logging.getLogger(__name__)

RULE_SEPARATOR = "|"
PARAM_SEPARATOR = ":"


@dataclass
class RuleEntry:
    """One rule binding in a chain.

    Attributes:
        name: Rule name as declared (e.g. "min")
        params: The rule's argument payload (e.g. "3,30")
        message: Override message, None to use the catalog
        callback: Callback bound at declaration, None to look it up in the registry
        locale: Locale used for this rule's message, None for the active one
    """

    name: str
    params: RuleParam = None
    message: str | None = None
    callback: RuleCallback | None = None
    locale: str | None = None


def parse_rule_text(text: str) -> RuleEntry:
    """Parse ``"name:params"`` into a RuleEntry.

    Raises:
        RuleSpecError: If the rule name is empty
    """
    name, sep, params = text.strip().partition(PARAM_SEPARATOR)
    name = name.strip()
    if not name:
        raise RuleSpecError(f"Invalid rule declaration: {text!r}")
    return RuleEntry(name=name, params=params.strip() if sep else None)


def parse_rules(spec: Any) -> list[RuleEntry]:
    """Turn any supported rule spec into RuleEntry objects, in order.

    Raises:
        RuleSpecError: If an element cannot be interpreted as a rule
    """
    if spec is None:
        return []
    if isinstance(spec, str):
        return [parse_rule_text(part) for part in spec.split(RULE_SEPARATOR) if part.strip()]
    if isinstance(spec, RuleEntry):
        return [replace(spec)]
    if isinstance(spec, Mapping):
        return [_entry_from_mapping(spec)]
    if callable(spec):
        return [RuleEntry(name=getattr(spec, "__name__", "custom"), callback=spec)]
    if isinstance(spec, (list, tuple)):
        entries: list[RuleEntry] = []
        for item in spec:
            entries.extend(parse_rules(item))
        return entries
    raise RuleSpecError(f"Unsupported rule specification: {spec!r}")


def _entry_from_mapping(spec: Mapping[str, Any]) -> RuleEntry:
    name = spec.get("rule") or spec.get("name")
    if not isinstance(name, str) or not name.strip():
        raise RuleSpecError(f"Rule mapping must have a 'rule' name: {dict(spec)!r}")

    callback = spec.get("validate") or spec.get("callback")
    if callback is not None and not callable(callback):
        raise RuleSpecError(f"Callback of rule '{name}' must be callable")

    params = spec.get("params", spec.get("param"))
    if params is not None and not isinstance(params, (str, int, float, bool)):
        raise RuleSpecError(f"Parameters of rule '{name}' must be a scalar, got {params!r}")

    entry = parse_rule_text(name)
    if params is not None:
        entry.params = params
    entry.message = spec.get("message")
    entry.callback = callback
    entry.locale = spec.get("locale") or spec.get("local")
    return entry


class RuleChain:
    """Ordered rule entries for one field, plus their rule hooks.

    Example:
        chain = RuleChain(registry, "required|min:3", {"min": "Too short"})
        chain.append("max", params="20")
        chain.names()  # ["required", "min", "max"]
    """

    def __init__(
        self,
        registry: RuleRegistry,
        rules: Any = None,
        messages: Any = None,
    ):
        self.registry = registry
        self.hooks = HookSet()
        self._entries: list[RuleEntry] = []
        self.set(rules, messages)

    # =========================================================================
    # Declaration
    # =========================================================================

    def set(self, rules: Any, messages: Any = None) -> "RuleChain":
        """Replace every entry with the rules of ``rules``."""
        entries = parse_rules(rules)
        overrides = parse_messages(messages, [entry.name for entry in entries])
        for entry in entries:
            if entry.name in overrides and not entry.message:
                entry.message = overrides[entry.name]
        self._entries = entries
        return self

    def append(
        self,
        rule: str,
        message: str | None = None,
        params: RuleParam = None,
        callback: RuleCallback | None = None,
        locale: str | None = None,
    ) -> "RuleChain":
        self._entries.append(self._make_entry(rule, message, params, callback, locale))
        return self

    def prepend(
        self,
        rule: str,
        message: str | None = None,
        params: RuleParam = None,
        callback: RuleCallback | None = None,
        locale: str | None = None,
    ) -> "RuleChain":
        self._entries.insert(0, self._make_entry(rule, message, params, callback, locale))
        return self

    def _make_entry(
        self,
        rule: str,
        message: str | None,
        params: RuleParam,
        callback: RuleCallback | None,
        locale: str | None,
    ) -> RuleEntry:
        entry = parse_rule_text(rule)
        if params is not None:
            entry.params = params
        entry.message = message
        entry.callback = callback
        entry.locale = locale
        return entry

    def remove(self, name: str) -> "RuleChain":
        """Remove every entry named ``name``."""
        self._entries = [entry for entry in self._entries if entry.name != name]
        return self

    def replace(self, old: str, new: str) -> "RuleChain":
        """Swap the rule named ``old`` for ``new`` (``"name:params"``) in place."""
        replacement = parse_rule_text(new)
        for index, entry in enumerate(self._entries):
            if entry.name == old:
                self._entries[index] = replace(replacement)
        return self

    def clear(self) -> None:
        self._entries = []

    # =========================================================================
    # Lookup
    # =========================================================================

    def resolve(self, entry: RuleEntry) -> RuleCallback | None:
        """Callback for ``entry``: its own, else the registry's, else None."""
        if entry.callback is not None:
            return entry.callback
        return self.registry.find(entry.name)

    def has(self, name: str) -> bool:
        return any(entry.name == name for entry in self._entries)

    def get(self, name: str) -> RuleEntry | None:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def all(self) -> list[RuleEntry]:
        return list(self._entries)

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def messages(self) -> dict[str, str]:
        """Override messages declared on the chain, by rule name."""
        return {entry.name: entry.message for entry in self._entries if entry.message}

    def __iter__(self) -> Iterator[RuleEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    # =========================================================================
    # Rule hooks
    # =========================================================================

    def add_hook(self, event: str, callback: HookCallback) -> None:
        self.hooks.add(event, callback)

    def emit(self, event: str) -> None:
        self.hooks.emit(event)
