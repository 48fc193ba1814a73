"""Rule registry for ruleforge.

Provides registration and lookup for rule callbacks:
- Built-in rules (registered by register_builtin_rules)
- Custom rules (application-specific, explicitly registered)

Unlike a process-wide registry, every RuleRegistry is an ordinary instance
owned by a ValidationContext, so two contexts never see each other's rules.
"""

from typing import Callable

from ruleforge.types import RuleCallback, UnknownRuleError


class RuleRegistry:
    """Registry of rule callbacks keyed by rule name.

    Example:
        registry = RuleRegistry()
        register_builtin_rules(registry)

        # Register a custom rule
        registry.add("even", lambda value, param=None, input_type=None:
                     RuleState(passes=int(value) % 2 == 0, value=value))

        callback = registry.get("even")
    """

    def __init__(self, rules: dict[str, RuleCallback] | None = None):
        self._rules: dict[str, RuleCallback] = dict(rules or {})

    def add(self, name: str, callback: RuleCallback) -> None:
        """Register a rule callback by name.

        Re-registering a name replaces the previous callback.

        Args:
            name: Rule name as used in rule specs (e.g., "required", "min")
            callback: Callable ``(value, param=None, input_type=None) -> RuleState``

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            raise TypeError(f"Rule callback for '{name}' must be callable")
        self._rules[name] = callback

    register = add

    def get(self, name: str) -> RuleCallback:
        """Get a registered rule callback by name.

        Raises:
            UnknownRuleError: If the rule is not registered
        """
        if name not in self._rules:
            raise UnknownRuleError(name)
        return self._rules[name]

    def find(self, name: str) -> RuleCallback | None:
        """Get a rule callback, or None when it is not registered."""
        return self._rules.get(name)

    def has(self, name: str) -> bool:
        """Check if a rule is registered."""
        return name in self._rules

    def remove(self, name: str) -> None:
        self._rules.pop(name, None)

    def list_registered(self) -> list[str]:
        """List all registered rule names."""
        return sorted(self._rules.keys())

    def all(self) -> dict[str, RuleCallback]:
        return dict(self._rules)

    def copy(self) -> "RuleRegistry":
        return RuleRegistry(self._rules)

    def clear(self) -> None:
        """Clear all registrations. Primarily for testing."""
        self._rules.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def rule(registry: RuleRegistry, name: str) -> Callable[[RuleCallback], RuleCallback]:
    """Decorator registering a function as a rule on ``registry``.

    Example:
        @rule(registry, "even")
        def even(value, param=None, input_type=None):
            ...
    """

    def decorator(fn: RuleCallback) -> RuleCallback:
        registry.add(name, fn)
        return fn

    return decorator
