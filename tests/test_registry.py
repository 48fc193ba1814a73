"""Tests for the rule registry."""

import pytest

from ruleforge.registry import RuleRegistry, rule
from ruleforge.rules import BUILTIN_RULES, register_builtin_rules
from ruleforge.types import RuleState, UnknownRuleError


def always(value, param=None, input_type=None):
    return RuleState(passes=True, value=value)


class TestRuleRegistry:
    def test_add_and_get(self):
        registry = RuleRegistry()
        registry.add("always", always)
        assert registry.get("always") is always
        assert "always" in registry
        assert len(registry) == 1

    def test_register_is_add(self):
        registry = RuleRegistry()
        registry.register("always", always)
        assert registry.has("always")

    def test_re_registering_replaces(self):
        registry = RuleRegistry()
        registry.add("always", always)
        other = lambda v, p=None, t=None: RuleState(passes=False, value=v)  # noqa: E731
        registry.add("always", other)
        assert registry.get("always") is other

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError, match="callable"):
            RuleRegistry().add("bad", "not a function")

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownRuleError) as exc_info:
            RuleRegistry().get("missing")
        assert exc_info.value.rule == "missing"

    def test_find_unknown_is_none(self):
        assert RuleRegistry().find("missing") is None

    def test_remove_and_clear(self):
        registry = RuleRegistry({"a": always, "b": always})
        registry.remove("a")
        registry.remove("not-there")
        assert registry.list_registered() == ["b"]
        registry.clear()
        assert len(registry) == 0

    def test_list_registered_is_sorted(self):
        registry = RuleRegistry({"zeta": always, "alpha": always})
        assert registry.list_registered() == ["alpha", "zeta"]

    def test_copy_is_independent(self):
        registry = RuleRegistry({"a": always})
        clone = registry.copy()
        clone.add("b", always)
        assert not registry.has("b")

    def test_decorator(self):
        registry = RuleRegistry()

        @rule(registry, "even")
        def even(value, param=None, input_type=None):
            return RuleState(passes=int(value) % 2 == 0, value=value)

        assert registry.get("even") is even


class TestBuiltinRules:
    def test_register_builtin_rules_returns_registry(self):
        registry = RuleRegistry()
        assert register_builtin_rules(registry) is registry
        assert len(registry) == len(BUILTIN_RULES)

    @pytest.mark.parametrize(
        "name",
        ["required", "nullable", "email", "between", "min", "max", "phone", "date", "file", "in", "size"],
    )
    def test_core_rules_registered(self, name):
        assert register_builtin_rules(RuleRegistry()).has(name)

    def test_aliases_share_callbacks(self):
        assert BUILTIN_RULES["len"] is BUILTIN_RULES["length"]
        assert BUILTIN_RULES["int"] is BUILTIN_RULES["integer"]
        assert BUILTIN_RULES["mod"] is BUILTIN_RULES["modulo"]

    def test_registries_are_isolated(self):
        first = register_builtin_rules(RuleRegistry())
        second = register_builtin_rules(RuleRegistry())
        first.add("even", always)
        assert not second.has("even")
