"""Tests for FormValidator."""

import pytest

from ruleforge.field import FieldValidator, InputParams
from ruleforge.form import FormConfig, FormValidator
from ruleforge.locale.catalog import LocaleCatalog
from ruleforge.registry import RuleRegistry
from ruleforge.rules import register_builtin_rules
from ruleforge.types import RuleSpecError


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def registry():
    return register_builtin_rules(RuleRegistry())


@pytest.fixture
def catalog():
    return LocaleCatalog()


@pytest.fixture
def make_form(registry, catalog):
    def _make(inputs=None, data=None, config=None):
        return FormValidator(registry, catalog, inputs, data, config)

    return _make


# =============================================================================
# Declaration and validation
# =============================================================================


class TestFormValidation:
    def test_missing_required_field(self, make_form):
        form = make_form(
            {"name": "required", "users.*": "required|email"},
            {"name": "", "users": {"a": "a@example.com"}},
        )

        assert form.is_valid() is False
        assert form.errors == {"name": "This field is required."}

    def test_all_fields_valid(self, make_form):
        form = make_form(
            {"name": "required", "users.*": "required|email"},
            {"name": "Ada", "users": {"a": "a@example.com", "b": "b@example.com"}},
        )

        assert form.is_valid() is True
        assert form.errors == {}
        assert form.names() == ["name", "users.a", "users.b"]

    def test_nested_paths(self, make_form):
        form = make_form(
            {"user.email": "required|email", "user.age": "required|number|min:18"},
            {"user": {"email": "nope", "age": "30"}},
        )
        assert form.is_valid() is False
        assert form.errors == {"user.email": "Please enter a valid email address."}

    def test_missing_path_is_none(self, make_form):
        form = make_form({"user.email": "required"}, {})
        assert form.is_valid() is False
        assert form.value("user.email") is None

    def test_list_of_input_params(self, make_form):
        form = make_form([
            InputParams(name="email", rules="required|email"),
            {"name": "age", "rules": "required|integer", "attribute": "your age"},
        ])
        assert form.names() == ["email", "age"]
        assert form.get("age").attribute == "your age"

    def test_invalid_inputs(self, make_form):
        with pytest.raises(RuleSpecError):
            make_form("required")

    def test_field_without_name(self, make_form):
        with pytest.raises(RuleSpecError, match="name"):
            make_form([{"rules": "required"}])

    def test_to_dict(self, make_form):
        form = make_form({"name": "required"}, {"name": ""})
        assert form.to_dict() == {"valid": False, "errors": {"name": "This field is required."}}

    def test_valid_property(self, make_form):
        assert make_form({"name": "required"}, {"name": "x"}).valid is True

    def test_values_are_read_from_data(self, make_form):
        form = make_form({"name": "required"}, {"name": "Ada"})
        form.is_valid()
        assert form.value("name") == "Ada"
        assert form.value("missing", "default") == "default"

    def test_config_fail_fast_applies_to_fields(self, make_form):
        form = make_form({"email": "required|email"}, {"email": ""}, {"fail_fast": False})
        form.is_valid()
        assert list(form.get("email").errors) == ["required", "email"]

    def test_field_fail_fast_wins_over_config(self, make_form):
        form = make_form(
            {"email": {"rules": "required|email", "failsOnFirst": True}},
            {"email": ""},
            FormConfig(fail_fast=False),
        )
        form.is_valid()
        assert list(form.get("email").errors) == ["required"]

    def test_config_locale(self, make_form):
        form = make_form({"name": "required"}, {"name": ""}, {"locale": "fr"})
        form.is_valid()
        assert form.errors == {"name": "Ce champ est obligatoire."}

    def test_validated_and_failed(self, make_form):
        form = make_form({"a": "required", "b": "required"}, {"a": "x", "b": ""})
        form.is_valid()
        assert [f.name for f in form.validated()] == ["a"]
        assert [f.name for f in form.failed()] == ["b"]


# =============================================================================
# Wildcards
# =============================================================================


class TestWildcards:
    def test_list_expansion_with_suffix(self, make_form):
        form = make_form(
            {"items.*.qty": {"rules": "required|integer|min:1", "attribute": "quantity"}},
            {"items": [{"qty": 2}, {"qty": 0}, {}]},
        )

        assert form.names() == ["items.0.qty", "items.1.qty", "items.2.qty"]
        assert form.is_valid() is False
        assert form.errors == {
            "items.1.qty": "The quantity field must be greater than or equal to '1'.",
            "items.2.qty": "This field is required.",
        }

    def test_expansion_is_idempotent(self, make_form):
        form = make_form({"users.*": "required"}, {"users": {"a": "x", "b": "y"}})
        form.set_data(form.get_data())
        form.set_data(form.get_data())
        assert form.names() == ["users.a", "users.b"]
        assert len(form) == 2

    def test_stale_paths_are_removed(self, make_form):
        form = make_form({"users.*": "required"}, {"users": {"a": "x", "b": "y"}})
        old_b = form.get("users.b")
        destroyed = []
        old_b.on_destroy(lambda f: destroyed.append(f.name))

        form.set_data({"users": {"a": "x"}})

        assert form.names() == ["users.a"]
        assert destroyed == ["users.b"]

    def test_new_paths_are_added_on_merge(self, make_form):
        form = make_form({"users.*": "required"}, {"users": {"a": "x"}})
        form.merge_data({"users": {"a": "x", "c": ""}})
        assert form.names() == ["users.a", "users.c"]
        assert form.is_valid() is False
        assert form.errors == {"users.c": "This field is required."}

    def test_merge_keeps_other_keys(self, make_form):
        form = make_form({"name": "required"}, {"name": "Ada"})
        form.merge_data({"age": 3})
        assert form.get_data() == {"name": "Ada", "age": 3}

    def test_re_expansion_replaces_validators(self, make_form):
        form = make_form({"users.*": "required"}, {"users": {"a": "x"}})
        first = form.get("users.a")
        form.set_data({"users": {"a": "z"}})
        second = form.get("users.a")

        assert second is not first
        assert first.get_rules() == []

    def test_wildcard_over_non_container(self, make_form):
        form = make_form({"users.*": "required"}, {"users": "nobody"})
        assert len(form) == 0
        assert form.is_valid() is True

    def test_wildcard_declared_before_data(self, make_form):
        form = make_form({"tags.*": "required|lower"})
        assert len(form) == 0
        form.set_data({"tags": ["a", "B"]})
        assert form.names() == ["tags.0", "tags.1"]
        assert form.is_valid() is False
        assert list(form.errors) == ["tags.1"]

    def test_set_data_ignores_non_mapping(self, make_form):
        form = make_form({"users.*": "required"}, {"users": {"a": "x"}})
        form.set_data(["not", "a", "mapping"])
        assert form.get_data() == {}
        assert len(form) == 0

    def test_redeclaring_a_wildcard_replaces_template(self, make_form):
        form = make_form({"users.*": "required"}, {"users": {"a": "x"}})
        form.add({"name": "users.*", "rules": "email"})
        assert form.get("users.a").get_rules() == ["email"]
        assert form.names() == ["users.a"]

    def test_nested_templates_expand_each_level(self, make_form):
        form = make_form(
            {"users.*": "required", "users.note.*": "required|integer"},
            {"users": {"name": "Marie", "note": {"en": "20", "fr": "0"}}},
        )
        assert form.names() == ["users.name", "users.note", "users.note.en", "users.note.fr"]
        assert form.get("users.note.fr").get_rules() == ["required", "integer"]
        assert form.is_valid() is True

    def test_merge_is_idempotent(self, make_form):
        form = make_form({"users.*": "required"}, {"users": {"a": "x", "b": "y"}})
        form.merge_data({"users": {"a": "x", "b": "y"}})
        form.merge_data({"users": {"a": "x", "b": "y"}})
        assert form.names() == ["users.a", "users.b"]
        assert len(form) == 2

    def test_named_field_survives_when_template_no_longer_matches(self, make_form):
        form = make_form(
            {"users.*": "required", "users.b": "required"},
            {"users": {"a": "x", "b": "y"}},
        )
        form.set_data({"users": {"a": "x"}})

        assert form.names() == ["users.b", "users.a"]
        assert form.is_valid() is False
        assert form.errors == {"users.b": "This field is required."}

    def test_named_field_keeps_its_own_rules(self, make_form):
        form = make_form(
            {"users.*": "required", "users.b": "required|email"},
            {"users": {"a": "x", "b": "not-an-email"}},
        )
        named = form.get("users.b")
        form.merge_data({"users": {"a": "x", "b": "still-not-an-email"}})

        assert form.get("users.b") is named
        assert named.get_rules() == ["required", "email"]
        assert form.is_valid() is False
        assert list(form.errors) == ["users.b"]

    def test_template_declared_after_named_field(self, make_form):
        form = make_form({"users.b": "required|email"}, {"users": {"a": "x", "b": "y"}})
        form.add({"name": "users.*", "rules": "required"})

        assert form.names() == ["users.b", "users.a"]
        assert form.get("users.b").get_rules() == ["required", "email"]

    def test_removed_named_field_returns_to_template(self, make_form):
        form = make_form(
            {"users.*": "required", "users.b": "required|email"},
            {"users": {"a": "x", "b": "y"}},
        )
        form.remove("users.b")
        form.set_data(form.get_data())
        assert form.get("users.b").get_rules() == ["required"]


# =============================================================================
# Form-level checks and events
# =============================================================================


class TestChecksAndEvents:
    def test_checks_run_after_fields(self, make_form):
        order = []
        form = make_form({"a": "required"}, {"a": ""})
        form.get("a").on_validate(lambda f: order.append("field"))
        form.with_check(lambda frm: order.append("check 1") or True)
        form.with_check(lambda frm: order.append("check 2") or False)

        assert form.is_valid() is False
        assert order == ["field", "check 1", "check 2"]

    def test_failing_check_fails_form(self, make_form):
        form = make_form(
            {"password": "required", "confirm": "required"},
            {"password": "abc", "confirm": "abd"},
        )
        form.with_check(lambda frm: frm.value("password") == frm.value("confirm"))
        assert form.is_valid() is False
        assert form.errors == {}

    def test_check_must_be_callable(self, make_form):
        with pytest.raises(TypeError):
            make_form().with_check("nope")

    def test_pass_and_fail_fire_on_transitions(self, make_form):
        form = make_form({"name": "required"}, {"name": ""})
        events = []
        form.on_passes(lambda frm: events.append("passes"))
        form.on_fails(lambda frm: events.append("fails"))
        form.on_validate(lambda frm: events.append("validated"))

        form.is_valid()
        form.is_valid()
        form.set_data({"name": "Ada"})
        form.is_valid()
        form.is_valid()
        form.set_data({"name": ""})
        form.is_valid()

        assert events == [
            "fails", "validated",
            "validated",
            "passes", "validated",
            "validated",
            "fails", "validated",
        ]

    def test_repeated_failures_fire_fails_once(self, make_form):
        form = make_form({"name": "required"}, {"name": ""})
        events = []
        form.on_fails(lambda frm: events.append("fails"))
        form.on_validate(lambda frm: events.append("validated"))

        for _ in range(3):
            assert form.is_valid() is False

        assert events.count("fails") == 1
        assert events.count("validated") == 3

    def test_unknown_event(self, make_form):
        with pytest.raises(ValueError, match="Unknown form event"):
            make_form().on("form.exploded", lambda frm: None)

    def test_destroy_event(self, make_form):
        form = make_form({"name": "required"})
        seen = []
        form.on("form.destroy", lambda frm: seen.append(len(frm)))
        form.destroy()
        assert seen == [0]


# =============================================================================
# Collection
# =============================================================================


class TestCollection:
    def test_add_input_destroys_same_named_field(self, registry, catalog, make_form):
        form = make_form({"name": "required"})
        old = form.get("name")
        replacement = FieldValidator(registry, catalog, InputParams(name="name", rules="email"))

        form.add_input(replacement)

        assert form.get("name") is replacement
        assert old.get_rules() == []
        assert len(form) == 1

    def test_get_has_remove(self, make_form):
        form = make_form({"a": "required", "b": "required"})
        assert form.has("a")
        assert "b" in form
        assert form.get("c") is None

        form.remove("a")
        assert form.names() == ["b"]
        form.remove("missing")
        assert len(form) == 1

    def test_each_map_every(self, make_form):
        form = make_form({"a": "required", "b": "required|email"})
        seen = []
        form.each(lambda f: seen.append(f.name))
        assert seen == ["a", "b"]
        assert form.map(lambda f: len(f.get_rules())) == [1, 2]
        assert form.every(lambda f: f.has_rule("required"))

    def test_reset(self, make_form):
        form = make_form({"a": "required"}, {"a": "x"})
        form.is_valid()
        form.reset()
        assert form.get("a").value is None

    def test_destroy_and_clear(self, make_form):
        form = make_form({"users.*": "required"}, {"users": {"a": "x"}})
        form.clear()
        assert len(form) == 0
        form.set_data({"users": {"b": "y"}})
        assert len(form) == 0

    def test_copy_is_independent(self, make_form):
        form = make_form({"name": "required", "users.*": "required"}, {"name": "", "users": {"a": "x"}})
        clone = form.copy()

        clone.remove("name")
        clone.set_data({"users": {"a": "x", "b": "y"}})

        assert form.names() == ["name", "users.a"]
        assert clone.names() == ["users.a", "users.b"]
        assert form.is_valid() is False
        assert clone.is_valid() is True
