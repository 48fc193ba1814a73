"""Tests for message templating and resolution."""

import pytest

from ruleforge.locale.catalog import LocaleCatalog
from ruleforge.messages import DEFAULT_MESSAGE, MessageResolver, parse_messages, render_message


# =============================================================================
# render_message
# =============================================================================


class TestRenderMessage:
    def test_field_and_args(self):
        result = render_message("The :field field must be between in :arg0 and :arg1", "age", "18,30")
        assert result == "The age field must be between in 18 and 30"

    def test_args_are_trimmed(self):
        assert render_message(":arg0-:arg1", None, " 1 , 2 ") == "1-2"

    def test_spread(self):
        assert render_message("One of: ...arg", "status", "a,b,c") == "One of: a, b, c"

    def test_missing_attribute_leaves_placeholder(self):
        assert render_message("The :field field", "", None) == "The :field field"

    def test_missing_args_leave_placeholders(self):
        assert render_message("Between :arg0 and :arg1", "x", "5") == "Between 5 and :arg1"

    def test_empty_arg_leaves_placeholder(self):
        assert render_message(":arg0/:arg1", None, ",7") == ":arg0/7"

    def test_substitutions_are_not_rescanned(self):
        assert render_message(":arg0 :arg1", None, ":arg1,x") == ":arg1 x"

    def test_numeric_params(self):
        assert render_message("At least :arg0", None, 18) == "At least 18"

    def test_every_occurrence_replaced(self):
        assert render_message(":field :field", "name", None) == "name name"

    def test_template_without_placeholders(self):
        assert render_message("Invalid.", "age", "1,2") == "Invalid."

    def test_placeholder_must_end_the_word(self):
        assert render_message("The :fieldset of :field.", "age", None) == "The :fieldset of age."
        assert render_message(":arg0x :arg0, ...args", None, "5") == ":arg0x 5, ...args"


# =============================================================================
# MessageResolver
# =============================================================================


class TestMessageResolver:
    @pytest.fixture
    def resolver(self):
        return MessageResolver(LocaleCatalog())

    def test_catalog_template(self, resolver):
        message = resolver.resolve("min", attribute="age", params="18")
        assert message == "The age field must be greater than or equal to '18'."

    def test_override_used(self, resolver):
        assert resolver.resolve("min", attribute="age", params="18", override="Too young") == "Too young"

    def test_override_identical_to_catalog_defers_to_alias(self, resolver):
        override = resolver.catalog.get_rule_message("between")
        message = resolver.resolve(
            "numberBetween",
            original_rule_name="between",
            params="1,10",
            override=override,
        )
        assert message == "This field must be a numeric value between 1 and 10."

    def test_unknown_rule_uses_default(self, resolver):
        assert resolver.resolve("shiny") == "This field is invalid."

    def test_empty_template_uses_fallback(self, resolver):
        assert resolver.resolve("nullable") == DEFAULT_MESSAGE

    def test_locale(self, resolver):
        assert resolver.resolve("required", locale="fr") == "Ce champ est obligatoire."

    def test_active_locale_follows_catalog(self, resolver):
        resolver.catalog.use("fr")
        assert resolver.resolve("required") == "Ce champ est obligatoire."

    def test_template_for_does_not_render(self, resolver):
        assert resolver.template_for("min") == "The :field field must be greater than or equal to ':arg0'."


# =============================================================================
# parse_messages
# =============================================================================


class TestParseMessages:
    def test_mapping(self):
        assert parse_messages({"min": "Small", "max": ""}, ["min", "max"]) == {"min": "Small"}

    def test_list_by_position(self):
        assert parse_messages(["A", "B"], ["required", "email"]) == {"required": "A", "email": "B"}

    def test_pipe_string_by_position(self):
        assert parse_messages("A||C", ["x", "y", "z"]) == {"x": "A", "z": "C"}

    def test_extra_messages_ignored(self):
        assert parse_messages(["A", "B"], ["required"]) == {"required": "A"}

    def test_empty(self):
        assert parse_messages(None, ["required"]) == {}
