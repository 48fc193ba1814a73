"""ruleforge: declarative validation of flat and nested records.

This package provides:
- Rule chains run by an execution engine (coercion between rules,
  fail-fast or run-all, nullable short-circuit, message aliases)
- Field validators and form validators with dotted and wildcard paths
- Localized, parameterized messages (English and French bundled)

Usage:
    from ruleforge import ValidationContext

    ctx = ValidationContext()
    form = ctx.form(
        {"name": "required", "users.*": "required|email"},
        {"name": "", "users": {"a": "a@example.com"}},
    )
    form.is_valid()   # False
    form.errors       # {"name": "This field is required."}
"""

from ruleforge.chain import RuleChain, RuleEntry, parse_rules
from ruleforge.config import RuleforgeConfig
from ruleforge.context import ValidationContext
from ruleforge.engine import ValidationEngine
from ruleforge.field import FieldValidator, InputParams
from ruleforge.form import FormConfig, FormValidator
from ruleforge.loader import RuleSpec, SpecIssue, load_rule_spec, validate_rule_spec_file
from ruleforge.locale import LocaleCatalog
from ruleforge.messages import DEFAULT_MESSAGE, MessageResolver, render_message
from ruleforge.paths import data_get, expand_wildcard, has_wildcard
from ruleforge.registry import RuleRegistry, rule
from ruleforge.rules import register_builtin_rules
from ruleforge.types import (
    ConfigurationError,
    FileInfo,
    MissingRuleArgumentError,
    RuleExecuted,
    RuleforgeError,
    RuleParam,
    RuleSpecError,
    RuleState,
    UnknownRuleError,
    ValidationOutcome,
)

__all__ = [
    # Types
    "FileInfo",
    "RuleExecuted",
    "RuleParam",
    "RuleState",
    "ValidationOutcome",
    # Errors
    "ConfigurationError",
    "MissingRuleArgumentError",
    "RuleforgeError",
    "RuleSpecError",
    "UnknownRuleError",
    # Rules
    "RuleRegistry",
    "register_builtin_rules",
    "rule",
    # Messages
    "DEFAULT_MESSAGE",
    "LocaleCatalog",
    "MessageResolver",
    "render_message",
    # Engine
    "RuleChain",
    "RuleEntry",
    "ValidationEngine",
    "parse_rules",
    # Fields and forms
    "FieldValidator",
    "FormConfig",
    "FormValidator",
    "InputParams",
    "data_get",
    "expand_wildcard",
    "has_wildcard",
    # Setup
    "RuleforgeConfig",
    "RuleSpec",
    "SpecIssue",
    "ValidationContext",
    "load_rule_spec",
    "validate_rule_spec_file",
]
