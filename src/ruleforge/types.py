"""Core types for the ruleforge validation system.

This module defines the foundational types shared by every layer:
- Rule callbacks and their RuleState results
- Execution records produced by the engine
- The exception hierarchy separating configuration errors (fatal) from
  validation failures (ordinary results)
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

# Scalar payload carried by a rule declaration, e.g. "3,30" for ``between``
RuleParam = Union[str, int, float, bool, None]

# Type hints understood by the type-aware rules (between, min, max, ...)
INPUT_TYPES = ("text", "date", "date-local", "boolean", "number", "file")


# =============================================================================
# Errors
# =============================================================================


class RuleforgeError(Exception):
    """Base class for all ruleforge errors."""
    pass


class ConfigurationError(RuleforgeError, ValueError):
    """A rule is used incorrectly (unknown name, malformed argument, ...).

    These are programmer errors: they propagate to the caller and are never
    turned into validation failures.
    """
    pass


class UnknownRuleError(ConfigurationError):
    """A rule chain references a rule that is not registered."""

    def __init__(self, rule: str):
        self.rule = rule
        super().__init__(
            f"The rule '{rule}' is not defined. "
            "Custom rules must be registered before they are used."
        )


class MissingRuleArgumentError(ConfigurationError):
    """A rule that needs an argument was declared without one."""

    def __init__(self, rule: str, message: str | None = None):
        self.rule = rule
        super().__init__(message or f"Missing required argument: {rule}")


class RuleSpecError(ConfigurationError):
    """A rule specification (inline or loaded from a file) is malformed."""
    pass


# =============================================================================
# Rule callback contract
# =============================================================================


@dataclass(frozen=True)
class RuleState:
    """Result returned by a rule callback.

    Attributes:
        passes: Whether the value satisfied the rule
        value: The (possibly coerced) value handed to the next rule
        alias: Rule name whose message should be used instead of the declared one
        type: Type hint handed to the next rule (e.g. "number" after coercion)
    """

    passes: bool
    value: Any = None
    alias: str | None = None
    type: str | None = None

    @classmethod
    def coerce(cls, result: "RuleState | Mapping[str, Any]") -> "RuleState":
        """Normalize a callback result.

        Custom callbacks may return a plain mapping with the same keys.
        """
        if isinstance(result, RuleState):
            return result
        if isinstance(result, Mapping) and "passes" in result:
            return cls(
                passes=bool(result["passes"]),
                value=result.get("value"),
                alias=result.get("alias"),
                type=result.get("type"),
            )
        raise ConfigurationError(
            f"Rule callbacks must return a RuleState, got {type(result).__name__}"
        )


RuleCallback = Callable[..., "RuleState | Mapping[str, Any]"]


# =============================================================================
# Execution records
# =============================================================================


@dataclass(frozen=True)
class RuleExecuted:
    """Outcome of one rule during one validation pass.

    Attributes:
        rule_name: The rule name as declared in the chain
        params: The rule's declared parameters
        passed: Whether the rule passed (latched rules report True)
        value_tested: The value handed to the rule
        message: Rendered error message, None when the rule passed
        ran: True for every record present in an outcome
        alias: Rule name used for message lookup, if the callback supplied one
    """

    rule_name: str
    params: RuleParam = None
    passed: bool = True
    value_tested: Any = None
    message: str | None = None
    ran: bool = True
    alias: str | None = None

    @property
    def original_rule_name(self) -> str:
        return self.rule_name

    @property
    def resolved_name(self) -> str:
        """Name used to look up the message template."""
        return self.alias or self.rule_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule_name,
            "params": self.params,
            "passed": self.passed,
            "message": self.message,
            "alias": self.alias,
        }


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of running one rule chain against one value.

    Attributes:
        ok: True if no executed rule failed
        executed: Records in declaration order, excluding rules never reached
    """

    ok: bool
    executed: tuple[RuleExecuted, ...] = ()

    @property
    def errors(self) -> dict[str, str]:
        """Failing rules mapped to their messages, in declaration order."""
        return {
            record.rule_name: record.message or ""
            for record in self.executed
            if not record.passed
        }

    @property
    def first_error(self) -> str | None:
        for record in self.executed:
            if not record.passed:
                return record.message
        return None

    def rule_names(self) -> list[str]:
        return [record.rule_name for record in self.executed]

    def get(self, rule_name: str) -> RuleExecuted | None:
        for record in self.executed:
            if record.rule_name == rule_name:
                return record
        return None


EMPTY_OUTCOME = ValidationOutcome(ok=True)


@dataclass(frozen=True)
class FileInfo:
    """Normalized description of an uploaded or local file.

    Attributes:
        name: File name (used for extension checks)
        size: Size in bytes
        content_type: MIME type, empty when unknown
    """

    name: str
    size: int
    content_type: str = ""
