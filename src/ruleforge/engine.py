"""Rule execution engine.

Runs a RuleChain against one value:
- rules run in declaration order
- each rule receives the value and type hint returned by the previous one
- a passing ``nullable`` rule on an empty value makes the remaining rules pass
  without running them
- failing rules get a rendered message; fail-fast stops at the first one
- callback exceptions (misconfigured rules) propagate to the caller

Every call returns a fresh ValidationOutcome. The engine keeps the previous
one so callers can compare two passes.
"""

import logging
from typing import Any

from ruleforge.chain import RuleChain
from ruleforge.locale.catalog import LocaleCatalog
from ruleforge.messages import MessageResolver
from ruleforge.rules.utils import is_empty
from ruleforge.types import (
    EMPTY_OUTCOME,
    RuleExecuted,
    RuleState,
    UnknownRuleError,
    ValidationOutcome,
)

logger = logging.getLogger(__name__)

NULLABLE_RULE = "nullable"
DEFAULT_INPUT_TYPE = "text"


class ValidationEngine:
    """Executes rule chains and renders messages for failing rules.

    Example:
        engine = ValidationEngine(catalog, attribute="age")
        outcome = engine.validate("17", RuleChain(registry, "number|min:18"))
        outcome.ok      # False
        outcome.errors  # {"min": "The age field must be greater than or equal to '18'."}
    """

    def __init__(
        self,
        catalog: LocaleCatalog,
        attribute: str = "",
        input_type: str | None = None,
        fail_fast: bool = True,
        locale: str | None = None,
    ):
        self.catalog = catalog
        self.resolver = MessageResolver(catalog)
        self.attribute = attribute
        self.input_type = input_type or DEFAULT_INPUT_TYPE
        self.fail_fast = fail_fast
        self.locale = locale
        self.outcome: ValidationOutcome = EMPTY_OUTCOME
        self.previous_outcome: ValidationOutcome | None = None

    def validate(
        self,
        value: Any,
        chain: RuleChain,
        fail_fast: bool | None = None,
    ) -> ValidationOutcome:
        """Run ``chain`` against ``value``.

        Args:
            value: The raw field value
            chain: Rules to run, in order
            fail_fast: Overrides the engine's policy for this call

        Returns:
            The outcome of this pass

        Raises:
            UnknownRuleError: If a rule has no callback
            ConfigurationError: If a rule is used with a malformed argument
        """
        stop_on_failure = self.fail_fast if fail_fast is None else fail_fast
        current_value = value
        current_type = self.input_type
        latched = False
        executed: list[RuleExecuted] = []

        for entry in chain:
            if latched:
                executed.append(
                    RuleExecuted(
                        rule_name=entry.name,
                        params=entry.params,
                        passed=True,
                        value_tested=current_value,
                    )
                )
                continue

            callback = chain.resolve(entry)
            if callback is None:
                raise UnknownRuleError(entry.name)

            chain.emit(f"before.{entry.name}.run")
            state = RuleState.coerce(callback(current_value, entry.params, current_type))
            logger.debug(
                "Rule %s(%r) on %r: %s",
                entry.name,
                entry.params,
                current_value,
                "passed" if state.passes else "failed",
            )

            if entry.name == NULLABLE_RULE and state.passes and is_empty(current_value):
                latched = True

            value_tested = current_value
            current_value = state.value
            if state.type:
                current_type = state.type

            message = None
            if not state.passes:
                message = self.resolver.resolve(
                    state.alias or entry.name,
                    original_rule_name=entry.name,
                    attribute=self.attribute,
                    params=entry.params,
                    override=entry.message,
                    locale=entry.locale or self.locale,
                )

            executed.append(
                RuleExecuted(
                    rule_name=entry.name,
                    params=entry.params,
                    passed=state.passes,
                    value_tested=value_tested,
                    message=message,
                    alias=state.alias,
                )
            )

            chain.emit(f"after.{entry.name}.run")
            chain.emit(f"after.{entry.name}.{'passes' if state.passes else 'fails'}")

            if not state.passes and stop_on_failure:
                break

        outcome = ValidationOutcome(
            ok=all(record.passed for record in executed),
            executed=tuple(executed),
        )
        self.previous_outcome = self.outcome
        self.outcome = outcome
        return outcome
