"""Message resolution and templating for failing rules.

Templates support:
- ``:field`` - the attribute (display) name of the field
- ``:arg0``, ``:arg1``, ... - the rule's comma-separated parameters
- ``...arg`` - every parameter joined with ", "

Placeholders without a value are left in the text as they are.
"""

import re
from typing import Any

from ruleforge.locale.catalog import LocaleCatalog
from ruleforge.rules.utils import split_params
from ruleforge.types import RuleParam

DEFAULT_MESSAGE = "The input value is not valid."

# Pattern: :field, :argN or ...arg
# A placeholder ends where the word ends: ":fieldset" is plain text.
PLACEHOLDER_PATTERN = re.compile(
    r"(?::(?P<name>field|arg(?P<index>\d+))|(?P<spread>\.\.\.arg))(?![A-Za-z0-9_])"
)


def render_message(template: str, attribute: str | None, params: RuleParam = None) -> str:
    """Substitute placeholders in ``template`` in a single pass.

    Substituted text is never scanned again, so a parameter containing
    ``:arg0`` stays as written.

    Example:
        render_message("The :field field must be between :arg0 and :arg1", "age", "18,30")
        # -> "The age field must be between 18 and 30"
    """
    args = split_params(params)

    def replace(match: re.Match) -> str:
        if match.group("spread"):
            return ", ".join(args)
        if match.group("name") == "field":
            return attribute if attribute else match.group(0)
        index = int(match.group("index"))
        if index < len(args) and args[index] != "":
            return args[index]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, str(template))


class MessageResolver:
    """Turns a failing rule into its user-facing message.

    Resolution order:
    1. The override declared with the rule, unless it equals the catalog
       entry of the declared rule name
    2. The catalog entry of the resolved (possibly aliased) rule name
    3. The catalog's ``default`` entry
    4. DEFAULT_MESSAGE when the template is still empty
    """

    def __init__(self, catalog: LocaleCatalog):
        self.catalog = catalog

    def template_for(
        self,
        rule_name: str,
        original_rule_name: str | None = None,
        override: str | None = None,
        locale: str | None = None,
    ) -> str:
        original = original_rule_name or rule_name
        if override and override != self.catalog.get_rule_message(original, locale):
            return override
        template = self.catalog.get_rule_message(rule_name, locale)
        return template or DEFAULT_MESSAGE

    def resolve(
        self,
        rule_name: str,
        original_rule_name: str | None = None,
        attribute: str | None = None,
        params: RuleParam = None,
        override: str | None = None,
        locale: str | None = None,
    ) -> str:
        template = self.template_for(rule_name, original_rule_name, override, locale)
        return render_message(template, attribute, params)


def parse_messages(messages: Any, rule_names: list[str]) -> dict[str, str]:
    """Normalize the messages declared alongside a rule spec.

    Accepts a mapping by rule name, a list matched by position, or a
    pipe-delimited string matched by position. Empty entries are dropped.
    """
    if not messages:
        return {}
    if isinstance(messages, dict):
        return {str(rule): str(msg) for rule, msg in messages.items() if msg}
    if isinstance(messages, str):
        messages = messages.split("|")
    if isinstance(messages, (list, tuple)):
        return {
            rule: str(msg)
            for rule, msg in zip(rule_names, messages)
            if msg
        }
    return {}
