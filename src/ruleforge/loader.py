"""
loader.py — rule spec files for ruleforge.

A rule spec is a YAML (or JSON) document:

    locale: fr
    messages:
      fr:
        required: "Le champ :field est obligatoire."
    fields:
      email: required|email
      age:
        rules: required|number|between:18,99
        attribute: âge
      "items.*.qty": required|integer|min:1

Documents are checked against ``schemas/rules.schema.json`` before use.

Usage:
    from ruleforge.loader import load_rule_spec, validate_rule_spec_file

    for issue in validate_rule_spec_file(Path("rules.yaml")):
        print(issue)
    spec = load_rule_spec(Path("rules.yaml"))
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from ruleforge.chain import parse_rules
from ruleforge.locale.lang import BUNDLED_MESSAGES
from ruleforge.registry import RuleRegistry
from ruleforge.types import RuleSpecError

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "rules.schema.json"

# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------


@dataclass
class SpecIssue:
    """A single finding for a rule spec file."""

    file: Path
    message: str
    path: str = ""          # location within the document, e.g. "fields/age/rules"
    severity: str = "error" # "error" | "warning"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


@dataclass
class RuleSpec:
    """A loaded rule spec document."""

    fields: dict[str, Any]
    locale: str | None = None
    messages: dict[str, dict[str, str]] = field(default_factory=dict)
    fail_fast: bool | None = None
    source: Path | None = None


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_schema() -> dict[str, Any]:
    with _SCHEMA_PATH.open() as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def _rules_of(spec: Any) -> Any:
    if isinstance(spec, dict):
        return spec.get("rules")
    return spec


def read_document(path: Path) -> Any:
    """Parse a YAML or JSON file.

    Raises:
        RuleSpecError: If the file cannot be read or parsed
    """
    try:
        with path.open(encoding="utf-8") as fh:
            if path.suffix.lower() == ".json":
                return json.load(fh)
            return yaml.safe_load(fh)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RuleSpecError(f"Cannot read {path}: {exc}") from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_rule_spec(
    doc: Any,
    file: Path,
    *,
    registry: RuleRegistry | None = None,
) -> list[SpecIssue]:
    """
    Check a parsed rule spec document.

    Args:
        doc:      The parsed document.
        file:     Source path, used in the issues.
        registry: When given, rule names must be registered in it.

    Returns:
        A list of :class:`SpecIssue` objects (empty on success).
    """
    if doc is None:
        return [SpecIssue(file=file, message="File is empty or contains only whitespace")]

    validator = Draft202012Validator(_load_schema())
    issues = [
        SpecIssue(file=file, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(doc), key=_json_path)
    ]
    if issues:
        return issues

    for lang in doc.get("messages", {}):
        if lang not in BUNDLED_MESSAGES:
            issues.append(
                SpecIssue(
                    file=file,
                    message=f"Locale '{lang}' is not bundled; rules it does not translate use English messages",
                    path=f"messages/{lang}",
                    severity="warning",
                )
            )

    if registry is not None:
        for name, spec in doc["fields"].items():
            try:
                entries = parse_rules(_rules_of(spec))
            except RuleSpecError as exc:
                issues.append(SpecIssue(file=file, message=str(exc), path=f"fields/{name}"))
                continue
            for entry in entries:
                if not registry.has(entry.name):
                    issues.append(
                        SpecIssue(
                            file=file,
                            message=f"Unknown rule '{entry.name}'",
                            path=f"fields/{name}",
                        )
                    )

    return issues


def validate_rule_spec_file(
    path: Path,
    *,
    registry: RuleRegistry | None = None,
) -> list[SpecIssue]:
    """Read and check a rule spec file; parse errors become issues."""
    try:
        doc = read_document(path)
    except RuleSpecError as exc:
        return [SpecIssue(file=path, message=str(exc))]
    return validate_rule_spec(doc, path, registry=registry)


def load_rule_spec(
    path: Path,
    *,
    registry: RuleRegistry | None = None,
) -> RuleSpec:
    """
    Load a rule spec file.

    Warnings are logged; errors abort the load.

    Raises:
        RuleSpecError: If the file is unreadable or fails validation
    """
    doc = read_document(path)
    issues = validate_rule_spec(doc, path, registry=registry)

    errors = [i for i in issues if i.severity == "error"]
    for issue in issues:
        if issue.severity == "warning":
            logger.warning("%s", issue)
    if errors:
        raise RuleSpecError("Invalid rule spec:\n" + "\n".join(str(e) for e in errors))

    return RuleSpec(
        fields=dict(doc["fields"]),
        locale=doc.get("locale"),
        messages={lang: dict(msgs) for lang, msgs in doc.get("messages", {}).items()},
        fail_fast=doc.get("fail_fast"),
        source=path,
    )
