"""Validation CLI commands — validate data and check rule spec files."""

import json
from pathlib import Path

import click

from ruleforge.context import ValidationContext
from ruleforge.loader import read_document, validate_rule_spec_file
from ruleforge.types import ConfigurationError


@click.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("data_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--locale", default=None, help="Message locale (defaults to RULEFORGE_LOCALE or en).")
@click.option(
    "--all-errors",
    is_flag=True,
    default=False,
    help="Run every rule of each field instead of stopping at the first failure.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON.")
def validate(spec_path: Path, data_path: Path, locale: str | None, all_errors: bool, as_json: bool):
    """Validate a YAML/JSON data file against a rule spec file.

    Exits with 0 when the data is valid, 1 when it is not and 2 when the
    rule spec or the data file is unusable.
    """
    try:
        data = read_document(data_path)
        if not isinstance(data, dict):
            raise ConfigurationError(f"{data_path} must contain a mapping at the top level")

        ctx = ValidationContext(locale=locale)
        form = ctx.from_spec(spec_path, data)
        if all_errors:
            form.each(lambda field: field.fail_fast(False))
        valid = form.is_valid()
    except ConfigurationError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(2)

    errors = {field.name: field.errors for field in form.all() if field.errors}

    if as_json:
        click.echo(json.dumps({"valid": valid, "errors": errors}, indent=2, ensure_ascii=False))
        raise SystemExit(0 if valid else 1)

    for name, field_errors in errors.items():
        click.echo(click.style(name, bold=True))
        for rule, message in field_errors.items():
            click.echo(click.style(f"  ✗ {message}", fg="red") + click.style(f" ({rule})", dim=True))

    if not valid:
        click.echo(click.style(f"\n{len(errors)} field(s) failed validation", fg="red", bold=True))
        raise SystemExit(1)

    click.echo(click.style(f"All {len(form)} field(s) are valid.", fg="green", bold=True))


@click.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors.",
)
def check(spec_path: Path, strict: bool):
    """Check a rule spec file against the JSON Schema and the registered rules."""
    ctx = ValidationContext()
    issues = validate_rule_spec_file(spec_path, registry=ctx.registry)
    if strict:
        for issue in issues:
            issue.severity = "error"

    errors = [i for i in issues if i.severity == "error"]
    warnings = [i for i in issues if i.severity == "warning"]

    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    if errors:
        click.echo(
            click.style(
                f"\n{len(errors)} error(s) found"
                + (f", {len(warnings)} warning(s)" if warnings else ""),
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    if warnings:
        click.echo(click.style(f"{len(warnings)} warning(s) found.", fg="yellow"))

    click.echo(click.style("Rule spec is valid.", fg="green", bold=True))
