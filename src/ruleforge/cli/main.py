"""ruleforge CLI entry point."""

import click


@click.group()
def cli():
    """ruleforge — declarative data validation CLI."""
    pass


# Register subcommands
from ruleforge.cli.rules_cmd import rules  # noqa: E402
from ruleforge.cli.validate_cmd import check, validate  # noqa: E402

cli.add_command(validate)
cli.add_command(check)
cli.add_command(rules)
