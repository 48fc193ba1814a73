"""Rules CLI command — list registered rules."""

import click

from ruleforge.context import ValidationContext


@click.command()
@click.option("--locale", default=None, help="Show messages in this locale.")
@click.option(
    "--messages/--no-messages",
    "show_messages",
    default=False,
    help="Show each rule's message template.",
)
def rules(locale: str | None, show_messages: bool):
    """List the built-in rules."""
    ctx = ValidationContext(locale=locale)
    names = ctx.rule_names()
    width = max(len(name) for name in names)

    for name in names:
        if show_messages:
            click.echo(f"  {name.ljust(width)}  {ctx.get_message(name)}")
        else:
            click.echo(f"  {name}")

    click.echo(f"\n{len(names)} rule(s) registered.")
