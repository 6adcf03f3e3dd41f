"""Typelink CLI - typelink command."""

import click

from typelink.cli.resolve import resolve_command
from typelink.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="typelink")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Typelink - repair cross-package type references in generated declarations."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(resolve_command, name="resolve")


if __name__ == "__main__":
    cli()
