"""Allow ``python -m typelink``."""

from typelink.cli.main import cli

if __name__ == "__main__":
    cli()
