"""Allow ``python -m rosterctl``."""

from rosterctl.cli import cli

if __name__ == "__main__":
    cli()
