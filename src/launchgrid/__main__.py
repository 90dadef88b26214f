"""Allow ``python -m launchgrid``."""

from launchgrid.cli import cli

if __name__ == "__main__":
    cli()
