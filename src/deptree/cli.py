"""Command-line interface for deptree."""

import click

from . import __version__
from .commands.config import config
from .commands.resolve import resolve


@click.group(help="Resolve and print dependency trees of software distributions")
@click.version_option(version=__version__, prog_name="deptree")
def cli():
    """deptree command group."""
    pass


cli.add_command(resolve)
cli.add_command(config)


def main():
    """Entry point for the deptree console script."""
    cli(prog_name="deptree")


if __name__ == "__main__":
    main()
