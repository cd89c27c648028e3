"""Main CLI entry point for basecrud."""

import click

from basecrud import __version__
from basecrud.cli.commands.dry_run import dry_run
from basecrud.cli.commands.init import init
from basecrud.cli.commands.list import list_operations
from basecrud.cli.commands.run import run
from basecrud.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """basecrud - CRUD on Base tables from workflow items."""
    pass


main.add_command(run)
main.add_command(validate)
main.add_command(dry_run)
main.add_command(list_operations)
main.add_command(init)


if __name__ == "__main__":
    main()
