"""Command-line entry point for fielderrors."""

import click

from fielderrors import __version__
from fielderrors.cli.commands.convert import convert


@click.group()
@click.version_option(version=__version__, prog_name="fielderrors")
def main() -> None:
    """Turn validation reports into per-field form messages."""


main.add_command(convert)


if __name__ == "__main__":
    main()
