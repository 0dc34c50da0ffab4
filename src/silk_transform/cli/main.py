"""silk-transform CLI entry point: Click group with subcommands."""

import logging

import click

from silk_transform import __version__


@click.group()
@click.version_option(version=__version__, prog_name="silk-transform")
@click.option("-v", "--verbose", is_flag=True, help="Log skipped style entries and other details.")
def cli(verbose: bool) -> None:
    """silk-transform - compile css({...}) calls into atomic class names."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from silk_transform.cli.hash import hash_pair  # noqa: E402
from silk_transform.cli.transform import transform  # noqa: E402

cli.add_command(transform)
cli.add_command(hash_pair)
