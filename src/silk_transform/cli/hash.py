"""CLI command: silk-transform hash -- show the class name for one style pair."""

from __future__ import annotations

import click

from silk_transform.config import DEFAULT_CLASS_PREFIX, Configuration
from silk_transform.css.rules import emit_rule
from silk_transform.naming.class_name import generate_class_name


@click.command(name="hash")
@click.argument("name")
@click.argument("value")
@click.option("--production/--development", default=False, help="Use compact class names.")
@click.option("--class-prefix", default=DEFAULT_CLASS_PREFIX, show_default=True)
def hash_pair(name: str, value: str, production: bool, class_prefix: str) -> None:
    """Print the class name and CSS rule generated for NAME: VALUE.

    VALUE is taken as literal text; numeric literals are written the way
    they appear after parsing (``4`` rather than ``4.0``).
    """
    config = Configuration(production=production, class_prefix=class_prefix)
    class_name = generate_class_name(name, value, config)
    click.echo(class_name)
    click.echo(emit_rule(class_name, name, value))
