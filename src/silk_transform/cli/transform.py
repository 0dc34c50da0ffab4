"""CLI command: silk-transform transform -- rewrite style calls in one file."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from silk_transform.config import load_config
from silk_transform.css.rules import assemble_stylesheet
from silk_transform.parser import ParseError
from silk_transform.source import transform_source

logger = logging.getLogger(__name__)


@click.command()
@click.argument("source_file", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Write the transformed code here instead of stdout.")
@click.option("--css-out", type=click.Path(dir_okay=False), default=None,
              help="Write the generated stylesheet to this file.")
@click.option("--config", "config_json", default=None,
              help='Plugin configuration as JSON, e.g. \'{"production": true}\'.')
@click.option("--production/--development", default=None,
              help="Override the production setting from --config.")
@click.option("--class-prefix", default=None,
              help="Override the classPrefix setting from --config.")
def transform(
    source_file: str,
    output: str | None,
    css_out: str | None,
    config_json: str | None,
    production: bool | None,
    class_prefix: str | None,
) -> None:
    """Rewrite css({...}) calls in a JavaScript or TypeScript file.

    The transformed code goes to stdout (or --output); the deduplicated
    stylesheet goes to --css-out.
    """
    loaded = load_config(config_json)
    if not loaded.is_ok:
        logger.warning("Invalid configuration, using defaults: %s", loaded.reason)
    config = loaded.config

    overrides: dict[str, object] = {}
    if production is not None:
        overrides["production"] = production
    if class_prefix is not None:
        overrides["class_prefix"] = class_prefix
    if overrides:
        config = replace(config, **overrides)  # type: ignore[arg-type]
    logger.debug("Using configuration %s", config.to_dict())

    src_path = Path(source_file)
    try:
        source = src_path.read_text(encoding="utf-8")
        result = transform_source(source, config)
    except ParseError as exc:
        where = f"{src_path.name}:{exc.location}" if exc.location else src_path.name
        click.echo(f"Parse error: {where}: {exc.message}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(result.code, encoding="utf-8")
    else:
        click.echo(result.code, nl=False)

    if css_out:
        Path(css_out).write_text(assemble_stylesheet(result.css_rules), encoding="utf-8")

    click.echo(f"{src_path.name}: {len(result.css_rules)} rule(s) generated", err=True)
