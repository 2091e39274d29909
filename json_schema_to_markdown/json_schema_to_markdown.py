import json
import logging
import sys
from typing import TextIO

import click

from .pipeline import MarkdownConfig, MarkdownGenerator

# Verbosity count -> log level; anything above the table shows debug output
LOG_LEVELS = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
}


def setup_logging(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the package logger; can be called again to reconfigure it."""
    logger = logging.getLogger("json_schema_to_markdown")
    logger.handlers.clear()
    logger.setLevel(LOG_LEVELS.get(verbosity, logging.DEBUG))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--verbose", "-v", count=True, help="Increase log verbosity (repeatable)")
@click.argument("args", nargs=-1)
@click.pass_context
def json_schema_to_markdown(ctx, config, verbose, args):
    # Argument count is checked by hand to keep the documented usage line and exit status
    if len(args) != 2:
        click.echo(f"Usage: {ctx.info_name} SCHEMA_NAME SCHEMA_FILE", err=True)
        ctx.exit(1)

    setup_logging(verbose)
    name, path = args

    with open(path, encoding="utf-8") as f:
        schema = json.loads(f.read())

    if config is not None:
        with open(config, encoding="utf-8") as f:
            md_config = MarkdownConfig.from_dict(json.load(f))
    else:
        md_config = MarkdownConfig()

    for line in MarkdownGenerator(name, schema, md_config).generate_lines():
        click.echo(line)
