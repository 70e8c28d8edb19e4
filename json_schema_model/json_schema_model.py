import json
import logging
import sys

import click

from .codec import dumps, loads
from .config import CodecConfig
from .errors import SchemaDecodeError


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--max-depth", default=None, type=click.IntRange(min=0), help="Deepest schema nesting accepted")
@click.option("--indent", default=None, type=click.IntRange(min=0), help="Indentation of the written JSON")
@click.option("--check", is_flag=True, default=False, help="Only decode the schema and report its kind")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log decoding steps")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", required=False, type=click.Path(dir_okay=False, resolve_path=True))
def json_schema_model(config, max_depth, indent, check, verbose, path, output):
    """Decode the schema at PATH and write its normalized form to OUTPUT (default: stdout)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    if config is not None:
        try:
            with open(config, encoding="utf-8") as f:
                config = CodecConfig.from_dict(json.load(f))
        except ValueError as e:
            raise click.ClickException(f"Invalid config file {click.format_filename(config)}: {e}") from e
    else:
        config = CodecConfig()

    # CLI flags override the config file
    if max_depth is not None:
        config.max_depth = max_depth
    if indent is not None:
        config.indent = indent

    with open(path, "rb") as f:
        data = f.read()

    try:
        node = loads(data, config)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{click.format_filename(path)} is not valid JSON: {e}") from e
    except SchemaDecodeError as e:
        raise click.ClickException(f"{click.format_filename(path)}: {e}") from e

    if check:
        click.echo(f"{click.format_filename(path)}: {node.kind.value} schema")
        return

    out = dumps(node, config)
    try:
        out.encode("utf-8")
    except UnicodeEncodeError as e:
        # JSON escapes can spell lone surrogates, which UTF-8 cannot hold
        raise click.ClickException(f"{click.format_filename(path)} cannot be written as UTF-8: {e.reason}") from e

    if output is None:
        click.echo(out)
    else:
        with open(output, "w", encoding="utf-8") as f:
            f.write(out + "\n")
