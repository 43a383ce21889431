"""CLI entry point for zod-schema-compat.

Schema files are JSON-serialised node trees, e.g. a v3 tree dumped as
``{"_def": {"typeName": "ZodObject", "shape": {...}}}`` or a v4 tree as
``{"_zod": {"def": {"type": "object", "shape": {...}}}}``.
"""

import json
import sys
from pathlib import Path
from typing import Any, Optional

import click

from .config import Config
from .exceptions import UnrepresentableSchemaError
from .logging_setup import configure_logging
from .schema_gen.remediation import format_remediation
from .schema_gen.schema_converter_service import SchemaConverterService

EXIT_UNREPRESENTABLE = 1
EXIT_NO_SCHEMA = 2


def _load_schema_tree(schema_file: str) -> Any:
    try:
        with open(schema_file) as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise click.ClickException(f"Could not read schema file {schema_file}: {e}")


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="ZOD_SCHEMA_COMPAT_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override the logging level (e.g., DEBUG, INFO)."
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format."
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str], log_format: Optional[str]) -> None:
    """zod-schema-compat - Converts Zod-style schema trees to JSON Schema."""
    try:
        if config_file:
            cfg = Config.from_file(Path(config_file))
        else:
            cfg = Config()
    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if log_level:
        cfg.logging.level = log_level.upper()
    if log_format:
        cfg.logging.format = log_format.lower()

    configure_logging(cfg)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command()
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-file", "-o",
    type=click.Path(dir_okay=False, writable=True, resolve_path=True),
    help="Write the JSON Schema here instead of stdout."
)
@click.pass_context
def convert(ctx: click.Context, schema_file: str, output_file: Optional[str]) -> None:
    """Converts a serialised schema tree to a draft-07 JSON Schema."""
    config: Config = ctx.obj["config"]
    service = SchemaConverterService(app_config=config)
    node = _load_schema_tree(schema_file)

    try:
        json_schema = service.to_json_schema(node)
    except UnrepresentableSchemaError as e:
        click.echo(str(e), err=True)
        sys.exit(EXIT_UNREPRESENTABLE)

    if json_schema is None:
        click.echo("No JSON Schema could be built: the schema uses a construct the converter does not support.", err=True)
        sys.exit(EXIT_NO_SCHEMA)

    rendered = json.dumps(json_schema, indent=2)
    if output_file:
        try:
            with open(output_file, "w") as f:
                f.write(rendered + "\n")
        except IOError as e:
            click.echo(f"Error writing output file {output_file}: {e}", err=True)
            sys.exit(1)
        click.echo(f"JSON Schema written to {output_file}")
    else:
        click.echo(rendered)


@cli.command()
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output diagnostics as JSON.")
@click.pass_context
def scan(ctx: click.Context, schema_file: str, as_json: bool) -> None:
    """Lists schema nodes that have no JSON Schema equivalent."""
    config: Config = ctx.obj["config"]
    service = SchemaConverterService(app_config=config)
    diagnostics = service.find_unrepresentable_types(_load_schema_tree(schema_file))

    if as_json:
        click.echo(json.dumps([d.model_dump() for d in diagnostics], indent=2))
    elif diagnostics:
        click.echo(f"Found {len(diagnostics)} unrepresentable type(s):\n")
        for i, diagnostic in enumerate(diagnostics, 1):
            click.echo(format_remediation(diagnostic, i) + "\n")
    else:
        click.echo("No unrepresentable types found.")

    if diagnostics:
        sys.exit(EXIT_UNREPRESENTABLE)


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"zod-schema-compat v{__version__}")


@cli.command()
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config: Config = ctx.obj["config"]
    click.echo(config.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
