import json
from pathlib import Path

import click

from .errors import SchemaGenerationError
from .pipeline import FieldParser, OutputMode, SchemaGenerator, SchemaOptions


@click.command()
@click.option("--options", "-o", "options_path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--base-schema",
    "-b",
    default=None,
    type=click.Path(exists=True, resolve_path=True),
    help="JSON schema produced by the CMS runtime, used instead of the built-in builder",
)
@click.option("--use-opaque-media-type", is_flag=True, default=False, help="Map uploads to payload.Media and drop the media definition")
@click.option(
    "--assign-relationship-metadata",
    is_flag=True,
    default=False,
    help="Attach payload metadata to fields so relationships resolve to single $refs",
)
@click.option("--error-if-exists", is_flag=True, default=False, help="Fail instead of overwriting the output file")
@click.argument("config_path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def generate_types(options_path, base_schema, use_opaque_media_type, assign_relationship_metadata, error_if_exists, config_path, output):
    """Compile Go-annotated JSON types for the collections and globals in CONFIG_PATH."""
    click.echo("Compiling JSON types for Collections and Globals...")

    with open(config_path) as f:
        raw_config = json.load(f)

    if options_path is not None:
        with open(options_path) as f:
            options = SchemaOptions.from_dict(json.load(f))
    else:
        options = SchemaOptions()

    # CLI flags override the options file
    if use_opaque_media_type:
        options.use_opaque_media_type = True
    if assign_relationship_metadata:
        options.assign_relationship_metadata = True
    if error_if_exists:
        options.output.mode = OutputMode.ERROR_IF_EXISTS

    build_schema = None
    if base_schema is not None:
        with open(base_schema) as f:
            document = json.load(f)
        build_schema = lambda _config: document  # noqa: E731

    try:
        config = FieldParser().parse_config(raw_config)
        generator = SchemaGenerator(config, options, build_schema)
        written = generator.write(Path(output) if output else None)
    except (SchemaGenerationError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"JSON types written to: {written}")
