"""Command line interface entry point."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

import click

from graphql_to_jddf.configuration import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_TOKEN_ENV,
    EndpointSettings,
    Settings,
    SettingsError,
    SourceSettings,
    load_settings,
    write_placeholder_configuration,
)
from graphql_to_jddf.introspection_ingestion import (
    IntrospectionSchema,
    IntrospectionSourceError,
    MalformedInputError,
    fetch_introspection,
    load_introspection_file,
    parse_introspection_document,
    parse_introspection_text,
    read_introspection_text,
)
from graphql_to_jddf.results_writing import render_document, write_document
from graphql_to_jddf.schema_emission import ConfigurationError, assemble


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="graphql-to-jddf")
def cli() -> None:
    """Convert GraphQL introspection results into JDDF schemas."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a commented YAML settings file."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="convert")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML settings file",
)
@click.option(
    "--input",
    "input_path",
    required=False,
    type=click.Path(path_type=str, allow_dash=True),
    help="Introspection result JSON file; '-' reads standard input",
)
@click.option(
    "--endpoint",
    required=False,
    help="GraphQL endpoint URL to run the introspection query against",
)
@click.option(
    "--token",
    required=False,
    help=f"Bearer token for --endpoint (defaults to ${DEFAULT_TOKEN_ENV})",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the JDDF document here instead of standard output",
)
@click.option("--compact", is_flag=True, default=False, help="Emit single-line JSON.")
@click.option(
    "--max-list-depth",
    type=click.IntRange(min=0),
    default=None,
    help="List nesting rendered before falling back to the empty schema (default 3)",
)
@click.option(
    "--include-operation-roots",
    is_flag=True,
    default=False,
    help="Also emit mutation and subscription root types.",
)
@click.option(
    "--include-unreferenced-types",
    is_flag=True,
    default=False,
    help="Also emit object-like types not reachable from the roots.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log conversion steps.")
def convert(  # pylint: disable=too-many-arguments
    config_path: str | None,
    input_path: str | None,
    endpoint: str | None,
    token: str | None,
    output_path: str | None,
    compact: bool,
    max_list_depth: int | None,
    include_operation_roots: bool,
    include_unreferenced_types: bool,
    verbose: bool,
) -> None:
    """Convert one introspection result into a JDDF document."""
    if verbose:
        _enable_debug_logging()
    try:
        settings = load_settings(config_path) if config_path else Settings()
        settings = _apply_overrides(
            settings,
            input_path=input_path,
            endpoint=endpoint,
            token=token,
            output_path=output_path,
            compact=compact,
            max_list_depth=max_list_depth,
            include_operation_roots=include_operation_roots,
            include_unreferenced_types=include_unreferenced_types,
        )
        schema = _read_schema(settings.source)
        document = assemble(schema, settings.conversion)
        if settings.output.path is None:
            click.echo(render_document(document, settings.output.indent))
            return
        written = write_document(document, settings.output.path, settings.output.indent)
    except (
        SettingsError,
        IntrospectionSourceError,
        MalformedInputError,
        ConfigurationError,
        OSError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written), err=True)


def _apply_overrides(settings: Settings, **overrides: Any) -> Settings:
    input_path = overrides["input_path"]
    endpoint = overrides["endpoint"]
    if input_path and endpoint:
        raise SettingsError("--input and --endpoint are mutually exclusive.")

    source = settings.source
    if input_path:
        source = SourceSettings(file=None if input_path == "-" else Path(input_path))
    elif endpoint:
        token = overrides["token"] or os.environ.get(DEFAULT_TOKEN_ENV)
        source = SourceSettings(endpoint=EndpointSettings(url=endpoint, token=token or None))
    if overrides["token"] and source.endpoint is not None:
        source = replace(source, endpoint=replace(source.endpoint, token=overrides["token"]))

    conversion = settings.conversion
    if overrides["max_list_depth"] is not None:
        conversion = replace(conversion, max_list_depth=overrides["max_list_depth"])
    for key in ("include_operation_roots", "include_unreferenced_types"):
        if overrides[key]:
            conversion = replace(conversion, **{key: True})

    output = settings.output
    if overrides["output_path"]:
        output = replace(output, path=Path(overrides["output_path"]))
    if overrides["compact"]:
        output = replace(output, indent=None)

    return replace(settings, source=source, conversion=conversion, output=output)


def _read_schema(source: SourceSettings) -> IntrospectionSchema:
    if source.endpoint is not None:
        return parse_introspection_document(fetch_introspection(source.endpoint))
    if source.file is not None:
        return parse_introspection_text(load_introspection_file(source.file))
    return parse_introspection_text(read_introspection_text(click.get_text_stream("stdin")))


def _enable_debug_logging() -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger("graphql_to_jddf")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
