"""Command-line interface for gql-modelgen."""

import asyncio
import json
from pathlib import Path

import click
import httpx
from pydantic import ValidationError

from .core.auth import auth_from_options
from .core.errors import ModelGenError, SchemaLoadError
from .core.executor import GraphQLError, GraphQLExecutor
from .core.generator import NAMESPACE_PATTERN, ModelGenerator
from .core.loader import SchemaLoader
from .core.schema import Schema


# Failures reported as "An error occurred ..." instead of a traceback
GENERATION_ERRORS = (
    ModelGenError,
    GraphQLError,
    httpx.HTTPError,
    ValidationError,
    OSError,
    ValueError,
)


def is_url(source: str) -> bool:
    """Return True if the schema source should be introspected over HTTP."""
    return source.lower().startswith(("http://", "https://"))


def require(value: str, message: str):
    """Reject blank option values, one option at a time."""
    if not value or not value.strip():
        raise click.UsageError(message)


async def _introspect(endpoint: str, bearer_token, headers, timeout: float) -> dict:
    auth = auth_from_options(bearer_token, headers)
    async with GraphQLExecutor(endpoint, auth, timeout=timeout) as executor:
        return await executor.introspect()


def load_schema(endpoint: str, bearer_token, headers, timeout: float) -> Schema:
    """Load a schema from a URL or a local introspection / SDL path."""
    if is_url(endpoint):
        data = asyncio.run(_introspect(endpoint, bearer_token, headers, timeout))
        try:
            return Schema.from_introspection(data)
        except ValueError as e:
            raise SchemaLoadError(endpoint, str(e)) from e
    return SchemaLoader(endpoint).load()


endpoint_option = click.option(
    "-e",
    "--endpoint",
    required=True,
    help="GraphQL endpoint URL, or a local introspection .json / SDL file or directory.",
)
bearer_option = click.option(
    "--bearer-token",
    envvar="GQL_MODELGEN_TOKEN",
    help="Bearer token for the endpoint (env: GQL_MODELGEN_TOKEN).",
)
header_option = click.option(
    "--header",
    "headers",
    multiple=True,
    help="Extra request header as 'Name: value'. Repeatable.",
)
timeout_option = click.option(
    "--timeout",
    default=30.0,
    show_default=True,
    type=float,
    help="Request timeout in seconds.",
)


@click.group()
@click.version_option()
def main():
    """GraphQL model generator for C#.

    Generate typed C# classes, interfaces and enums from a GraphQL schema.
    """
    pass


@main.command()
@click.option(
    "-ns",
    "--namespace",
    required=True,
    help="C# namespace for the generated types.",
)
@endpoint_option
@click.option(
    "-o",
    "--output",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output file for the generated code (e.g., Model.cs).",
)
@bearer_option
@header_option
@timeout_option
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with a custom model.cs.j2 template.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    namespace: str,
    endpoint: str,
    output: str,
    bearer_token: str | None,
    headers: tuple[str, ...],
    timeout: float,
    template_dir: str | None,
    verbose: bool,
):
    """Generate C# model classes from a GraphQL schema.

    Examples:

        gql-modelgen generate -ns Sdl.Web -e http://localhost:8081/udp/content -o Model.cs

        gql-modelgen generate -ns Sdl.Web -e ./schema.json -o Model.cs

        gql-modelgen generate -ns Sdl.Web -e ./schema -o Model.cs --template-dir ./templates
    """
    require(endpoint, "Specify GraphQL endpoint address.")
    require(output, "Specify output file.")
    require(namespace, "Specify namespace.")
    if not NAMESPACE_PATTERN.fullmatch(namespace):
        raise click.UsageError(f"Invalid namespace: {namespace!r}")

    output_path = Path(output).resolve()

    try:
        if verbose:
            click.echo(f"Schema: {endpoint}")
            click.echo(f"Output: {output_path}")

        click.echo("Fetching schema..." if is_url(endpoint) else "Loading schema...")
        schema = load_schema(endpoint, bearer_token, headers, timeout)

        if verbose:
            for kind, count in sorted(schema.count_by_kind().items()):
                click.echo(f"  {kind}: {count}")

        click.echo("Generating code...")
        generator = ModelGenerator(schema, namespace, template_dir=template_dir)
        code = generator.generate()

        if verbose:
            click.echo(f"  Lines: {len(code.splitlines())}")

        # Nothing is written unless generation succeeded
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(code, encoding="utf-8")
    except GENERATION_ERRORS as e:
        raise click.ClickException(f"An error occurred when generating classes: {e}") from e

    click.echo(f"Done! Generated code in {output_path}")


@main.command()
@endpoint_option
@click.option(
    "-o",
    "--output",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output file for the introspection result (e.g., schema.json).",
)
@bearer_option
@header_option
@timeout_option
def introspect(
    endpoint: str,
    output: str,
    bearer_token: str | None,
    headers: tuple[str, ...],
    timeout: float,
):
    """Save the introspection result of an endpoint as JSON.

    The saved file can be passed to ``generate -e`` to work offline.

    Examples:

        gql-modelgen introspect -e http://localhost:8081/udp/content -o schema.json
    """
    require(endpoint, "Specify GraphQL endpoint address.")
    require(output, "Specify output file.")
    if not is_url(endpoint):
        raise click.UsageError("Introspection needs an http:// or https:// endpoint.")

    output_path = Path(output).resolve()
    try:
        click.echo("Fetching schema...")
        data = asyncio.run(_introspect(endpoint, bearer_token, headers, timeout))
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except GENERATION_ERRORS as e:
        raise click.ClickException(f"An error occurred when introspecting: {e}") from e

    click.echo(f"Done! Saved introspection result to {output_path}")


if __name__ == "__main__":
    main()
