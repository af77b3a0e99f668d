"""CLI entry point for wp-bruno."""

import logging
import shutil
from pathlib import Path

import click

from wp_bruno.bruno.models import Collection
from wp_bruno.bruno.writer import write_collection
from wp_bruno.config import DEFAULT_COLLECTION_NAME, ConverterOptions, parse_namespaces
from wp_bruno.converter import build_collection, wordpress_to_bruno
from wp_bruno.exceptions import ConverterError
from wp_bruno.parser.index import load_index

DEFAULT_OUTPUT = Path("./bruno-collection")

NEXT_STEPS = """Next steps:
  1. Open Bruno and import the collection
  2. Configure authentication in environments/default.bru
  3. Start testing your WordPress API!"""


def _validate_url(value: str) -> str:
    if not value.startswith(("http://", "https://")):
        raise click.BadParameter("URL must start with http:// or https://")
    return value


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _write_output(collection: Collection, output: Path) -> None:
    if output.exists():
        click.echo(f"Cleaning existing output directory {output}...")
        shutil.rmtree(output)
    output.mkdir(parents=True)

    click.echo("Writing Bruno collection files...")
    write_collection(collection, output)
    count = sum(1 for _ in collection.iter_requests())
    click.echo(f"Bruno collection with {count} requests created at: {output}")


@click.group()
def main():
    """wp-bruno: convert a WordPress REST API into a Bruno collection."""
    pass


@main.command()
@click.argument("url", required=False, envvar="WP_API_URL")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Output directory.")
@click.option("-n", "--name", default=None, help="Collection name.")
@click.option("--namespaces", default=None, help='Comma-separated namespaces to include (e.g. "wp/v2,custom/v1").')
@click.option("--no-schemas", is_flag=True, help="Skip fetching detailed schemas (faster).")
@click.option("-k", "--insecure", is_flag=True, help="Allow insecure SSL connections (ignore certificate errors).")
@click.option("-u", "--username", default=None, envvar="WP_USERNAME", help="WordPress username for authentication.")
@click.option("-p", "--password", default=None, envvar="WP_APP_PASSWORD", help="WordPress application password (spaces are removed).")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def convert(url: str | None, output: Path | None, name: str | None, namespaces: str | None,
            no_schemas: bool, insecure: bool, username: str | None, password: str | None, verbose: bool):
    """Convert a live WordPress REST API (e.g. https://example.com/wp-json/).

    Without a URL the command runs interactively and prompts for settings.
    """
    _setup_logging(verbose)
    interactive = not url

    if interactive:
        url = click.prompt("WordPress REST API URL", value_proc=_validate_url)
    else:
        try:
            _validate_url(url)
        except click.BadParameter as e:
            raise click.UsageError(str(e)) from e

    if name is None:
        name = click.prompt("Collection name", default=DEFAULT_COLLECTION_NAME) if interactive else DEFAULT_COLLECTION_NAME
    if output is None:
        output = click.prompt("Output directory", default=DEFAULT_OUTPUT, type=click.Path(path_type=Path)) if interactive else DEFAULT_OUTPUT

    include_namespaces = parse_namespaces(namespaces)
    fetch_schemas = not no_schemas
    if interactive:
        if include_namespaces is None and click.confirm("Filter by specific namespaces?", default=False):
            include_namespaces = parse_namespaces(click.prompt("Namespaces (comma-separated)", default="wp/v2"))
        if not no_schemas:
            fetch_schemas = click.confirm("Fetch detailed schemas? (recommended, but slower)", default=True)
        if not username and click.confirm("Do you need authentication? (for private/restricted endpoints)", default=False):
            username = click.prompt("WordPress username")
            password = click.prompt("Application password", hide_input=True)

    options = ConverterOptions(
        collection_name=name,
        include_namespaces=include_namespaces,
        fetch_schemas=fetch_schemas,
        verify_tls=not insecure,
        username=username,
        password=password,
    )

    click.echo(f"URL: {url}")
    click.echo(f"Collection: {options.collection_name}")
    click.echo(f"Output: {output}")
    if options.include_namespaces:
        click.echo(f"Namespaces: {', '.join(options.include_namespaces)}")
    click.echo(f"Schemas: {'Yes' if options.fetch_schemas else 'No'}")
    click.echo(f"Authentication: {'Yes' if options.username else 'No'}")

    click.echo(f"Fetching WordPress API schema from {url}...")
    try:
        collection = wordpress_to_bruno(url, options)
    except ConverterError as e:
        raise click.ClickException(f"Conversion failed: {e}") from e

    _write_output(collection, output)
    click.echo(NEXT_STEPS)


@main.command()
@click.argument("index_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output directory.")
@click.option("--base-url", required=True, help="Value for the baseUrl variable, e.g. https://example.com/wp-json.")
@click.option("-n", "--name", default=DEFAULT_COLLECTION_NAME, show_default=True, help="Collection name.")
@click.option("--namespaces", default=None, help="Comma-separated namespaces to include.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def build(index_path: Path, output: Path, base_url: str, name: str, namespaces: str | None, verbose: bool):
    """Build a collection from a saved API index (JSON or YAML), offline."""
    _setup_logging(verbose)
    options = ConverterOptions(collection_name=name, include_namespaces=parse_namespaces(namespaces))

    click.echo(f"Reading API index from {index_path}...")
    try:
        index = load_index(index_path)
        collection = build_collection(index, base_url, options)
    except ConverterError as e:
        raise click.ClickException(f"Conversion failed: {e}") from e

    _write_output(collection, output)
