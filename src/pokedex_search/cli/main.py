"""CLI main entry point for Pokédex search."""

import json
import logging
import sys

import click
from pydantic import ValidationError as SettingsError
from rich.console import Console

from .. import __version__
from ..catalog import CatalogBuilder, PokemonSearcher
from ..core import (
    PokeApiClient,
    PokedexError,
    PokedexSettings,
    PokemonNotFoundError,
    ValidationError,
)
from .formatters import (
    format_catalog_json,
    format_catalog_table,
    format_pokemon_detailed,
    format_pokemon_json,
)

console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _make_client(settings: PokedexSettings, timeout: int | None) -> PokeApiClient:
    return PokeApiClient(settings=settings, timeout=timeout)


def _fetch_japanese_name(client: PokeApiClient, pokemon_id: int) -> str | None:
    try:
        return client.get_species(pokemon_id).japanese_name
    except PokedexError as e:
        logger.warning(f"Could not fetch Japanese name for #{pokemon_id}: {e}")
        return None


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging and extra columns")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Pokédex Search - Browse and search the first 151 Pokémon from PokeAPI."""
    _configure_logging(verbose)

    try:
        settings = PokedexSettings.from_env()
    except SettingsError as e:
        error_console.print(f"[red]Invalid configuration:[/red] {e}")
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings"] = settings


@cli.command("list")
@click.argument("query", required=False, default="")
@click.option("--limit", "-l", type=click.IntRange(min=1), help="Number of entries")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option(
    "--japanese/--no-japanese",
    default=True,
    help="Fetch Japanese names (one extra request per entry)",
)
@click.option(
    "--timeout", "-t", type=click.IntRange(min=1), help="Request timeout in seconds"
)
@click.pass_context
def list_pokemon(
    ctx: click.Context,
    query: str,
    limit: int | None,
    output_format: str,
    japanese: bool,
    timeout: int | None,
) -> None:
    """List Pokémon, optionally filtered by a name query.

    The query matches English names case-insensitively and Japanese names
    in either hiragana or katakana.

    Examples:
        pokedex list
        pokedex list pika
        pokedex list ぴかちゅう
        pokedex list --no-japanese --format json
    """
    settings: PokedexSettings = ctx.obj["settings"]
    client = _make_client(settings, timeout)
    builder = CatalogBuilder(client, max_workers=settings.max_workers)

    try:
        with console.status("[bold green]Loading Pokédex..."):
            entries = builder.build(
                limit=limit or settings.limit, with_japanese=japanese
            )
    except PokedexError as e:
        error_console.print(f"[red]Failed to load Pokemon list:[/red] {e}")
        sys.exit(1)

    results = PokemonSearcher(entries).search(query)

    if output_format == "json":
        click.echo(format_catalog_json(results))
    else:
        format_catalog_table(results, query=query, verbose=ctx.obj["verbose"])


@cli.command()
@click.argument("name")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option(
    "--japanese/--no-japanese", default=True, help="Fetch the Japanese name"
)
@click.option(
    "--timeout", "-t", type=click.IntRange(min=1), help="Request timeout in seconds"
)
@click.pass_context
def show(
    ctx: click.Context,
    name: str,
    output_format: str,
    japanese: bool,
    timeout: int | None,
) -> None:
    """Show the detail view for one Pokémon.

    NAME is the English name, the national number, or a Japanese name
    (resolved through the catalog).

    Examples:
        pokedex show pikachu
        pokedex show 25 --format json
        pokedex show ピカチュウ
    """
    settings: PokedexSettings = ctx.obj["settings"]
    client = _make_client(settings, timeout)

    try:
        with console.status(f"[bold green]Fetching {name}..."):
            key = name
            if not name.isascii():
                entries = CatalogBuilder(
                    client, max_workers=settings.max_workers
                ).build(limit=settings.limit)
                entry = PokemonSearcher(entries).get_by_name(name)
                if entry is None:
                    raise PokemonNotFoundError(f"No Pokemon named {name}")
                key = entry.name

            pokemon = client.get_pokemon(key)
            japanese_name = (
                _fetch_japanese_name(client, pokemon.id) if japanese else None
            )
    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except PokemonNotFoundError:
        error_console.print(f"[yellow]Pokemon not found:[/yellow] {name}")
        sys.exit(1)
    except PokedexError as e:
        error_console.print(f"[red]Failed to load Pokemon details:[/red] {e}")
        sys.exit(1)

    if output_format == "json":
        click.echo(format_pokemon_json(pokemon, japanese_name=japanese_name))
    else:
        format_pokemon_detailed(pokemon, japanese_name=japanese_name)


@cli.command()
@click.option("--limit", "-l", type=click.IntRange(min=1), help="Number of entries")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--timeout", "-t", type=click.IntRange(min=1), help="Request timeout in seconds"
)
@click.pass_context
def names(
    ctx: click.Context, limit: int | None, output_format: str, timeout: int | None
) -> None:
    """Print every name in the catalog, for pre-generating detail pages.

    Examples:
        pokedex names
        pokedex names --format json > names.json
    """
    settings: PokedexSettings = ctx.obj["settings"]
    client = _make_client(settings, timeout)

    try:
        all_names = client.list_names(limit or settings.limit)
    except PokedexError as e:
        error_console.print(f"[red]Failed to load Pokemon list:[/red] {e}")
        sys.exit(1)

    if output_format == "json":
        click.echo(
            json.dumps([{"name": n} for n in all_names], ensure_ascii=False, indent=2)
        )
    else:
        for n in all_names:
            click.echo(n)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show current configuration.

    Values come from POKEDEX_API_BASE_URL, POKEDEX_TIMEOUT, POKEDEX_LIMIT
    and POKEDEX_MAX_WORKERS.
    """
    settings: PokedexSettings = ctx.obj["settings"]
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• API base URL: {settings.api_base_url}")
    console.print(f"• Timeout: {settings.timeout} seconds")
    console.print(f"• Catalog size: {settings.limit}")
    console.print(f"• Parallel requests: {settings.max_workers}")


if __name__ == "__main__":
    cli()
