"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core.models import CatalogEntry, Pokemon

console = Console()


def display_name(name: str) -> str:
    """Capitalize the first letter only, so ``mr-mime`` reads ``Mr-mime``."""
    return name[:1].upper() + name[1:]


def format_catalog_table(
    entries: list[CatalogEntry], query: str = "", verbose: bool = False
) -> None:
    """Display catalog entries as a rich table with a result count."""
    if entries:
        table = Table(title="ポケモン図鑑", show_header=True, header_style="bold magenta")
        table.add_column("No.", style="cyan", no_wrap=True)
        table.add_column("Name", style="green")
        table.add_column("日本語", style="yellow")
        if verbose:
            table.add_column("Artwork", style="dim blue")

        for entry in entries:
            row_data = [
                entry.display_number,
                display_name(entry.name),
                entry.japanese_name or "-",
            ]
            if verbose:
                row_data.append(entry.artwork_url)
            table.add_row(*row_data)

        console.print(table)

    console.print(f"{len(entries)} 匹のポケモンが見つかりました")

    if not entries and query:
        console.print(
            f"[dim]「{escape(query)}」に一致するポケモンは見つかりませんでした。[/dim]"
        )


def format_catalog_json(entries: list[CatalogEntry]) -> str:
    """Format catalog entries as JSON."""
    entries_data = [
        {
            "id": entry.pokemon_id,
            "number": entry.display_number,
            "name": entry.name,
            "japanese_name": entry.japanese_name,
            "artwork_url": entry.artwork_url,
        }
        for entry in entries
    ]
    return json.dumps(entries_data, ensure_ascii=False, indent=2)


def format_pokemon_detailed(pokemon: Pokemon, japanese_name: str | None = None) -> None:
    """Display one Pokémon's detail view."""
    header_text = f"[bold]{display_name(pokemon.name)}[/bold]"
    if japanese_name:
        header_text += f" ({japanese_name})"
    header_text += f"\n図鑑番号: #{pokemon.id}"
    header_text += f"\n[dim]{pokemon.image_url or '-'}[/dim]"

    console.print(Panel(header_text, title=pokemon.display_number, border_style="blue"))

    table = Table(title="詳細情報", show_header=False)
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("高さ", pokemon.display_height)
    table.add_row("重さ", pokemon.display_weight)
    table.add_row("タイプ", " ".join(display_name(t) for t in pokemon.type_names))
    table.add_row(
        "特性",
        "\n".join(
            display_name(str(slot))
            for slot in sorted(pokemon.abilities, key=lambda a: a.slot)
        ),
    )
    table.add_row(
        "種族値",
        "\n".join(f"{stat.label}: {stat.base_stat}" for stat in pokemon.stats),
    )

    console.print(table)


def format_pokemon_json(pokemon: Pokemon, japanese_name: str | None = None) -> str:
    """Format one Pokémon's detail record as JSON."""
    pokemon_data = {
        "id": pokemon.id,
        "name": pokemon.name,
        "japanese_name": japanese_name,
        "height_m": pokemon.height_m,
        "weight_kg": pokemon.weight_kg,
        "types": pokemon.type_names,
        "abilities": [
            {"name": slot.ability.name, "is_hidden": slot.is_hidden}
            for slot in pokemon.abilities
        ],
        "stats": [
            {"name": stat.stat.name, "label": stat.label, "base_stat": stat.base_stat}
            for stat in pokemon.stats
        ],
        "image_url": pokemon.image_url,
    }
    return json.dumps(pokemon_data, ensure_ascii=False, indent=2)
