"""
CLI Entry Point for the superheroes dataset.

Provides commands for:
- Listing and inspecting heroes
- Fuzzy searching hero names
- Comparing two heroes in battle
- Running the HTTP API and the MCP server
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .catalog import HeroCatalog
from .config import get_data_file, get_settings
from .data_loader import DatasetLoadError
from .models import STAT_ORDER, Hero

# Setup rich console
console = Console()

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(console=console, rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="superheroes",
    help="Superhero dataset explorer and battle narrator",
    add_completion=False,
)


def load_catalog() -> HeroCatalog:
    """Create the catalog and load the dataset, exiting on failure."""
    catalog = HeroCatalog(data_file=get_data_file())
    try:
        with console.status("Loading data..."):
            catalog.initialize()
    except DatasetLoadError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)
    return catalog


def require_hero(catalog: HeroCatalog, value: str) -> Hero:
    """Resolve a name or id, exiting if nothing matches."""
    hero = catalog.find_hero_by_name_or_id(value)
    if hero is None:
        console.print(f"[yellow]Not found: superhero '{value}'[/]")
        raise typer.Exit(1)
    return hero


def heroes_table(heroes: list[Hero], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    for stat in STAT_ORDER:
        table.add_column(stat.value[:3].upper(), justify="right")
    table.add_column("Total", style="bold", justify="right")

    for hero in heroes:
        table.add_row(
            str(hero.id),
            hero.name,
            *(str(hero.powerstats.value(stat)) for stat in STAT_ORDER),
            str(hero.total_power),
        )
    return table


# =============================================================================
# COMMANDS
# =============================================================================

@app.command("list")
def list_heroes():
    """List all superheroes."""
    catalog = load_catalog()
    heroes = list(catalog.get_all_heroes())

    if not heroes:
        console.print("[yellow]No superheroes in the dataset.[/]")
        return

    console.print(heroes_table(heroes, f"Superheroes ({len(heroes)})"))


@app.command()
def show(
    hero: str = typer.Argument(..., help="Hero name or ID"),
    output_json: bool = typer.Option(False, "--json", help="Output raw JSON"),
):
    """Show a single superhero."""
    catalog = load_catalog()
    found = require_hero(catalog, hero)

    if output_json:
        console.print_json(data=found.to_dict())
        return

    console.print(heroes_table([found], found.name))
    if found.image:
        console.print(f"[dim]Image: {found.image}[/]")


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Max results"),
):
    """Fuzzy search superheroes by name."""
    catalog = load_catalog()
    results = catalog.search(query, limit=limit)

    if not results:
        console.print("[yellow]No results found.[/]")
        return

    console.print(heroes_table(results, f"Search Results: '{query}'"))


@app.command()
def compare(
    hero1: str = typer.Argument(..., help="First hero name or ID (wins exact ties)"),
    hero2: str = typer.Argument(..., help="Second hero name or ID"),
    output_json: bool = typer.Option(False, "--json", help="Output raw JSON"),
):
    """Compare two superheroes and tell the story of their battle."""
    catalog = load_catalog()
    first = require_hero(catalog, hero1)
    second = require_hero(catalog, hero2)

    story = catalog.battle(first, second)
    result = catalog.head_to_head(first, second)

    if output_json:
        payload = {"story": story, "head_to_head": result.model_dump(mode="json")}
        console.print_json(data=payload)
        return

    console.print(Panel(story, title=f"{first.name} vs {second.name}"))

    table = Table(title="Head to Head")
    table.add_column("Stat", style="cyan")
    table.add_column(first.name, justify="right")
    table.add_column(second.name, justify="right")
    table.add_column("Winner", style="green")
    for entry in result.stats:
        table.add_row(
            entry.stat.value.capitalize(),
            str(entry.hero1_value),
            str(entry.hero2_value),
            entry.winner or "Tie",
        )
    table.add_row("Total", str(result.hero1_total), str(result.hero2_total), result.overall_winner or "Tie")
    console.print(table)
    console.print(f"Categories won: {result.score} ({result.category_winner or 'Tie'})")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port"),
):
    """Start the HTTP API server."""
    import uvicorn

    from .web_api.main import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(settings=settings),
        host=host or settings.HOST,
        port=port or settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


@app.command("mcp-serve")
def mcp_serve():
    """
    Start the MCP server on stdio.

    Configure an MCP client with:

    {
      "mcpServers": {
        "superheroes": {
          "command": "superheroes",
          "args": ["mcp-serve"]
        }
      }
    }
    """
    from .mcp_server import run_mcp_server
    run_mcp_server()


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
