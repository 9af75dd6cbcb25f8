"""
MCP Server for the superheroes dataset.

Exposes hero lookup, search and battle comparison as MCP tools that can be
called by any MCP-compatible client.

Usage:
    superheroes mcp-serve

IMPORTANT: MCP uses stdio for JSON-RPC communication.
- NEVER print() or write to stdout - it corrupts the protocol
- All logging must go to stderr
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from .catalog import HeroCatalog
from .comparison import format_head_to_head
from .config import get_data_file
from .models import Hero

# Configure logging to stderr only (stdout is reserved for MCP protocol)
# Use WARNING level to minimize noise during MCP operation
logging.basicConfig(
    level=logging.WARNING,
    format="%(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
    force=True,  # Override any existing config
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("superheroes-mcp")

# Global catalog (initialized lazily)
_catalog: HeroCatalog | None = None


def get_catalog() -> HeroCatalog:
    """Get or create the hero catalog (lazy initialization)."""
    global _catalog
    if _catalog is None:
        _catalog = HeroCatalog(data_file=get_data_file())
        _catalog.initialize()

    return _catalog


def hero_to_markdown(hero: Hero) -> str:
    """Format a hero's record as a markdown block."""
    stats = hero.powerstats
    return (
        f"Here is the data for {hero.name} retrieved using the superheroes MCP:\n"
        f"\n"
        f"• Name: {hero.name}\n"
        f'• Image: <img src="{hero.image}" alt="{hero.name}"/>\n'
        f"• Powerstats:\n"
        f"  • Intelligence: {stats.intelligence}\n"
        f"  • Strength: {stats.strength}\n"
        f"  • Speed: {stats.speed}\n"
        f"  • Durability: {stats.durability}\n"
        f"  • Power: {stats.power}\n"
        f"  • Combat: {stats.combat}"
    )


def _resolve_pair(hero1_name: str, hero2_name: str) -> tuple[Hero, Hero] | str:
    """Look up two heroes by name or id, or explain which one is missing."""
    catalog = get_catalog()

    hero1 = catalog.find_hero_by_name_or_id(hero1_name)
    if hero1 is None:
        return f"Superhero '{hero1_name}' not found."

    hero2 = catalog.find_hero_by_name_or_id(hero2_name)
    if hero2 is None:
        return f"Superhero '{hero2_name}' not found."

    return hero1, hero2


# =============================================================================
# MCP TOOLS
# =============================================================================

@mcp.tool()
def get_superhero(name: str | None = None, id: str | None = None) -> str:
    """
    Get superhero details by name or id.

    Args:
        name: Name of the superhero, case-insensitive (e.g., "a-bomb").
        id: ID of the superhero (e.g., "1").

    Returns:
        Markdown summary of the hero, or an error message if not found.
    """
    if not name and not id:
        return "Provide a superhero name or id."

    hero = get_catalog().find_hero(name=name, hero_id=id)
    if hero is None:
        return f"Superhero '{name or id}' not found."

    return hero_to_markdown(hero)


@mcp.tool()
def list_superheroes() -> str:
    """
    List every superhero in the database.

    Use this to see which heroes are available, then use get_superhero
    for details on a specific one.

    Returns:
        One line per hero: "• Name (ID: id)", in dataset order.
    """
    heroes = get_catalog().get_all_heroes()
    return "\n".join(f"• {hero.name} (ID: {hero.id})" for hero in heroes)


@mcp.tool()
def search_superheroes(query: str, limit: int = 10) -> list[dict]:
    """
    Fuzzy search superheroes by name.

    Matches exact names first, then prefixes, substrings, and finally names
    containing the query's letters in order (e.g. "btmn" finds "Batman").

    Args:
        query: Part of a hero name.
        limit: Maximum number of results to return (default: 10).
               Must be at least 1.

    Returns:
        List of matching heroes (id, name, total_power), best match first.
    """
    return [hero.summary() for hero in get_catalog().search(query, limit=limit)]


@mcp.tool()
def compare_superheroes(hero1_name: str, hero2_name: str) -> str:
    """
    Compare two superheroes and generate a battle story (up to 800 characters).

    Args:
        hero1_name: Name or ID of the first superhero. Wins exact ties.
        hero2_name: Name or ID of the second superhero.

    Returns:
        The battle story, or an error message if a hero is not found.
    """
    pair = _resolve_pair(hero1_name, hero2_name)
    if isinstance(pair, str):
        return pair

    return get_catalog().battle(*pair)


@mcp.tool()
def compare_stats(hero1_name: str, hero2_name: str) -> str:
    """
    Compare two superheroes stat by stat.

    Args:
        hero1_name: Name or ID of the first superhero.
        hero2_name: Name or ID of the second superhero.

    Returns:
        Per-stat winners, categories won, totals and the overall winner.
    """
    pair = _resolve_pair(hero1_name, hero2_name)
    if isinstance(pair, str):
        return pair

    return format_head_to_head(get_catalog().head_to_head(*pair))


# =============================================================================
# SERVER ENTRY POINT
# =============================================================================

def run_mcp_server():
    """Run the MCP server with stdio transport."""
    # Note: No logging here - stdout is reserved for MCP protocol
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_mcp_server()
