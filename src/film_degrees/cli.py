import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from film_degrees.config import SearchConfig
from film_degrees.exceptions import ProviderError, ProviderFatalError
from film_degrees.logging_config import setup_logging
from film_degrees.models import PersonNode
from film_degrees.providers import TMDBClient
from film_degrees.search import SearchResult, SearchStatus, find_path

app = typer.Typer(help="Degrees of separation between actors via shared films.")
console = Console()
logger = logging.getLogger(__name__)


async def resolve_person(client: TMDBClient, name: str) -> Optional[PersonNode]:
    """Most relevant acting match for ``name``, if any."""
    people = await client.search_people(name)
    if not people:
        return None
    return people[0].to_node()


def render_result(result: SearchResult) -> None:
    table = Table(title=f"{result.degrees} degree(s) of separation")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("TMDB id", justify="right")
    for index, node in enumerate(result.path):
        style = "bold" if node.type == "person" else "dim"
        table.add_row(str(index), node.type, node.name, str(node.id), style=style)
    console.print(table)


async def run_path_async(name_a: str, name_b: str, timeout: Optional[float], config: SearchConfig) -> int:
    async with TMDBClient() as client:
        try:
            origin_a = await resolve_person(client, name_a)
            origin_b = await resolve_person(client, name_b)
        except ProviderError as e:
            console.print(f"[red]Person lookup failed:[/red] {e.message}")
            return 2

        for name, origin in ((name_a, origin_a), (name_b, origin_b)):
            if origin is None:
                console.print(f"[red]No actor found for '{name}'[/red]")
                return 2

        console.print(f"Searching [bold]{origin_a.name}[/bold] -> [bold]{origin_b.name}[/bold]...")
        try:
            result = await find_path(client, origin_a, origin_b, timeout=timeout, config=config)
        except ProviderFatalError as e:
            console.print(f"[red]Provider unavailable:[/red] {e.message}")
            return 2

    if result.status == SearchStatus.TIMED_OUT:
        console.print("[yellow]Search timed out. Try again, or pick a better known pair.[/yellow]")
        return 1
    if result.path is None:
        console.print(f"[yellow]No connection found within {config.max_degrees} degrees. Try different actors.[/yellow]")
        if result.failed_lookups:
            console.print(f"({result.failed_lookups} lookups failed along the way)")
        return 1

    render_result(result)
    return 0


@app.command()
def path(
    name_a: str = typer.Argument(..., help="First actor's name"),
    name_b: str = typer.Argument(..., help="Second actor's name"),
    timeout: Optional[float] = typer.Option(None, "--timeout", "-t", help="Search timeout in seconds."),
    max_degrees: Optional[int] = typer.Option(None, "--max-degrees", "-d", help="Maximum degrees to search."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level."),
):
    """
    Find a chain of shared films between two actors.
    """
    setup_logging(level=log_level)
    config = SearchConfig.from_env()
    if max_degrees is not None:
        config = SearchConfig(**{**config.model_dump(), "max_degrees": max_degrees})
    raise typer.Exit(code=asyncio.run(run_path_async(name_a, name_b, timeout, config)))


async def run_search_async(name: str) -> int:
    async with TMDBClient() as client:
        try:
            people = await client.search_people(name)
        except ProviderError as e:
            console.print(f"[red]Search failed:[/red] {e.message}")
            return 2

    table = Table(title=f"Actors matching '{name}'")
    table.add_column("TMDB id", justify="right")
    table.add_column("Name")
    table.add_column("Popularity", justify="right")
    for person in people[:8]:
        table.add_row(str(person.id), person.name, f"{person.popularity:.1f}")
    console.print(table)
    return 0


@app.command()
def search(
    name: str = typer.Argument(..., help="Actor name to look up"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level."),
):
    """
    List actors matching a name.
    """
    setup_logging(level=log_level)
    raise typer.Exit(code=asyncio.run(run_search_async(name)))


if __name__ == "__main__":
    app()
