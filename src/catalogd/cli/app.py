"""Main CLI application."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from catalogd import __version__
from catalogd.core.models.config import Config

# Create main app
app = typer.Typer(
    name="catalogd",
    help="In-memory module and template catalog",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]catalogd[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """catalogd - module and template catalog with live updates."""
    pass


def load_config(file: Path | None) -> Config:
    """Load config from file when given, otherwise from the environment."""
    if file is not None:
        return Config.from_yaml(file)
    return Config()


@app.command()
def serve(
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on"),
    ] = None,
    host: Annotated[
        str | None,
        typer.Option("--host", "-h", help="Host to bind to"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file path"),
    ] = None,
    initial_count: Annotated[
        int | None,
        typer.Option("--initial-count", "-n", help="Entities of each kind to seed"),
    ] = None,
    interval: Annotated[
        float | None,
        typer.Option("--interval", "-i", help="Seconds between generated entities"),
    ] = None,
    no_generator: Annotated[
        bool,
        typer.Option("--no-generator", help="Do not generate activity"),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Start the catalog HTTP server."""
    import uvicorn

    from catalogd.api import create_app
    from catalogd.api.server import CatalogServer
    from catalogd.core.logging import configure_logging

    cfg = load_config(config).with_overrides(
        {
            "server": {"host": host, "port": port},
            "generator": {
                "initial_count": initial_count,
                "interval": interval,
                "enabled": False if no_generator else None,
            },
            "logs": {"level": log_level.upper() if log_level else None},
        }
    )

    configure_logging(cfg.logs)

    console.print("[bold green]Starting catalogd[/bold green]")
    console.print(f"  Host: {cfg.server.host}")
    console.print(f"  Port: {cfg.server.port}")
    console.print()

    application = create_app(config=cfg)
    server = CatalogServer(
        uvicorn.Config(
            application,
            host=cfg.server.host,
            port=cfg.server.port,
            log_level=cfg.logs.level.lower(),
        ),
        store=application.state.store,
    )
    server.run()


@app.command()
def config(
    action: Annotated[
        str,
        typer.Argument(help="Action: show, validate, init"),
    ],
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Config file"),
    ] = None,
) -> None:
    """Manage configuration."""
    if action == "show":
        cfg = Config()
        if file and file.exists():
            cfg = Config.from_yaml(file)

        console.print("[bold]Current Configuration:[/bold]")
        console.print_json(data=cfg.model_dump())

    elif action == "validate":
        if file is None:
            console.print("[red]--file is required for validate[/red]")
            raise typer.Exit(1)
        try:
            Config.from_yaml(file)
            console.print(f"[green]Config file {file} is valid![/green]")
        except Exception as e:
            console.print(f"[red]Config validation failed: {e}[/red]")
            raise typer.Exit(1)

    elif action == "init":
        output_path = file or Path("./config/default.yaml")
        cfg = Config()
        cfg.to_yaml(output_path)
        console.print(f"[green]Config initialized at {output_path}[/green]")

    else:
        console.print(f"[red]Unknown action: {action}[/red]")
        raise typer.Exit(1)


@app.command()
def sample(
    kind: Annotated[
        str,
        typer.Argument(help="Entity kind: module or template"),
    ] = "module",
    count: Annotated[
        int,
        typer.Option("--count", "-n", help="Number of entities to generate"),
    ] = 10,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Random seed"),
    ] = None,
) -> None:
    """Print randomly generated catalog entities."""
    from catalogd.core.generator import EntityFactory
    from catalogd.core.models.entity import EntityKind

    try:
        entity_kind = EntityKind.from_string(kind)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    factory = EntityFactory(random.Random(seed))

    table = Table(title=f"Sample {entity_kind.value}s")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("OS", style="green")
    table.add_column("Source")
    table.add_column("Tags")

    for _ in range(count):
        entity = factory.create(entity_kind)
        table.add_row(
            entity.id,
            entity.name,
            entity.operating_system.value,
            entity.source.value,
            ", ".join(entity.custom_tags),
        )

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
