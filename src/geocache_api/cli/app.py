"""Typer CLI root application with serve and one-shot lookup commands."""

import asyncio

import typer
from pydantic import ValidationError

from geocache_api.core.config import get_settings
from geocache_api.core.logging import setup_logging

app = typer.Typer(name="geocache-api", help="Cached forward and reverse geocoding")


@app.callback()
def _main_callback() -> None:
    """Load settings and initialize logging for all CLI commands."""
    try:
        settings = get_settings()
    except ValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        typer.echo(f"Error: invalid or missing configuration: {fields}", err=True)
        raise typer.Exit(code=1) from e
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "geocache_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def forward(
    address: str = typer.Argument(..., help="Address to resolve"),  # noqa: B008
) -> None:
    """Resolve an address to coordinates and print ``latitude,longitude``."""
    coordinate = asyncio.run(_forward(address))
    typer.echo(f"{coordinate.latitude},{coordinate.longitude}")


@app.command()
def reverse(
    latitude: float = typer.Argument(..., min=-90, max=90, help="WGS84 latitude"),  # noqa: B008
    longitude: float = typer.Argument(..., min=-180, max=180, help="WGS84 longitude"),  # noqa: B008
) -> None:
    """Resolve a coordinate pair to an address and print it."""
    typer.echo(asyncio.run(_reverse(latitude, longitude)))


def _build_resolver():
    from geocache_api.lib.geocoder import CacheRegistry, get_provider
    from geocache_api.services.geocoding_service import GeocodingResolver

    settings = get_settings()
    try:
        provider = get_provider(settings)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    return GeocodingResolver(provider, CacheRegistry())


async def _forward(address: str):
    from geocache_api.lib.geocoder.base import GeocodingError

    resolver = _build_resolver()
    try:
        return await resolver.resolve_forward(address)
    except GeocodingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


async def _reverse(latitude: float, longitude: float) -> str:
    from geocache_api.lib.geocoder.base import GeocodingError

    resolver = _build_resolver()
    try:
        return await resolver.resolve_reverse(latitude, longitude)
    except GeocodingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
