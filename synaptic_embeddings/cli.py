"""Command-line interface for Synaptic Embeddings."""

import asyncio
import json
import sys
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from .config.logging import cli_logger as logger
from .config.logging import setup_logging
from .config.settings import Settings
from .core.exceptions import ConfigurationError, SynapticError
from .embeddings import create_from_environment, create_service, get_available_providers
from .embeddings.base import EmbeddingService
from .models.embedding import ServiceConfig

app = typer.Typer(
    name="synaptic-embeddings",
    help="Synaptic Embeddings - pluggable embedding generation",
    add_completion=False,
)
console = Console()


def _load_settings(debug: bool) -> Optional[Settings]:
    """Load settings from the environment and configure logging.

    Returns None when the environment holds invalid values; logging is then
    configured from defaults so the caller can still fall back.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        fields = ", ".join(str(error["loc"][0]) for error in e.errors() if error["loc"])
        console.print(f"[yellow]Ignoring invalid environment settings: {fields}[/yellow]")
        settings = None

    logging_settings = settings or Settings.model_construct()
    if debug:
        logging_settings.DEBUG = True
        logging_settings.LOG_LEVEL = "DEBUG"
    setup_logging(logging_settings)
    return settings


def _resolve_service(
    settings: Optional[Settings],
    provider: Optional[str],
    model: Optional[str] = None,
    endpoint: Optional[str] = None,
    dimensions: Optional[int] = None,
) -> EmbeddingService:
    """Use the explicit provider when given, otherwise the environment."""
    if provider is None:
        return create_from_environment(settings)

    if settings is None:
        raise ConfigurationError(
            "Invalid environment settings; fix them before selecting a provider"
        )

    return create_service(
        ServiceConfig(
            provider=provider,
            model=model or settings.EMBEDDING_MODEL,
            dimensions=dimensions or settings.EMBEDDING_DIMENSIONS,
            api_key=settings.EMBEDDING_API_KEY,
            api_endpoint=endpoint or settings.EMBEDDING_API_ENDPOINT,
            timeout=settings.EMBEDDING_REQUEST_TIMEOUT,
        )
    )


@app.command("providers")
def list_providers() -> None:
    """List registered embedding providers."""
    for name in get_available_providers():
        console.print(name)


@app.command("info")
def show_info(
    provider: Optional[str] = typer.Option(
        None, "--provider", "-p", help="Provider name (defaults to environment)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Show model information for the resolved embedding service."""
    settings = _load_settings(debug)
    try:
        service = _resolve_service(settings, provider)
    except SynapticError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    info = service.get_model_info()
    console.print(f"[green]Provider:[/green] {service.provider_name}")
    console.print(f"[green]Model:[/green] {info.name}")
    console.print(f"[green]Dimensions:[/green] {info.dimensions}")
    console.print(f"[green]Version:[/green] {info.version}")


@app.command("embed")
def embed_text(
    text: str = typer.Argument(..., help="Text to embed"),
    provider: Optional[str] = typer.Option(
        None, "--provider", "-p", help="Provider name (defaults to environment)"
    ),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model identifier"),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", "-e", help="API endpoint URL"),
    dimensions: Optional[int] = typer.Option(
        None, "--dimensions", "-d", min=1, help="Declared embedding dimensions"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full vector as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Generate an embedding for TEXT."""
    settings = _load_settings(debug)
    try:
        service = _resolve_service(settings, provider, model, endpoint, dimensions)
        embedding = asyncio.run(service.generate_embedding(text))
    except SynapticError as e:
        logger.error("Embedding command failed", error=str(e))
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if as_json:
        typer.echo(json.dumps(embedding))
        return

    info = service.get_model_info()
    preview = ", ".join(f"{value:.4f}" for value in embedding[:5])
    console.print(f"[green]{service.provider_name}[/green] {info.name} ({len(embedding)} dimensions)")
    console.print(f"[{preview}, ...]", markup=False)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"Synaptic Embeddings version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
