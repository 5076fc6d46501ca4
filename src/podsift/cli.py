"""
Podsift CLI
Command-line interface for serving the API and analyzing podcasts.
"""

import json
import logging
import sys

import click

from . import __version__


def _configure_logging(verbose: bool) -> None:
    from .config import settings

    level = "DEBUG" if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Podsift - podcast transcript analysis"""
    _configure_logging(verbose)


@cli.command()
@click.option("--host", default=None, help="Bind address (default from settings)")
@click.option("--port", "-p", type=int, default=None, help="API server port (default from settings)")
def serve(host: str, port: int):
    """Start the Podsift API server."""
    import uvicorn

    from .config import settings

    host = host or settings.api_host
    port = port or settings.api_port

    click.echo("🎧 Starting Podsift...")
    click.echo(f"   API: http://localhost:{port}/api/process-podcast")
    uvicorn.run("podsift.main:app", host=host, port=port)


@cli.command()
@click.argument("url")
@click.option("--provider", "-p", default=None, help="auto, groq, gemini, ollama, claude (default from settings)")
@click.option("--model", "-m", default=None, help="Model override for an explicit provider")
@click.option("--json", "as_json", is_flag=True, help="Print the full JSON response")
def analyze(url: str, provider: str, model: str, as_json: bool):
    """Transcribe and analyze a podcast URL."""
    from .config import settings
    from .errors import PodsiftError
    from .processor import PodcastProcessor

    processor = PodcastProcessor(settings)

    try:
        result = processor.process(url, provider=provider, model=model)
    except PodsiftError as e:
        click.echo(f"❌ {e.kind.value}: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.model_dump(by_alias=True), indent=2))
        return

    analysis = result.analysis
    llm = result.llm_provider

    click.echo(f"\n🎙️  {analysis.title}")
    click.echo("=" * 60)
    click.echo(analysis.summary)

    click.echo("\nHighlights:")
    for h in analysis.highlights:
        speaker = f" [{h.speaker}]" if h.speaker else ""
        click.echo(f"  {h.timestamp:>8}{speaker} {h.text}")

    click.echo("\nKey takeaways:")
    for takeaway in analysis.key_takeaways:
        click.echo(f"  • {takeaway}")

    label = "mock analysis" if llm.mock else f"{llm.provider} ({llm.model})"
    click.echo(f"\n🤖 {label}: {llm.usage.total_tokens} tokens, ${llm.cost:.4f}")
    click.echo(f"⏱️  {result.processing_time}")


@cli.command()
def providers():
    """Show LLM providers and their availability."""
    from .config import settings
    from .llm.registry import ProviderRegistry

    registry = ProviderRegistry.create(settings)

    click.echo("🤖 LLM Providers")
    click.echo("=" * 40)
    for key, entry in registry.describe().items():
        status = "✅" if entry["available"] else "❌"
        click.echo(f"{status} {key:<8} {entry['name']} - {entry['cost']}")
        for m in entry.get("models", [])[:3]:
            click.echo(f"      {m.get('name')}")


def main():
    cli()


if __name__ == "__main__":
    main()
