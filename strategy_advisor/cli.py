"""Strategy Advisor CLI."""

import json
import os
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _build_advisor(provider: Optional[str] = None, static: bool = False):
    """Wire an AdvisorAgent from the environment."""
    from .agents.advisor import AdvisorAgent
    from .agents.factory import ProviderFactory, ACTIVE_PROVIDER_ENV
    from .config import AdvisorConfig
    from .content.client import SanityClient
    from .content.fallback import StaticContentStore
    from .content.utils import is_sanity_configured
    from .logging import setup_logging

    settings = AdvisorConfig.from_env()
    setup_logging(debug=settings.debug, enabled=settings.enable_logging)

    if static or not is_sanity_configured(settings):
        store = StaticContentStore()
    else:
        store = SanityClient.from_config(settings)

    config = None
    if provider:
        config = ProviderFactory.resolve_default_config({**os.environ, ACTIVE_PROVIDER_ENV: provider})

    return AdvisorAgent(content_store=store, config=config, settings=settings)


def _print_response(response) -> None:
    conf = response.confidence
    conf_style = "green" if conf >= 0.8 else "yellow" if conf >= 0.5 else "red"

    console.print(f"\n[bold]{response.provider}[/bold] [dim]({response.cost})[/dim]")
    console.print(f"  Confidence: [{conf_style}]{conf:.0%}[/{conf_style}]\n")
    console.print(response.message, markup=False)

    if response.recommendations:
        table = Table(title="Recommended Services")
        table.add_column("Service")
        table.add_column("Why")
        table.add_column("Relevance")
        table.add_column("Timeline", style="dim")
        for rec in response.recommendations:
            table.add_row(rec.title, rec.description, f"{rec.relevance:.0%}", rec.timeline or "-")
        console.print()
        console.print(table)

    if response.next_steps:
        console.print("\n[bold]Next Steps:[/bold]")
        for step in response.next_steps:
            console.print(f"  • {step}", markup=False)


@click.group()
def main():
    """Strategy Advisor - service recommendations for site visitors."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"strategy-advisor v{__version__}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def providers(as_json: bool):
    """List the providers the advisor can switch between."""
    from .agents.factory import ProviderFactory

    available = ProviderFactory.list_available()

    if as_json:
        click.echo(json.dumps(available, indent=2))
        return

    table = Table(title="Providers")
    table.add_column("Type", style="cyan")
    table.add_column("Name")
    table.add_column("Cost")
    for item in available:
        table.add_row(item["type"], item["name"], item["cost"])
    console.print(table)


@main.command()
@click.option("--provider", "-p", default=None, help="Provider type (defaults to ADVISOR_PROVIDER)")
def current(provider: Optional[str]):
    """Show the provider the advisor would use."""
    advisor = _build_advisor(provider)
    info = advisor.get_current_provider()

    status = "[green]available[/green]" if info["isAvailable"] else "[red]not configured[/red]"
    console.print(f"{info['name']} ({info['cost']}) - {status}")


@main.command()
@click.argument("text")
@click.option("--provider", "-p", default=None, help="Provider type (openai, openrouter, anthropic, mock)")
@click.option("--industry", default=None, help="Visitor's industry")
@click.option("--budget", default=None, help="Visitor's budget range")
@click.option("--timeline", default=None, help="Visitor's timeline")
@click.option("--static", is_flag=True, help="Use the built-in service catalog instead of the CMS")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def ask(
    text: str,
    provider: Optional[str],
    industry: Optional[str],
    budget: Optional[str],
    timeline: Optional[str],
    static: bool,
    as_json: bool,
):
    """Ask the advisor about a business need."""
    from .errors import AdvisorError, APOLOGY_MESSAGE

    advisor = _build_advisor(provider, static=static)
    context = {"user_industry": industry, "user_budget": budget, "user_timeline": timeline}

    if not as_json:
        console.print(f"[blue]Analyzing with {advisor.provider.name}...[/blue]")

    try:
        response = advisor.analyze_need(text, context)
    except AdvisorError as e:
        console.print(f"[red]{APOLOGY_MESSAGE}[/red]")
        console.print(f"[dim]{type(e).__name__}: {e}[/dim]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
        return

    _print_response(response)


@main.command()
@click.option("--provider", "-p", default=None, help="Provider type (defaults to ADVISOR_PROVIDER)")
@click.option("--static", is_flag=True, help="Use the built-in service catalog instead of the CMS")
def flow(provider: Optional[str], static: bool):
    """Walk through the guided questions and get a roadmap."""
    from .agents.flow import AdvisorFlow, INDUSTRIES, BUDGET_RANGES, TIMELINE_OPTIONS
    from .errors import AdvisorError, APOLOGY_MESSAGE

    advisor = _build_advisor(provider, static=static)
    state = AdvisorFlow()

    console.print("\n[bold]How Can We Help You?[/bold]")
    console.print("Let's find the perfect solutions for your project.\n")

    state.next_step()
    state.needs = click.prompt("Describe your project or business need")
    state.next_step()
    state.industry = click.prompt("Industry", type=click.Choice(INDUSTRIES), show_choices=True)
    state.next_step()
    state.budget = click.prompt("Budget", type=click.Choice(BUDGET_RANGES), show_choices=True)
    state.next_step()
    state.timeline = click.prompt("Timeline", type=click.Choice(TIMELINE_OPTIONS), show_choices=True)

    try:
        response = state.submit(advisor)
    except AdvisorError as e:
        console.print(f"[red]{APOLOGY_MESSAGE}[/red]")
        console.print(f"[dim]{type(e).__name__}: {e}[/dim]")
        sys.exit(1)

    _print_response(response)


def _print_pages(data: dict) -> None:
    """Render the site pages as plain text."""
    from .content.utils import format_block_content

    home = data["home_page"]
    if home is not None:
        console.print(f"\n[bold]{home.title or 'Home'}[/bold]")
        if home.description:
            console.print(home.description, markup=False)

    console.print(f"\n[bold]Services ({len(data['services'])})[/bold]")
    for service in data["services"]:
        console.print(f"  • {service.title} - {service.description or ''}", markup=False)

    for key in ("about_page", "contact_page"):
        page = data[key]
        if page is None:
            continue
        console.print(f"\n[bold]{page.title or key}[/bold]")
        text = format_block_content(page.content)
        if text:
            console.print(text, markup=False)


@main.command()
@click.option("--pages", is_flag=True, help="Also render the page text the site shows")
def content(pages: bool):
    """Check which documents the content store holds."""
    from .config import AdvisorConfig
    from .content.client import SanityClient
    from .content.fallback import fetch_all_data
    from .content.queries import DOCUMENT_TYPES
    from .content.utils import is_sanity_configured
    from .errors import ContentStoreError

    settings = AdvisorConfig.from_env()
    if not is_sanity_configured(settings):
        console.print("[yellow]Sanity is not configured (set SANITY_PROJECT_ID)[/yellow]")
        if pages:
            console.print("[dim]Showing built-in content[/dim]")
            _print_pages(fetch_all_data())
        return

    client = SanityClient.from_config(settings)
    console.print(f"[blue]Checking content in {settings.sanity_project_id}/{settings.sanity_dataset}[/blue]")

    try:
        for doc_type in DOCUMENT_TYPES:
            try:
                documents = client.fetch_by_type(doc_type)
            except ContentStoreError as e:
                console.print(f"  [red]{doc_type}: {e}[/red]")
                continue

            style = "green" if documents else "yellow"
            console.print(f"  [{style}]{doc_type}: {len(documents)} documents found[/{style}]")
            for doc in documents:
                console.print(f"    - {doc.get('title') or doc.get('_id')}", markup=False)

        if pages:
            _print_pages(fetch_all_data(client))
    finally:
        client.close()


@main.command()
@click.option("--api-key", envvar="OPENROUTER_API_KEY", required=True, help="OpenRouter API key")
@click.option("--search", "-s", default=None, help="Only show models whose id contains this")
def models(api_key: str, search: Optional[str]):
    """List models available on OpenRouter."""
    from .agents.providers.openrouter_provider import OpenRouterProvider

    available = OpenRouterProvider.list_models(api_key)
    if search:
        available = [m for m in available if search.lower() in m["id"].lower()]

    if not available:
        console.print("[yellow]No models found[/yellow]")
        return

    table = Table(title=f"OpenRouter Models ({len(available)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Cost")
    for model in available:
        table.add_row(model["id"], model["name"], model["cost"])
    console.print(table)


if __name__ == "__main__":
    main()
