"""Interactive CLI for TruthGuard credibility analysis using Typer and Rich."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from truthguard.config.logging import get_logger
from truthguard.config.settings import APP_VERSION, settings
from truthguard.pipeline.analysis_pipeline import CredibilityPipeline
from truthguard.pipeline.errors import ErrorCode, error_envelope

# Initialize CLI app
app = typer.Typer(
    help="TruthGuard CLI - credibility scoring for text and sources",
    add_completion=False,
)

console = Console()
logger = get_logger("cli")

CLASSIFICATION_STYLES = {
    "Reliable": "green",
    "Suspicious": "yellow",
    "Fake": "red",
}


def _fail(envelope: dict[str, Any]) -> None:
    """Print a failure envelope and exit with status 1."""
    console.print_json(data=envelope)
    raise typer.Exit(1)


def _finish(result: dict[str, Any], as_json: bool) -> bool:
    """Handle failure and --json output; return True if nothing is left to render."""
    if not result.get("success"):
        logger.warning("Request failed", error=result.get("error"))
        _fail(result)
    if as_json:
        console.print_json(data=result)
        return True
    return False


def _parse_weights(raw: Optional[str]) -> Optional[dict[str, Any]]:
    if raw is None:
        return None
    try:
        weights = json.loads(raw)
    except json.JSONDecodeError:
        weights = None
    if not isinstance(weights, dict):
        _fail(error_envelope(ErrorCode.INVALID_INPUT, "Weights must be a JSON object"))
    return weights


@app.command()
def analyze(
    text: str = typer.Argument(..., help="Text to analyse"),
    url: Optional[list[str]] = typer.Option(None, "--url", "-u", help="Source URL (repeatable)"),
    weights: Optional[str] = typer.Option(None, "--weights", help="JSON weight overrides"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw report"),
) -> None:
    """
    Run the full credibility analysis on TEXT.

    URLs found in TEXT are analysed together with any --url values.
    """
    overrides = _parse_weights(weights)
    logger.info("Analyze command invoked", text_length=len(text), urls=len(url or []))

    result = asyncio.run(CredibilityPipeline().analyze(text, url or [], overrides))
    if _finish(result, as_json):
        return

    analysis = result["analysis"]
    style = CLASSIFICATION_STYLES.get(analysis["classification"], "white")
    console.print(Panel(
        analysis["explanation"],
        title=f"[bold {style}]{analysis['classification']}[/bold {style}] "
              f"{analysis['credibility_score']}/100",
        border_style=style,
    ))

    breakdown = analysis["breakdown"]
    weighted = breakdown["weighted_scores"]
    table = Table(title="Score Breakdown", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=22)
    table.add_column("Score", style="green", justify="right")
    table.add_column("Weight", style="yellow", justify="right")
    table.add_row("Content analysis", str(breakdown["content_analysis_score"]), f"{weighted['content_weight']:.2f}")
    table.add_row("Fact verification", str(breakdown["fact_verification_score"]), f"{weighted['fact_weight']:.2f}")
    table.add_row("Source reliability", str(breakdown["source_reliability_score"]), f"{weighted['source_weight']:.2f}")
    console.print(table)

    risk = analysis["risk_assessment"]
    console.print(f"\n[bold]Risk:[/bold] {risk['level']}  [bold]Confidence:[/bold] {analysis['confidence_level']}%")
    for factor in risk["factors"]:
        console.print(f"  [red]•[/red] {factor}")
    for recommendation in risk["recommendations"]:
        console.print(f"  [green]→[/green] {recommendation}")


@app.command("fact-check")
def fact_check(
    text: str = typer.Argument(..., help="Text whose claims should be verified"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw report"),
) -> None:
    """Extract and verify the factual claims in TEXT."""
    result = asyncio.run(CredibilityPipeline().fact_check(text))
    if _finish(result, as_json):
        return

    facts = result["fact_check"]
    table = Table(
        title=f"Fact Check ({facts['overall_credibility']}% credibility)",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Claim", style="white")
    table.add_column("Status", style="cyan", width=12)
    table.add_column("Confidence", style="yellow", justify="right")
    for claim in facts["detailed_results"]:
        table.add_row(claim["claim"], claim["status"], f"{claim['confidence']:.2f}")
    console.print(table)
    console.print(
        f"[dim]{facts['total_claims']} claims: {facts['verified_claims']} verified, "
        f"{facts['disputed_claims']} disputed, {facts['unverified_claims']} unverified[/dim]"
    )


@app.command("source-check")
def source_check(
    urls: list[str] = typer.Argument(..., help="URLs to assess"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw report"),
) -> None:
    """Assess the reliability of each URL's domain."""
    result = asyncio.run(CredibilityPipeline().source_check(urls=urls))
    if _finish(result, as_json):
        return

    sources = result["source_analysis"]
    table = Table(title="Source Reliability", show_header=True, header_style="bold magenta")
    table.add_column("Domain", style="cyan")
    table.add_column("Score", style="green", justify="right")
    table.add_column("Bias", style="yellow")
    table.add_column("Factual", style="yellow")
    for source in sources["detailed_sources"]:
        table.add_row(
            source["domain"],
            str(source["reliability_score"]),
            source["bias_rating"],
            source["factual_reporting"],
        )
    console.print(table)
    console.print(
        f"[bold]Average:[/bold] {sources['average_reliability']}  "
        f"[bold]Risk:[/bold] {sources['risk_assessment']}"
    )


@app.command()
def batch(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one text per line"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw report"),
) -> None:
    """Score every line of FILE as a separate text."""
    texts = file.read_text(encoding="utf-8").splitlines()
    result = asyncio.run(CredibilityPipeline().batch(texts))
    if _finish(result, as_json):
        return

    table = Table(title="Batch Results", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Preview", style="white")
    table.add_column("Score", style="green", justify="right")
    table.add_column("Classification", style="cyan")
    for item in result["detailed_results"]:
        if item["success"]:
            table.add_row(str(item["index"]), item["text_preview"], str(item["credibility_score"]), item["classification"])
        else:
            table.add_row(str(item["index"]), item["text_preview"], "-", f"[red]{item['error']}[/red]")
    console.print(table)

    summary = result["batch_summary"]
    console.print(
        f"[bold]Average:[/bold] {summary['average_credibility_score']}  "
        f"[bold]OK:[/bold] {summary['successful_analyses']}/{summary['total_texts']}  "
        f"[dim]{summary['processing_time_ms']} ms[/dim]"
    )


@app.command()
def status() -> None:
    """
    Display analyzer status and configuration.

    Shows each analyzer's state, request limits and logging settings.
    """
    logger.info("Displaying system status")
    health = CredibilityPipeline().health()

    table = Table(title="TruthGuard Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=20)
    table.add_column("Status", style="green", width=15)
    table.add_column("Details", style="yellow")

    python_version = f"Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    table.add_row("Environment", "✓ Ready", f"{python_version}, TruthGuard {APP_VERSION}")

    for name, service in health["services"].items():
        table.add_row(name, f"✓ {service['status']}", ", ".join(service["capabilities"]))

    limits = (
        f"Text: {settings.max_text_length:,} chars, Batch: {settings.max_batch_texts}, "
        f"URLs: {settings.max_urls_per_request}"
    )
    table.add_row("Limits", "✓ Active", limits)

    seed = "unseeded" if settings.random_seed is None else f"seed {settings.random_seed}"
    table.add_row("Simulation", "✓ Active", seed)

    log_details = f"Level: {settings.log_level}, Format: {settings.log_format}"
    table.add_row("Logging", "✓ Active", log_details)

    console.print(table)


if __name__ == "__main__":
    app()
