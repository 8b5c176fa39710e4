"""PageInfo CLI - entry-point for analysing pages and running the API.

Usage:
    pageinfo --help
    pageinfo analyze https://example.com/
    pageinfo serve --port 8080
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from pageinfo.config import configure_logging, settings

app = typer.Typer(
    name="pageinfo",
    help="Fetch a web page and report its structure and link health.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(logging.DEBUG if verbose else settings.log_level)


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------
@app.command("analyze")
def analyze_cmd(
    url: str = typer.Argument(..., help="URL of the page to analyse."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print the JSON output."),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", min=1, help="Maximum simultaneous link probes."
    ),
    deadline: Optional[float] = typer.Option(
        None, "--deadline", min=0.0, help="Overall link-probing budget in seconds."
    ),
) -> None:
    """Fetch URL and print its analysis as JSON."""
    from pageinfo.analyzer import AnalysisError, analyze
    from pageinfo.scraper import FetchError, fetch_page

    try:
        page = fetch_page(url)
        result = analyze(page.content, page.url, concurrency=concurrency, deadline=deadline)
    except (FetchError, AnalysisError) as exc:
        typer.echo(f"[analyze] {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2 if pretty else None))


# ---------------------------------------------------------------------------
# HTTP service
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8080, help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the HTTP API under uvicorn."""
    import uvicorn

    typer.echo(f"[serve] Listening on http://{host}:{port}/api/v1/info")
    uvicorn.run("pageinfo.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
