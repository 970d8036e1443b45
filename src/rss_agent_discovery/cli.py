"""Command-line interface for rss-agent-discovery."""

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import Optional

import click
import typer
from click.core import ParameterSource
from rich.console import Console
from rich.logging import RichHandler

from rss_agent_discovery import __version__
from rss_agent_discovery.config import AppConfig
from rss_agent_discovery.orchestrator import Orchestrator, RunReport

EXIT_FEEDS_FOUND = 0
EXIT_NO_FEEDS = 1
EXIT_ERROR = 2

_EPILOG = """
[bold]Exit codes[/bold]

  0  One or more feeds found (or --help/--version)

  1  No feeds found

  2  Error occurred

[bold]Output schema[/bold]

  {"success": true, "results": [{"url": "https://example.com",
  "feeds": [{"url": "https://example.com/atom", "title": "Blog", "type": "atom"}],
  "error": null, "diagnostics": []}]}
"""

app = typer.Typer(
    name="rss-agent-discovery",
    help="Discover RSS feeds from websites for AI agent consumption. JSON-only output.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# stdout is reserved for the JSON report
err_console = Console(stderr=True)


def parse_blog_paths(value: str) -> list[str]:
    """Split a comma- or pipe-separated list of section paths."""
    return [p.strip() for p in re.split(r"[,|]", value) if p.strip()]


def exit_code_for(report: RunReport) -> int:
    if report.total_feeds > 0:
        return EXIT_FEEDS_FOUND
    if report.has_errors:
        return EXIT_ERROR
    return EXIT_NO_FEEDS


def version_callback(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _urls_callback(values: Optional[list[str]]) -> list[str]:
    if not values:
        raise typer.BadParameter("No URLs provided. Use --help for usage information.")
    for url in values:
        if not url.startswith(("http://", "https://")):
            raise typer.BadParameter(f"Expected an absolute http(s):// URL, got: {url}")
    return values


def _blog_paths_callback(value: Optional[str]) -> Optional[str]:
    if value is not None and not parse_blog_paths(value):
        raise typer.BadParameter("--blog-paths requires a value")
    return value


def configure_logging(verbose: bool) -> None:
    """Send package logs to stderr when verbose; stay silent otherwise."""
    logger = logging.getLogger("rss_agent_discovery")
    if not verbose or any(isinstance(h, RichHandler) for h in logger.handlers):
        return
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def build_config(
    ctx: click.Context,
    config_file: Optional[Path],
    skip_blogs: bool,
    max_blogs: int,
    blog_paths: Optional[str],
    timeout: int,
    verbose: bool,
) -> AppConfig:
    """Merge an optional TOML config with the options given on the command line.

    Options left at their defaults do not override values from the file.
    """
    try:
        config = AppConfig.from_toml(config_file) if config_file else AppConfig()
    except ValueError as e:
        # covers TOML syntax errors and pydantic validation errors
        raise typer.BadParameter(str(e), param_hint="--config")

    def given(name: str) -> bool:
        return ctx.get_parameter_source(name) != ParameterSource.DEFAULT

    discovery = config.discovery.model_copy()
    fetcher = config.fetcher.model_copy()

    if given("skip_blogs") or not config_file:
        discovery.skip_blog_sections = skip_blogs
    if given("max_blogs") or not config_file:
        discovery.max_blog_sections = max_blogs
    if blog_paths is not None:
        discovery.blog_section_paths = parse_blog_paths(blog_paths)
    if given("timeout") or not config_file:
        discovery.timeout_ms = timeout
        fetcher.timeout_ms = timeout

    verbose = verbose or config.verbose or discovery.verbose
    discovery.verbose = verbose

    return AppConfig.model_validate(
        {
            "discovery": discovery.model_dump(),
            "fetcher": fetcher.model_dump(),
            "verbose": verbose,
        }
    )


@app.command(epilog=_EPILOG)
def main(
    ctx: typer.Context,
    urls: Optional[list[str]] = typer.Argument(
        None,
        help="One or more website URLs to scan for RSS feeds",
        callback=_urls_callback,
        show_default=False,
    ),
    skip_blogs: bool = typer.Option(
        False,
        "--no-blogs",
        "--skip-blogs",
        help="Skip blog subdirectory scanning",
    ),
    max_blogs: int = typer.Option(
        5,
        "--max-blogs",
        min=1,
        help="Maximum number of blog subdirectories to scan",
    ),
    blog_paths: Optional[str] = typer.Option(
        None,
        "--blog-paths",
        callback=_blog_paths_callback,
        help="Comma- or pipe-separated custom blog paths to try (e.g. '/blog,/news' or '/blog|/news')",
    ),
    timeout: int = typer.Option(
        10000,
        "--timeout",
        min=1,
        help="Timeout per URL in milliseconds",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="TOML config file; command-line options take precedence",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug info to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Print version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """
    Discover RSS and Atom feeds for one or more websites.

    Examples:

        rss-agent-discovery https://example.com

        rss-agent-discovery https://site1.com https://site2.com

        rss-agent-discovery --timeout 15000 https://example.com

        rss-agent-discovery --blog-paths '/blog,/updates' https://example.com | jq
    """
    config = build_config(ctx, config_file, skip_blogs, max_blogs, blog_paths, timeout, verbose)
    configure_logging(config.verbose)

    orchestrator = Orchestrator(config)

    try:
        report = asyncio.run(orchestrator.run(urls))
    except Exception as e:
        typer.echo(json.dumps({"success": False, "error": str(e), "results": []}, indent=2))
        if config.verbose:
            err_console.print_exception()
        raise typer.Exit(EXIT_ERROR)

    typer.echo(report.to_json())
    raise typer.Exit(exit_code_for(report))


if __name__ == "__main__":
    app()
