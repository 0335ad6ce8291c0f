"""CLI interface for Blogstage.

Command-line tool for serving Markdown blog posts.
"""

import sys
from pathlib import Path

import click

from blogstage.config import Config
from blogstage.core.templates import TemplateLoadError
from blogstage.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """Blogstage - Markdown posts on a shared stage."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover blogstage.toml)",
)
@click.option(
    "--content-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Content directory with templates and posts/ (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config and PORT)",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Fail on missing templates, or fall back to built-in defaults (default: strict)",
)
@click.option(
    "--log-level",
    default=None,
    help="Log level, e.g. debug, info, warning (overrides config and LOG_LEVEL)",
)
def serve(
    config_path: Path | None,
    content_dir: Path | None,
    host: str | None,
    port: int | None,
    strict: bool | None,
    log_level: str | None,
) -> None:
    """Start the blog server."""
    from blogstage.server import create_app, run_server

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            content_dir=content_dir,
            strict=strict,
            log_level=log_level,
        )
        configure_logging(config.logging.level)
        # Load templates up front so a strict failure exits before binding.
        app = create_app(config)
    except (FileNotFoundError, ValueError, TemplateLoadError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Content directory: {config.content.content_dir}")
    click.echo(f"Templates: {'strict' if config.content.strict else 'lenient'}")

    run_server(config, app)


if __name__ == "__main__":
    cli()
