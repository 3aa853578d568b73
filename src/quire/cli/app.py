import json
import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quire.core.config import QuireConfig
from quire.core.exceptions import QuireError
from quire.core.logging import setup_logging
from quire.posts.index import build_index
from quire.posts.loader import load_post
from quire.site.builder import build_site, index_payload

app = typer.Typer(name="quire", help="Quire - a small Markdown blog engine")

console = Console()
logger = logging.getLogger(__name__)


def _config(ctx: typer.Context) -> QuireConfig:
    return ctx.obj


def _fail(exc: QuireError) -> NoReturn:
    console.print(f"[bold red]Error:[/] {escape(str(exc))}", soft_wrap=True)
    raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    site_root: Path | None = typer.Option(None, "--site-root", help="Directory holding .quire.toml and the posts."),
    log_level: str | None = typer.Option(None, "--log-level", help="Override the configured log level."),
):
    """
    Load configuration and set up logging for every command.
    """
    try:
        config = QuireConfig.load(site_root)
    except QuireError as exc:
        _fail(exc)
    setup_logging(log_level or config.logging.level, config.logging.file)
    ctx.obj = config


@app.command()
def serve(
    ctx: typer.Context,
    host: str | None = typer.Option(None, "--host", help="Interface to bind (default from config)."),
    port: int | None = typer.Option(None, "--port", help="Port to listen on (default from config)."),
):
    """
    Serve the blog pages and the JSON API.
    """
    import uvicorn

    from quire.web.app import create_app

    config = _config(ctx)
    host = host or config.server.host
    port = port or config.server.port
    logger.info("Starting server on %s:%d", host, port)
    uvicorn.run(create_app(config), host=host, port=port, log_config=None)


@app.command()
def build(
    ctx: typer.Context,
    output: Path | None = typer.Option(None, "--output", "-o", help="Output directory (default from config)."),
):
    """
    Export the blog as a static site.
    """
    config = _config(ctx)
    if output is not None:
        config.paths.output_dir = output.resolve()
    try:
        report = build_site(config)
    except QuireError as exc:
        _fail(exc)
    console.print(f"✅ Built {report.posts} posts and {report.categories} categories")
    console.print(f"Output written to: {report.output_dir}", soft_wrap=True)


@app.command("list")
def list_posts(
    ctx: typer.Context,
    category: str | None = typer.Option(None, "--category", help="Only list posts in this category."),
    as_json: bool = typer.Option(False, "--json", help="Print the index as JSON."),
):
    """
    List posts, newest first.
    """
    config = _config(ctx)
    try:
        posts = build_index(config.paths.abs_posts_dir, category=category)
    except QuireError as exc:
        _fail(exc)

    if as_json:
        typer.echo(index_payload(posts))
        return

    table = Table(title=f"Posts ({len(posts)})")
    table.add_column("Created", style="blue", no_wrap=True)
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Categories", style="yellow")
    table.add_column("Min", justify="right")
    for post in posts:
        table.add_row(
            post.created_date.isoformat(),
            post.slug,
            post.title,
            ", ".join(post.categories),
            str(post.estimated_reading_time_in_mins),
        )
    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Slug of the post (its file name without .md)."),
    html: bool = typer.Option(False, "--html", help="Also print the rendered content."),
):
    """
    Show one post's metadata.
    """
    config = _config(ctx)
    try:
        post = load_post(config.paths.abs_posts_dir, slug)
    except QuireError as exc:
        _fail(exc)

    shown = post if html else post.metadata
    typer.echo(json.dumps(shown.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
