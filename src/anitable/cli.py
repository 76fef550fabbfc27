"""Command-line interface for the Anissia schedule client."""

import json
import logging
import sys
from typing import Optional

import click

from . import viewer
from .client import AnitableClient
from .config import Config, load_config
from .constants import DaySelector
from .errors import AnitableError, ConfigError
from .models import AnimeRecord, CaptionRecord

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: str):
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def _make_client(ctx: click.Context) -> AnitableClient:
    config: Config = ctx.obj["config"]
    base_url = ctx.obj["base_url"] or config.api.base_url
    return AnitableClient(base_url=base_url)


def _print_schedule(animes: list[AnimeRecord]):
    for anime in animes:
        status = "" if anime.alive else " (결방)"
        click.echo(f"{anime.display_time}  [{anime.id}] {anime.subject} / {anime.genre}{status}")


def _print_captions(captions: list[CaptionRecord]):
    for caption in captions:
        updated = caption.updated_at.strftime("%Y-%m-%d %H:%M:%S")
        click.echo(f"{caption.episode:>6}  {caption.author}  {updated}  {caption.link}")


def _fail(error: AnitableError):
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), envvar="ANITABLE_CONFIG",
              default=None, help="Path to config.yaml")
@click.option("--base-url", default=None, help="Override the API base address")
@click.option("--log-level", type=click.Choice(LOG_LEVELS), default=None, help="Logging level")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], base_url: Optional[str], log_level: Optional[str]):
    """Anissia anime broadcast schedule."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        _fail(e)

    ctx.obj = {"config": config, "base_url": base_url}
    # The viewer owns the screen, so it only logs warnings unless asked otherwise
    default_level = "WARNING" if ctx.invoked_subcommand == "view" else config.log_level
    setup_logging(log_level or default_level)


@main.command("list")
@click.option(
    "--day",
    type=click.Choice([day.value for day in DaySelector]),
    default=None,
    help="Weekday or category (default: today)",
)
@click.option("--json", "as_json", is_flag=True, help="Print raw wire JSON")
@click.pass_context
def list_command(ctx: click.Context, day: Optional[str], as_json: bool):
    """List anime airing on a day."""
    selector = DaySelector(day) if day else DaySelector.today()
    try:
        with _make_client(ctx) as client:
            animes = client.fetch_schedule(selector)
    except AnitableError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps([anime.to_wire() for anime in animes], ensure_ascii=False, indent=2))
    else:
        _print_schedule(animes)


@main.command()
@click.argument("anime_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print raw wire JSON")
@click.pass_context
def captions(ctx: click.Context, anime_id: int, as_json: bool):
    """List subtitle releases for an anime."""
    try:
        with _make_client(ctx) as client:
            caps = client.fetch_captions(anime_id)
    except AnitableError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps([cap.to_wire() for cap in caps], ensure_ascii=False, indent=2))
    else:
        _print_captions(caps)


@main.command()
@click.pass_context
def view(ctx: click.Context):
    """Browse the weekly schedule interactively."""
    config: Config = ctx.obj["config"]
    with _make_client(ctx) as client:
        viewer.run(client, config.viewer.initial_day())


if __name__ == "__main__":
    main()
