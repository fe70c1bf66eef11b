"""CLI entry point: interactive goldfishing."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from goldfish.errors import GoldfishError
from goldfish.playtest.input import CommandReader
from goldfish.playtest.session import GoldfishSession, SessionConfig, app_dir

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Log to stderr so rendered state on stdout stays clean."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def run_repl(session: GoldfishSession, reader: CommandReader) -> None:
    """Read, execute and render until the user quits."""
    reader.load_history()
    try:
        while True:
            line = reader.read()
            if line is None:
                click.echo("")
                break

            try:
                changed = session.exec(line)
            except GoldfishError as e:
                click.echo(f"Error: {e}", err=True)
                continue

            if changed:
                click.echo(session.render())
    finally:
        reader.save_history()


@click.command()
@click.argument("deck_list", type=click.Path(), required=False)
@click.option("--seed", type=int, default=None, envvar="GOLDFISH_SEED", help="Random seed for reproducible shuffles")
@click.option(
    "--card-table",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    envvar="GOLDFISH_CARD_TABLE",
    help="Local 'Name: type, type' table to use instead of Scryfall",
)
@click.option(
    "--cache",
    "cache_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="GOLDFISH_CACHE",
    help="Card cache database (default: in the user data directory)",
)
@click.option(
    "--history",
    "history_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="GOLDFISH_HISTORY",
    help="Command history file (default: in the user data directory)",
)
@click.option("--offline", is_flag=True, envvar="GOLDFISH_OFFLINE", help="Only use cached card data")
@click.option(
    "--hand-size",
    type=click.IntRange(min=0),
    default=7,
    show_default=True,
    envvar="GOLDFISH_HAND_SIZE",
    help="Opening hand size",
)
@click.option("-v", "--verbose", is_flag=True, envvar="GOLDFISH_VERBOSE", help="Verbose logging")
def main(
    deck_list: str | None,
    seed: int | None,
    card_table: Path | None,
    cache_path: Path | None,
    history_path: Path | None,
    offline: bool,
    hand_size: int,
    verbose: bool,
):
    """Goldfish a deck: draw, play and move cards between zones.

    DECK_LIST is optional - use the `load` command to pick one later.
    """
    setup_logging(verbose)

    config = SessionConfig(
        seed=seed,
        hand_size=hand_size,
        cache_path=cache_path or app_dir() / "cards.db",
        history_path=history_path or app_dir() / "history",
        card_table=card_table,
        offline=offline,
    )
    logger.debug(f"Seed: {config.seed} (use --seed {config.seed} to replay)")

    session = GoldfishSession(config, output_fn=click.echo)

    if deck_list:
        try:
            session.load(deck_list)
        except GoldfishError as e:
            if session.state is None:
                raise click.ClickException(str(e))
            click.echo(f"Error: {e}", err=True)
        click.echo(session.render())
    else:
        click.echo("No deck loaded. Type `load PATH` or `help`.")

    run_repl(session, CommandReader(config.history_path))


if __name__ == "__main__":
    main()
