"""Goldfish session: parses commands and applies them to the game state."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

import click

from goldfish.carddata.cache import CardCache
from goldfish.carddata.decklist import load_deck
from goldfish.carddata.provider import CardDataProvider, StaticCardTable
from goldfish.carddata.scryfall import ScryfallProvider
from goldfish.errors import SessionNotReady
from goldfish.model.commands import (
    Bounce,
    Command,
    Discard,
    Draw,
    Exile,
    Fetch,
    Help,
    Inspect,
    Load,
    Mill,
    Move,
    Nop,
    Play,
    Print,
    PrintTarget,
    Restart,
    Sacrifice,
    Shuffle,
    Tuck,
    Tutor,
)
from goldfish.model.parser import CommandParser
from goldfish.playtest.display import StateRenderer
from goldfish.playtest.help import HelpText
from goldfish.simulation.state import DEFAULT_HAND_SIZE, GameState

logger = logging.getLogger(__name__)


def app_dir() -> Path:
    """Per-user data directory."""
    return Path(click.get_app_dir("goldfish"))


@dataclass
class SessionConfig:
    """Configuration for a goldfish session."""

    seed: Optional[int] = None
    hand_size: int = DEFAULT_HAND_SIZE
    cache_path: Path = field(default_factory=lambda: app_dir() / "cards.db")
    history_path: Path = field(default_factory=lambda: app_dir() / "history")
    card_table: Optional[Path] = None  # local type table instead of Scryfall
    offline: bool = False

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


def make_provider(config: SessionConfig) -> CardDataProvider:
    """Card-data provider selected by the config."""
    if config.card_table is not None:
        return StaticCardTable.from_file(config.card_table)
    return ScryfallProvider(cache=CardCache.open(config.cache_path), offline=config.offline)


class GoldfishSession:
    """One player's solitaire game, driven by text commands.

    The session starts without a deck; only `load`, `help` and empty lines
    are accepted until a deck has been loaded.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        provider: Optional[CardDataProvider] = None,
        output_fn: Callable[[str], None] = print,
    ):
        """Initialize session.

        Args:
            config: Session settings (defaults if omitted)
            provider: Card-data provider; built from `config` on first load if omitted
            output_fn: Where `print`, `inspect` and `help` write
        """
        self.config = config if config is not None else SessionConfig()
        self.seed = self.config.seed
        self.rng = random.Random(self.seed)
        self.output_fn = output_fn
        self._provider = provider

        self.parser = CommandParser()
        self.renderer = StateRenderer()
        self.help_text = HelpText()

        self.state: Optional[GameState] = None
        self.source: Optional[str] = None

        self.handlers: dict[type, Callable[[Command], bool]] = {
            Nop: self._nop,
            Bounce: self._bounce,
            Discard: self._discard,
            Draw: self._draw,
            Exile: self._exile,
            Fetch: self._fetch,
            Help: self._help,
            Inspect: self._inspect,
            Load: self._load,
            Mill: self._mill,
            Move: self._move,
            Play: self._play,
            Print: self._print,
            Restart: self._restart,
            Sacrifice: self._sacrifice,
            Shuffle: self._shuffle,
            Tuck: self._tuck,
            Tutor: self._tutor,
        }

    @classmethod
    def new(
        cls,
        source: str,
        config: Optional[SessionConfig] = None,
        provider: Optional[CardDataProvider] = None,
        output_fn: Callable[[str], None] = print,
    ) -> "GoldfishSession":
        """Session with a deck loaded from `source` and an opening hand drawn."""
        session = cls(config, provider=provider, output_fn=output_fn)
        session.load(source)
        return session

    @property
    def provider(self) -> CardDataProvider:
        if self._provider is None:
            self._provider = make_provider(self.config)
        return self._provider

    @property
    def is_ready(self) -> bool:
        return self.state is not None

    def _require_state(self) -> GameState:
        if self.state is None:
            raise SessionNotReady("no deck loaded; use `load PATH` first")
        return self.state

    def load(self, source: str) -> None:
        """Replace the game with a fresh one built from a deck list.

        The current game survives if the deck list cannot be loaded. Once the
        deck is built it replaces the old game even if the opening hand
        cannot be drawn in full.
        """
        cards = load_deck(source, self.provider)
        self.state = GameState(cards, rng=self.rng)
        self.source = source
        logger.info(f"Loaded {len(cards)} cards from {source}")
        self.state.start_new_game(self.config.hand_size)

    def exec(self, line: str) -> bool:
        """Parse and run one command line.

        Returns:
            True if the visible game state changed

        Raises:
            GoldfishError: the command could not be parsed or applied; the
                game state is unchanged (draw, mill and restart keep the
                cards moved before the failure)
        """
        return self.execute(self.parser.parse(line))

    def execute(self, command: Command) -> bool:
        if not isinstance(command, (Nop, Help, Load)):
            self._require_state()
        return self.handlers[type(command)](command)

    def render(self) -> str:
        """Full game summary."""
        state = self._require_state()
        state.arrange_battlefield()
        return self.renderer.render(state)

    # Handlers. Each returns whether visible state changed.

    def _nop(self, command: Nop) -> bool:
        return False

    def _help(self, command: Help) -> bool:
        self.output_fn(self.help_text.render())
        return False

    def _inspect(self, command: Inspect) -> bool:
        cards = self._require_state().inspect(command.count)
        self.output_fn(self.renderer.render_inspect(cards))
        return False

    def _print(self, command: Print) -> bool:
        if command.target is PrintTarget.DEFAULT:
            self.output_fn(self.render())
        else:
            self.output_fn(self.renderer.render_zone(self._require_state(), command.target.as_zone_type()))
        return False

    def _load(self, command: Load) -> bool:
        self.load(command.source)
        return True

    def _restart(self, command: Restart) -> bool:
        self._require_state().start_new_game(self.config.hand_size)
        return True

    def _shuffle(self, command: Shuffle) -> bool:
        self._require_state().shuffle()
        return True

    def _draw(self, command: Draw) -> bool:
        self._require_state().draw_n(command.count)
        return True

    def _mill(self, command: Mill) -> bool:
        self._require_state().mill(command.count)
        return True

    def _play(self, command: Play) -> bool:
        self._require_state().play(command.card)
        return True

    def _fetch(self, command: Fetch) -> bool:
        self._require_state().fetch(command.name)
        return True

    def _tutor(self, command: Tutor) -> bool:
        self._require_state().tutor(command.name)
        return True

    def _discard(self, command: Discard) -> bool:
        self._require_state().discard(command.card)
        return True

    def _sacrifice(self, command: Sacrifice) -> bool:
        self._require_state().sacrifice(command.card)
        return True

    def _bounce(self, command: Bounce) -> bool:
        self._require_state().bounce(command.card)
        return True

    def _exile(self, command: Exile) -> bool:
        self._require_state().exile(command.card, command.source)
        return True

    def _tuck(self, command: Tuck) -> bool:
        self._require_state().tuck(command.card, command.source)
        return True

    def _move(self, command: Move) -> bool:
        moved = self._require_state().move_card(command.card, command.source, command.destination)
        return moved is not None
