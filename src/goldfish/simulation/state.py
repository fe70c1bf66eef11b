"""Mutable multi-zone game state and its transitions.

Every transition either applies fully or raises and leaves the zones as they
were. The exceptions are `draw_n`, `mill` and `start_new_game`, which are
sequences of single-card moves: moves made before the failing one stay.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from goldfish.errors import DeckExhausted, IllegalDestination
from goldfish.model.commands import ByIndex, ByName, Specifier
from goldfish.model.schema import CardClassification, ZoneType
from goldfish.simulation.zones import Zone

logger = logging.getLogger(__name__)

DEFAULT_HAND_SIZE = 7

# Display bands for the battlefield, lowest first.
BAND_CREATURES = 1
BAND_PERMANENTS = 2
BAND_LANDS = 3


def battlefield_band(card: CardClassification) -> int:
    """Sort key grouping creatures, then other permanents, then lands."""
    if card.is_creature():
        return BAND_CREATURES
    if card.is_land():
        return BAND_LANDS
    return BAND_PERMANENTS


class GameState:
    """All zones of a single player's game."""

    def __init__(
        self,
        cards: Optional[Iterable[CardClassification]] = None,
        rng: Optional[random.Random] = None,
    ):
        """Create a state with every card in the deck, in the given order.

        Args:
            cards: Initial deck contents, top first
            rng: Random source for shuffles (a fresh unseeded one if omitted)
        """
        self.rng = rng if rng is not None else random.Random()
        self.zones: dict[ZoneType, Zone] = {}
        if cards is not None:
            self.zone(ZoneType.DECK).extend(cards)

    def zone(self, zone_type: ZoneType) -> Zone:
        """Zone of the given type, created empty on first access."""
        zone = self.zones.get(zone_type)
        if zone is None:
            zone = Zone(zone_type)
            self.zones[zone_type] = zone
        return zone

    @property
    def deck(self) -> Zone:
        return self.zone(ZoneType.DECK)

    @property
    def hand(self) -> Zone:
        return self.zone(ZoneType.HAND)

    @property
    def battlefield(self) -> Zone:
        return self.zone(ZoneType.BATTLEFIELD)

    @property
    def graveyard(self) -> Zone:
        return self.zone(ZoneType.GRAVEYARD)

    @property
    def exile_zone(self) -> Zone:
        return self.zone(ZoneType.EXILE)

    def count(self, zone_type: ZoneType) -> int:
        zone = self.zones.get(zone_type)
        return len(zone) if zone is not None else 0

    def total_cards(self) -> int:
        return sum(len(zone) for zone in self.zones.values())

    def snapshot(self) -> dict[ZoneType, list[str]]:
        """Card names per zone, for comparisons and debugging."""
        return {zt: self.zone(zt).names() for zt in ZoneType}

    # Core transition

    def move_card(self, card: Specifier, source: ZoneType, destination: ZoneType) -> CardClassification | None:
        """Move one card between zones, appending it to the destination.

        Moving within the same zone does nothing, except in the deck, where
        the card goes to the bottom.

        Raises:
            NotFound: specifier matches nothing in `source`
            IllegalDestination: a non-permanent sent to the battlefield
        """
        if source == destination and destination != ZoneType.DECK:
            return None

        from_zone = self.zone(source)
        index = from_zone.locate(card)

        if destination == ZoneType.BATTLEFIELD and not from_zone[index].is_permanent():
            raise IllegalDestination(
                f"`{from_zone[index].name}` is not a permanent and cannot go to the battlefield"
            )

        moved = from_zone.remove_at(index)
        self.zone(destination).append(moved)
        logger.debug(f"Moved {moved.name} from {source.value} to {destination.value}")
        return moved

    def _place_played(self, card: CardClassification) -> None:
        """Permanents land on the battlefield, everything else in the graveyard."""
        if card.is_permanent():
            self.battlefield.append(card)
        else:
            self.graveyard.append(card)

    # Drawing

    def draw(self) -> CardClassification:
        """Draw the top card of the deck."""
        if not self.deck:
            raise DeckExhausted("the deck is empty")
        return self.move_card(ByIndex(0), ZoneType.DECK, ZoneType.HAND)

    def draw_n(self, n: int) -> None:
        """Draw `n` cards, keeping the ones drawn before the deck ran out."""
        for drawn in range(n):
            if not self.deck:
                raise DeckExhausted(f"the deck ran out after drawing {drawn} of {n} cards")
            self.draw()

    def mill(self, n: int) -> None:
        """Put the top `n` cards of the deck into the graveyard."""
        for milled in range(n):
            if not self.deck:
                raise DeckExhausted(f"the deck ran out after milling {milled} of {n} cards")
            self.move_card(ByIndex(0), ZoneType.DECK, ZoneType.GRAVEYARD)

    def inspect(self, n: int) -> list[CardClassification]:
        """Top `n` cards of the deck, without moving them."""
        return list(self.deck.cards[:n])

    # Casting and searching

    def play(self, card: Specifier) -> CardClassification:
        """Play a card from hand: permanents to the battlefield, spells to the graveyard."""
        played = self.hand.remove(card)
        self._place_played(played)
        logger.debug(f"Played {played.name}")
        return played

    def fetch(self, name: str) -> CardClassification:
        """Put a named card from the deck into play, then shuffle."""
        fetched = self.deck.remove(ByName(name))
        self._place_played(fetched)
        self.shuffle()
        logger.debug(f"Fetched {fetched.name}")
        return fetched

    def tutor(self, name: str) -> CardClassification:
        """Put a named card from the deck into hand, then shuffle."""
        found = self.move_card(ByName(name), ZoneType.DECK, ZoneType.HAND)
        self.shuffle()
        return found

    def discard(self, card: Specifier) -> None:
        self.move_card(card, ZoneType.HAND, ZoneType.GRAVEYARD)

    def sacrifice(self, card: Specifier) -> None:
        self.move_card(card, ZoneType.BATTLEFIELD, ZoneType.GRAVEYARD)

    def bounce(self, card: Specifier) -> None:
        self.move_card(card, ZoneType.BATTLEFIELD, ZoneType.HAND)

    def exile(self, card: Specifier, source: ZoneType) -> None:
        self.move_card(card, source, ZoneType.EXILE)

    def tuck(self, card: Specifier, source: ZoneType) -> None:
        """Put a card on the bottom of the deck."""
        self.move_card(card, source, ZoneType.DECK)

    # Whole-state operations

    def shuffle(self) -> None:
        """Randomize deck order. Other zones are untouched."""
        self.rng.shuffle(self.deck.cards)

    def start_new_game(self, hand_size: int = DEFAULT_HAND_SIZE) -> None:
        """Return every card to the deck, shuffle, and draw an opening hand."""
        collected: list[CardClassification] = []
        for zone_type in ZoneType:
            collected.extend(self.zone(zone_type).take_all())

        self.deck.extend(collected)
        self.shuffle()
        logger.debug(f"New game with {len(self.deck)} cards")
        self.draw_n(hand_size)

    def arrange_battlefield(self) -> None:
        """Stable-sort the battlefield into creature, permanent and land bands."""
        self.battlefield.cards.sort(key=battlefield_band)
