"""Terminal display for zones."""

from __future__ import annotations

from itertools import groupby
from typing import Sequence

from goldfish.model.schema import CardClassification, ZoneType
from goldfish.simulation.state import (
    BAND_CREATURES,
    BAND_LANDS,
    BAND_PERMANENTS,
    GameState,
    battlefield_band,
)

NO_CARDS = "[no cards]"

BAND_NAMES = {
    BAND_CREATURES: "creatures",
    BAND_PERMANENTS: "permanents",
    BAND_LANDS: "lands",
}


def format_indexed(cards: Sequence[CardClassification], start: int = 0) -> str:
    """`$0 Forest, $1 Opt` style listing."""
    return ", ".join(f"${start + i} {card.name}" for i, card in enumerate(cards))


class StateRenderer:
    """Renders game state as text."""

    indent = "    "

    def render(self, state: GameState) -> str:
        """Battlefield bands, hand, and zone counts.

        Expects the battlefield to be arranged already (see
        `GameState.arrange_battlefield`); indices are zone positions.
        """
        lines: list[str] = ["battlefield:"]
        lines.extend(self._battlefield_lines(state))
        lines.append(self._hand_line(state))
        for zone_type in (ZoneType.DECK, ZoneType.GRAVEYARD, ZoneType.EXILE):
            lines.append(f"{self.indent}{zone_type.value}: [{state.count(zone_type)} cards]")
        return "\n".join(lines)

    def _battlefield_lines(self, state: GameState) -> list[str]:
        lines: list[str] = []
        indexed = list(enumerate(state.battlefield))

        # Runs of equal band; index is the card's position in the whole zone.
        for band, run in groupby(indexed, key=lambda item: battlefield_band(item[1])):
            entries = ", ".join(f"${i} {card.name}" for i, card in run)
            lines.append(f"{self.indent}{BAND_NAMES[band]}: {entries}")

        if lines:
            lines.append("")
        return lines

    def _hand_line(self, state: GameState) -> str:
        hand = state.count(ZoneType.HAND)
        if not hand:
            return f"{self.indent}hand: {NO_CARDS}"
        return f"{self.indent}hand: {format_indexed(state.hand.cards)}"

    def render_zone(self, state: GameState, zone_type: ZoneType) -> str:
        """Numbered listing of one zone."""
        lines = [f"{zone_type.value}:"]
        if not state.count(zone_type):
            lines.append(f"{self.indent}{NO_CARDS}")
        else:
            for i, card in enumerate(state.zone(zone_type)):
                lines.append(f"{self.indent}${i} {card.name}")
        return "\n".join(lines)

    def render_inspect(self, cards: Sequence[CardClassification]) -> str:
        """Top-of-deck listing for `inspect`."""
        if not cards:
            return "nothing to show"
        lines = ["top of deck:"]
        for i, card in enumerate(cards):
            lines.append(f"{self.indent}${i} {card.name}")
        return "\n".join(lines)
