"""Ordered card containers and specifier resolution."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from goldfish.errors import NotFound
from goldfish.model.commands import ByIndex, ByName, Specifier
from goldfish.model.schema import CardClassification, ZoneType


class Zone:
    """Mutable ordered sequence of cards. Index 0 is the top."""

    def __init__(self, zone_type: ZoneType, cards: Optional[Iterable[CardClassification]] = None):
        self.zone_type = zone_type
        self.cards: list[CardClassification] = list(cards) if cards is not None else []

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[CardClassification]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> CardClassification:
        return self.cards[index]

    def __repr__(self) -> str:
        return f"Zone({self.zone_type.value}, {[c.name for c in self.cards]!r})"

    def append(self, card: CardClassification) -> None:
        self.cards.append(card)

    def extend(self, cards: Iterable[CardClassification]) -> None:
        self.cards.extend(cards)

    def locate(self, spec: Specifier) -> int:
        """Position the specifier refers to, without removing anything.

        Raises:
            NotFound: if nothing matches
        """
        if isinstance(spec, ByIndex):
            if not 0 <= spec.index < len(self.cards):
                raise NotFound(
                    f"no card at position ${spec.index} in {self.zone_type.value} "
                    f"({len(self.cards)} cards)"
                )
            return spec.index

        if isinstance(spec, ByName):
            for i, card in enumerate(self.cards):
                if card.is_named(spec.name):
                    return i
            raise NotFound(f"no card named `{spec.name}` in {self.zone_type.value}")

        raise TypeError(f"not a specifier: {spec!r}")

    def remove_at(self, index: int) -> CardClassification:
        return self.cards.pop(index)

    def remove(self, spec: Specifier) -> CardClassification:
        """Remove and return the card the specifier refers to.

        The zone is left unchanged when this raises NotFound.
        """
        return self.remove_at(self.locate(spec))

    def take_all(self) -> list[CardClassification]:
        """Empty the zone, returning its cards in order."""
        cards, self.cards = self.cards, []
        return cards

    def names(self) -> list[str]:
        return [card.name for card in self.cards]
