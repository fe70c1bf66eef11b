"""Card-data providers: resolve a card name to its classification."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Mapping

from goldfish.errors import IoFailure, LoadFailure
from goldfish.model.schema import Card, CardClassification, CardType, normalize_name

logger = logging.getLogger(__name__)


class CardDataProvider(ABC):
    """Source of card classifications."""

    @abstractmethod
    def resolve(self, name: str) -> CardClassification:
        """Classify a card by name.

        Raises:
            LoadFailure: the name is not a known card
            IoFailure: the backing store could not be reached
        """
        pass


class StaticCardTable(CardDataProvider):
    """Provider backed by a fixed name -> types table.

    File format, one card per line::

        # comment
        Opt: instant
        Dryad Arbor: land, creature
    """

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: dict[str, Card] = {}
        for card in cards:
            self.add(card)

    @classmethod
    def from_mapping(cls, table: Mapping[str, Iterable[CardType]]) -> "StaticCardTable":
        return cls(Card(name=name, types=frozenset(types)) for name, types in table.items())

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticCardTable":
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise IoFailure(f"cannot read card table {path}: {e}") from e

        table = cls(parse_card_table(text.splitlines(), source=str(path)))
        logger.info(f"Loaded {len(table)} cards from {path}")
        return table

    def add(self, card: Card) -> None:
        self._cards[normalize_name(card.name)] = card

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, name: str) -> bool:
        return normalize_name(name) in self._cards

    def resolve(self, name: str) -> CardClassification:
        try:
            return self._cards[normalize_name(name)]
        except KeyError:
            raise LoadFailure(f"`{name}` is not in the card table") from None


def parse_card_table(lines: Iterable[str], source: str = "<card table>") -> list[Card]:
    """Parse `Name: type, type` lines."""
    cards: list[Card] = []

    for line_no, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        parts = [part.strip() for part in stripped.split(":")]
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise LoadFailure(
                f"{source}:{line_no}: expected a line in the form of 'Opt: instant', "
                f"but got '{stripped}'"
            )

        name, type_list = parts
        try:
            cards.append(Card.from_type_names(name, type_list.split(",")))
        except LoadFailure as e:
            raise LoadFailure(f"{source}:{line_no}: {e}") from e

    return cards
