"""Card and zone types shared by the parser, the engine and the display."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from goldfish.errors import LoadFailure, UnknownZone


class CardType(Enum):
    """Card type tags."""

    ARTIFACT = "artifact"
    CREATURE = "creature"
    ENCHANTMENT = "enchantment"
    INSTANT = "instant"
    LAND = "land"
    PLANESWALKER = "planeswalker"
    SORCERY = "sorcery"

    @property
    def is_permanent(self) -> bool:
        return self in PERMANENT_TYPES


PERMANENT_TYPES = frozenset({
    CardType.ARTIFACT,
    CardType.CREATURE,
    CardType.ENCHANTMENT,
    CardType.LAND,
    CardType.PLANESWALKER,
})


class ZoneType(Enum):
    """Card containers. Values are the names the player types and sees."""

    BATTLEFIELD = "battlefield"
    DECK = "deck"
    EXILE = "exile"
    GRAVEYARD = "graveyard"
    HAND = "hand"


CARD_TYPES_BY_NAME: dict[str, CardType] = {t.value: t for t in CardType}
ZONES_BY_NAME: dict[str, ZoneType] = {z.value: z for z in ZoneType}


def parse_zone(token: str) -> ZoneType:
    """Look up a zone by its exact (case-sensitive) name."""
    try:
        return ZONES_BY_NAME[token]
    except KeyError:
        raise UnknownZone(token) from None


def parse_card_type(token: str) -> CardType:
    """Look up a card type by name, ignoring case and surrounding space."""
    try:
        return CARD_TYPES_BY_NAME[token.strip().lower()]
    except KeyError:
        raise LoadFailure(f"`{token.strip()}` is not a known card type") from None


def normalize_name(name: str) -> str:
    """Comparison form of a card name."""
    return name.strip().lower()


class CardClassification(ABC):
    """What the engine needs to know about a card.

    Implementations carry a ``name`` attribute and answer the three
    classification questions; the engine never looks any deeper.
    """

    name: str

    @abstractmethod
    def is_permanent(self) -> bool:
        """Stays on the battlefield once played."""
        pass

    @abstractmethod
    def is_creature(self) -> bool:
        pass

    @abstractmethod
    def is_land(self) -> bool:
        pass

    def is_named(self, name: str) -> bool:
        """Match the full name, or one face of a "Front // Back" name."""
        target = normalize_name(name)
        if normalize_name(self.name) == target:
            return True
        return any(normalize_name(face) == target for face in self.name.split("//"))


@dataclass(frozen=True)
class Card(CardClassification):
    """Card classified from a local type table."""

    name: str
    types: frozenset[CardType] = field(default_factory=frozenset)

    @classmethod
    def of(cls, name: str, *types: CardType) -> "Card":
        return cls(name=name, types=frozenset(types))

    @classmethod
    def from_type_names(cls, name: str, type_names: Iterable[str]) -> "Card":
        return cls(name=name, types=frozenset(parse_card_type(t) for t in type_names))

    def is_permanent(self) -> bool:
        return any(t.is_permanent for t in self.types)

    def is_creature(self) -> bool:
        return CardType.CREATURE in self.types

    def is_land(self) -> bool:
        return CardType.LAND in self.types

    def __str__(self) -> str:
        return self.name
