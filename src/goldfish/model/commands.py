"""Command values produced by the parser.

Every verb maps to exactly one frozen dataclass below. The set is closed:
`ALL_COMMANDS` lists every class and the session checks its dispatch table
against it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from goldfish.model.schema import ZoneType


@dataclass(frozen=True)
class ByName:
    """Pick the first card with this name."""

    name: str


@dataclass(frozen=True)
class ByIndex:
    """Pick the card at this 0-based position."""

    index: int


Specifier = Union[ByName, ByIndex]


class PrintTarget(Enum):
    """What `print` shows."""

    DEFAULT = "default"
    EXILE = "exile"
    GRAVEYARD = "graveyard"

    def as_zone_type(self) -> Optional[ZoneType]:
        if self is PrintTarget.EXILE:
            return ZoneType.EXILE
        if self is PrintTarget.GRAVEYARD:
            return ZoneType.GRAVEYARD
        return None


@dataclass(frozen=True)
class Nop:
    pass


@dataclass(frozen=True)
class Bounce:
    card: Specifier


@dataclass(frozen=True)
class Discard:
    card: Specifier


@dataclass(frozen=True)
class Draw:
    count: int = 1


@dataclass(frozen=True)
class Exile:
    card: Specifier
    source: ZoneType


@dataclass(frozen=True)
class Fetch:
    name: str


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Inspect:
    count: int = 1


@dataclass(frozen=True)
class Load:
    source: str


@dataclass(frozen=True)
class Mill:
    count: int


@dataclass(frozen=True)
class Move:
    card: Specifier
    source: ZoneType
    destination: ZoneType


@dataclass(frozen=True)
class Play:
    card: Specifier


@dataclass(frozen=True)
class Print:
    target: PrintTarget = PrintTarget.DEFAULT


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class Sacrifice:
    card: Specifier


@dataclass(frozen=True)
class Shuffle:
    pass


@dataclass(frozen=True)
class Tuck:
    card: Specifier
    source: ZoneType


@dataclass(frozen=True)
class Tutor:
    name: str


Command = Union[
    Nop, Bounce, Discard, Draw, Exile, Fetch, Help, Inspect, Load, Mill,
    Move, Play, Print, Restart, Sacrifice, Shuffle, Tuck, Tutor,
]

ALL_COMMANDS: tuple[type, ...] = (
    Nop, Bounce, Discard, Draw, Exile, Fetch, Help, Inspect, Load, Mill,
    Move, Play, Print, Restart, Sacrifice, Shuffle, Tuck, Tutor,
)

# Commands that only read state.
READ_ONLY_COMMANDS: tuple[type, ...] = (Nop, Help, Inspect, Print)
