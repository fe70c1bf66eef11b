"""Turns one line of player input into a command.

Grammar summary (tokens are whitespace runs, the first one is the verb):

    bounce|discard|play|sac|sacrifice SPEC
    exile|tuck SPEC from ZONE
    move SPEC from ZONE to ZONE
    draw|inspect [N]        mill N
    fetch|load|tutor TEXT
    print [exile|graveyard]
    help|restart|shuffle

SPEC is either a card name (spaces allowed) or `$N` for the card at 0-based
position N. `to` and `from` are found by scanning from the right, so a card
name may contain either word as long as the real clause comes last.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from goldfish.errors import (
    InvalidCount,
    InvalidIndex,
    MalformedClause,
    UnknownVerb,
    UnknownZone,
)
from goldfish.model.commands import (
    Bounce,
    ByIndex,
    ByName,
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
    Specifier,
    Tuck,
    Tutor,
)
from goldfish.model.schema import ZoneType, parse_zone

_DIGITS = re.compile(r"[0-9]+")


def _parse_count(verb: str, token: str) -> int:
    if not _DIGITS.fullmatch(token):
        raise InvalidCount(verb, token)
    return int(token)


class CommandParser:
    """Parses a single command line. Holds no state between lines."""

    def __init__(self) -> None:
        self._verbs: dict[str, Callable[[str, list[str]], Command]] = {
            "bounce": self._parse_bounce,
            "discard": self._parse_discard,
            "draw": self._parse_counted,
            "exile": self._parse_exile,
            "fetch": self._parse_fetch,
            "help": self._parse_no_args,
            "inspect": self._parse_counted,
            "load": self._parse_load,
            "mill": self._parse_mill,
            "move": self._parse_move,
            "play": self._parse_play,
            "print": self._parse_print,
            "restart": self._parse_no_args,
            "sac": self._parse_sacrifice,
            "sacrifice": self._parse_sacrifice,
            "shuffle": self._parse_no_args,
            "tuck": self._parse_tuck,
            "tutor": self._parse_tutor,
        }

    @property
    def verbs(self) -> list[str]:
        return sorted(self._verbs)

    def parse(self, line: str) -> Command:
        """Parse a line into a command.

        Raises:
            ParseError: (one of its subclasses) naming what was wrong.
        """
        parts = line.split()
        if not parts:
            return Nop()

        verb, rest = parts[0], parts[1:]
        handler = self._verbs.get(verb)
        if handler is None:
            raise UnknownVerb(verb)
        return handler(verb, rest)

    # Sub-grammars

    def parse_specifier(self, parts: list[str]) -> Specifier:
        """`$N` selects by position, anything else is a card name."""
        if not parts:
            raise MalformedClause("missing card specifier")

        spec = " ".join(parts)
        if not spec.startswith("$"):
            return ByName(spec)

        if not _DIGITS.fullmatch(spec[1:]):
            raise InvalidIndex(spec)
        return ByIndex(int(spec[1:]))

    def _split_off_zone(self, verb: str, parts: list[str], keyword: str) -> ZoneType:
        """Remove `keyword ZONE` from the end of `parts` and return the zone.

        The rightmost occurrence of `keyword` is used. `parts` is truncated
        in place to the tokens before it.
        """
        clause = "source" if keyword == "from" else "destination"

        position: Optional[int] = None
        for i in range(len(parts) - 1, -1, -1):
            if parts[i] == keyword:
                position = i
                break

        if position is None:
            raise MalformedClause(
                f"`{verb}` needs to specify {clause} with `{keyword}`", keyword=keyword
            )

        rest = parts[position + 1:]
        del parts[position:]

        if not rest:
            raise MalformedClause(f"`{verb}` needs {clause} after `{keyword}`", keyword=keyword)
        if len(rest) > 1:
            raise MalformedClause(f"`{verb}` needs a single-word {clause}", keyword=keyword)

        return parse_zone(rest[0])

    # Verbs

    def _parse_bounce(self, verb: str, parts: list[str]) -> Command:
        return Bounce(self.parse_specifier(parts))

    def _parse_discard(self, verb: str, parts: list[str]) -> Command:
        return Discard(self.parse_specifier(parts))

    def _parse_play(self, verb: str, parts: list[str]) -> Command:
        return Play(self.parse_specifier(parts))

    def _parse_sacrifice(self, verb: str, parts: list[str]) -> Command:
        return Sacrifice(self.parse_specifier(parts))

    def _parse_counted(self, verb: str, parts: list[str]) -> Command:
        command = Draw if verb == "draw" else Inspect
        if not parts:
            return command(1)
        if len(parts) > 1:
            raise MalformedClause(f"`{verb}` needs a single-word count")
        return command(_parse_count(verb, parts[0]))

    def _parse_mill(self, verb: str, parts: list[str]) -> Command:
        if len(parts) != 1:
            raise MalformedClause(f"`{verb}` needs a single-word count")
        return Mill(_parse_count(verb, parts[0]))

    def _parse_exile(self, verb: str, parts: list[str]) -> Command:
        parts = list(parts)
        source = self._split_off_zone(verb, parts, "from")
        return Exile(self.parse_specifier(parts), source)

    def _parse_tuck(self, verb: str, parts: list[str]) -> Command:
        parts = list(parts)
        source = self._split_off_zone(verb, parts, "from")
        return Tuck(self.parse_specifier(parts), source)

    def _parse_move(self, verb: str, parts: list[str]) -> Command:
        parts = list(parts)
        destination = self._split_off_zone(verb, parts, "to")
        source = self._split_off_zone(verb, parts, "from")
        return Move(self.parse_specifier(parts), source, destination)

    def _free_text(self, verb: str, parts: list[str]) -> str:
        if not parts:
            raise MalformedClause(f"`{verb}` needs a name")
        return " ".join(parts)

    def _parse_fetch(self, verb: str, parts: list[str]) -> Command:
        return Fetch(self._free_text(verb, parts))

    def _parse_load(self, verb: str, parts: list[str]) -> Command:
        return Load(self._free_text(verb, parts))

    def _parse_tutor(self, verb: str, parts: list[str]) -> Command:
        return Tutor(self._free_text(verb, parts))

    def _parse_print(self, verb: str, parts: list[str]) -> Command:
        if not parts:
            return Print(PrintTarget.DEFAULT)
        if len(parts) > 1:
            raise MalformedClause("`print` either needs no target or a one-word target")
        if parts[0] == PrintTarget.EXILE.value:
            return Print(PrintTarget.EXILE)
        if parts[0] == PrintTarget.GRAVEYARD.value:
            return Print(PrintTarget.GRAVEYARD)
        raise UnknownZone(parts[0])

    def _parse_no_args(self, verb: str, parts: list[str]) -> Command:
        if parts:
            raise MalformedClause(f"`{verb}` shouldn't have any words following it")
        if verb == "help":
            return Help()
        if verb == "restart":
            return Restart()
        return Shuffle()


_default_parser = CommandParser()


def parse_command(line: str) -> Command:
    """Parse with a shared parser instance."""
    return _default_parser.parse(line)
