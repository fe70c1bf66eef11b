"""Exception hierarchy for command parsing, zone transitions and deck loading."""

from __future__ import annotations


class GoldfishError(Exception):
    """Base class for every error a command can surface to the user."""

    pass


class ParseError(GoldfishError):
    """A command line could not be turned into a command."""

    pass


class UnknownVerb(ParseError):
    """First token does not name a known command."""

    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f"`{verb}` is not a known verb")


class UnknownZone(ParseError):
    """Token does not name a known zone."""

    def __init__(self, zone: str):
        self.zone = zone
        super().__init__(f"`{zone}` is not a known location")


class InvalidIndex(ParseError):
    """`$` specifier not followed by a non-negative integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"`{text}` is not numeric after the `$`")


class InvalidCount(ParseError):
    """Numeric argument is not a non-negative integer."""

    def __init__(self, verb: str, text: str):
        self.verb = verb
        self.text = text
        super().__init__(f"`{text}` is not a valid numeric count for `{verb}`")


class MalformedClause(ParseError):
    """Wrong number of tokens, or a missing `to`/`from` clause.

    `keyword` names the clause at fault when there is one.
    """

    def __init__(self, message: str, keyword: str | None = None):
        self.keyword = keyword
        super().__init__(message)


class NotFound(GoldfishError):
    """Specifier resolved to no card in the zone."""

    pass


class IllegalDestination(GoldfishError):
    """Card cannot be placed in the requested zone."""

    pass


class DeckExhausted(GoldfishError):
    """Not enough cards left in the deck."""

    pass


class SessionNotReady(GoldfishError):
    """Command needs a loaded deck."""

    pass


class LoadFailure(GoldfishError):
    """Bad deck-list or card-table line, or a card name that cannot be resolved."""

    pass


class IoFailure(GoldfishError):
    """Reading a file, the card cache or the card-data service failed."""

    pass
