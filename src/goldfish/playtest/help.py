"""Command reference shown by `help`."""

from __future__ import annotations

from goldfish.model.schema import ZONES_BY_NAME

# (usage, description)
COMMAND_HELP: list[tuple[str, str]] = [
    ("draw [N]", "draw N cards (default 1)"),
    ("play CARD", "play a card from hand"),
    ("discard CARD", "put a card from hand into the graveyard"),
    ("sac CARD", "put a permanent into the graveyard"),
    ("bounce CARD", "return a permanent to hand"),
    ("exile CARD from ZONE", "exile a card"),
    ("tuck CARD from ZONE", "put a card on the bottom of the deck"),
    ("move CARD from ZONE to ZONE", "move a card between any two zones"),
    ("fetch NAME", "put a card from the deck into play, then shuffle"),
    ("tutor NAME", "put a card from the deck into hand, then shuffle"),
    ("mill N", "put the top N cards of the deck into the graveyard"),
    ("inspect [N]", "look at the top N cards of the deck (default 1)"),
    ("print [exile|graveyard]", "show the game, or list a zone"),
    ("shuffle", "shuffle the deck"),
    ("restart", "shuffle everything back and draw a new hand"),
    ("load PATH", "start over with another deck list"),
    ("help", "show this message"),
]


class HelpText:
    """Builds the `help` output."""

    def render(self) -> str:
        width = max(len(usage) for usage, _ in COMMAND_HELP)
        lines = ["commands:"]
        for usage, description in COMMAND_HELP:
            lines.append(f"    {usage.ljust(width)}  {description}")
        lines.append("")
        lines.append("CARD is a card name or $N for the card at position N.")
        lines.append(f"ZONE is one of: {', '.join(sorted(ZONES_BY_NAME))}.")
        return "\n".join(lines)
