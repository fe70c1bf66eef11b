"""Interactive goldfishing session."""

from goldfish.playtest.display import StateRenderer, format_indexed
from goldfish.playtest.help import HelpText
from goldfish.playtest.input import CommandReader
from goldfish.playtest.session import GoldfishSession, SessionConfig

__all__ = [
    "StateRenderer",
    "format_indexed",
    "HelpText",
    "CommandReader",
    "GoldfishSession",
    "SessionConfig",
]
