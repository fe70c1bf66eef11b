"""Line input with persistent history."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

try:
    import readline
except ImportError:  # Windows without pyreadline
    readline = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

PROMPT = "##> "
HISTORY_LENGTH = 1000


class CommandReader:
    """Reads one command line at a time.

    When `readline` is available, lines are added to its history and the
    history is loaded from / saved to `history_path`.
    """

    def __init__(
        self,
        history_path: Optional[Path] = None,
        input_fn: Callable[[str], str] = input,
        prompt: str = PROMPT,
    ):
        self.history_path = Path(history_path) if history_path is not None else None
        self.input_fn = input_fn
        self.prompt = prompt

    def load_history(self) -> None:
        if readline is None or self.history_path is None or not self.history_path.exists():
            return
        try:
            readline.read_history_file(str(self.history_path))
        except OSError as e:
            logger.warning(f"Could not read history from {self.history_path}: {e}")
        readline.set_history_length(HISTORY_LENGTH)

    def save_history(self) -> None:
        if readline is None or self.history_path is None:
            return
        try:
            self.history_path.parent.mkdir(parents=True, exist_ok=True)
            readline.write_history_file(str(self.history_path))
        except OSError as e:
            logger.warning(f"Could not save history to {self.history_path}: {e}")

    def read(self) -> Optional[str]:
        """Next line, or None when the user quits (EOF or Ctrl-C)."""
        try:
            return self.input_fn(self.prompt)
        except (EOFError, KeyboardInterrupt):
            return None
