"""Budget file storage operations.

Budget files are read whole at the start of a session and written whole
at the end of it. Nothing is ever appended to or patched in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .codec import decode_budget, encode_budget
from .exceptions import DecodeError
from .logging_config import get_logger
from .models import Budget

logger = get_logger("storage")


class BudgetFileStorage:
    """Reads and writes one budget file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Budget:
        """Load the budget from disk.

        Raises:
            FileNotFoundError: If the file does not exist
            DecodeError: If the file is not a valid budget
        """
        try:
            with self.path.open('r', encoding='utf-8', newline='') as handle:
                text = handle.read()
        except UnicodeDecodeError as exc:
            raise DecodeError(f"file is not valid UTF-8: {exc.reason}", exc.start) from exc
        budget = decode_budget(text)
        logger.info("Loaded %d budget parts from %s", len(budget), self.path)
        return budget

    def save(self, budget: Budget) -> None:
        """Write the budget to disk, replacing any previous contents.

        Raises:
            OSError: If the file cannot be written
        """
        payload = encode_budget(budget)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open('w', encoding='utf-8', newline='') as handle:
                handle.write(payload)
        except OSError as e:
            raise OSError(f"Failed to save budget to {self.path}: {e}") from e
        logger.info("Saved %d budget parts to %s", len(budget), self.path)
