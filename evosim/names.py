"""Name list loading for newly created creatures.

The name file is plain text with one candidate per line; blank lines are
ignored. It is read once, up front, and every later request is a random
index pick into the in-memory list.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, Union

from evosim.config.creatures import FALLBACK_NAME
from evosim.exceptions import MissingNameResourceError
from evosim.protocols import RandomSource

logger = logging.getLogger(__name__)


def load_names(path: Union[str, Path]) -> List[str]:
    """Read the name list from ``path``.

    Args:
        path: Text file with one name per line

    Returns:
        Stripped, non-empty names in file order

    Raises:
        MissingNameResourceError: If the file does not exist or cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise MissingNameResourceError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MissingNameResourceError(path, reason=f"could not be read: {e}") from e
    return [line.strip() for line in text.splitlines() if line.strip()]


class NameProvider:
    """Hands out names for newborn and spontaneously spawned creatures.

    Attributes:
        names: Candidate names; when empty every request gets the fallback
        fallback: Name used when no candidates are available
    """

    def __init__(self, names: Sequence[str] = (), fallback: str = FALLBACK_NAME) -> None:
        self.names: List[str] = [name for name in names if name]
        self.fallback = fallback

    @classmethod
    def from_file(cls, path: Union[str, Path], *, strict: bool = False) -> "NameProvider":
        """Build a provider from a name file.

        Args:
            path: Name file location
            strict: Re-raise MissingNameResourceError instead of falling back

        Returns:
            Provider loaded with the file's names, or an empty provider that
            always answers with the fallback name when the file is missing
        """
        try:
            names = load_names(path)
        except MissingNameResourceError as e:
            if strict:
                raise
            logger.warning("%s; new creatures will be named '%s'", e, FALLBACK_NAME)
            return cls()
        logger.debug("Loaded %d names from %s", len(names), path)
        return cls(names)

    def next_name(self, rng: RandomSource) -> str:
        if not self.names:
            return self.fallback
        return self.names[rng.randrange(len(self.names))]

    def __len__(self) -> int:
        return len(self.names)
