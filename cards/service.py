# cards/service.py

"""
Defines DeckService, the single entry point bundling deck operations with
an injected randomness provider.
"""

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel

from . import deck as deck_ops
from . import storage
from .models import LoadResult

logger = logging.getLogger(__name__)


class DeckServiceConfig(BaseModel):
    """Configuration for DeckService."""

    seed: Optional[int] = None


class DeckService:
    """
    Creates, shuffles, queries, deals and persists decks.

    Shuffling draws from ``rng``. Without one the process-wide ``random``
    source is used; pass a seeded ``random.Random`` for reproducible runs.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng

    @classmethod
    def from_config(cls, config: DeckServiceConfig) -> "DeckService":
        if config.seed is None:
            return cls()
        logger.info(f"DeckService seeded with {config.seed}")
        return cls(rng=random.Random(config.seed))

    def create_deck(self) -> List[str]:
        return deck_ops.create_deck()

    def shuffle(self, deck: Sequence[str]) -> List[str]:
        return deck_ops.shuffle(deck, self.rng)

    def contains(self, deck: Sequence[str], card: str) -> bool:
        return deck_ops.contains(deck, card)

    def deal(
        self, deck: Sequence[str], hand_size: int
    ) -> Tuple[List[str], List[str]]:
        return deck_ops.deal(deck, hand_size)

    def save(self, deck: Sequence[str], filename: Union[str, Path]) -> None:
        storage.save(deck, filename)

    def load(self, filename: Union[str, Path]) -> LoadResult:
        return storage.load(filename)

    def create_hand(self, hand_size: int) -> Tuple[List[str], List[str]]:
        """Deal ``hand_size`` cards from a freshly shuffled deck."""
        return self.deal(self.shuffle(self.create_deck()), hand_size)
