"""
Deck construction and the pure operations on decks.

Decks are plain lists of card labels. Nothing here mutates its input: every
operation hands back new lists.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from .constants import SUITS, VALUES

logger = logging.getLogger(__name__)


def create_deck() -> List[str]:
    """
    Build the full deck in its canonical order.

    Suits are iterated in the outer loop and values in the inner one, so the
    deck starts with "Ace of Spades", "Two of Spades" and ends with
    "Five of Diamonds".

    Returns:
        List[str]: ``len(VALUES) * len(SUITS)`` distinct labels of the form
        "<Value> of <Suit>".
    """
    return [f"{value} of {suit}" for suit in SUITS for value in VALUES]


def shuffle(
    deck: Sequence[str], rng: Optional[random.Random] = None
) -> List[str]:
    """
    Return a uniformly random permutation of ``deck``.

    Parameters:
        deck (Sequence[str]): Cards to permute; may be empty. Left unchanged.
        rng (Optional[random.Random]): Randomness provider. When omitted the
            process-wide ``random`` source is used and the result is not
            reproducible.

    Returns:
        List[str]: A new list holding the same cards in random order.
    """
    shuffled = list(deck)
    if rng is None:
        random.shuffle(shuffled)
    else:
        rng.shuffle(shuffled)
    logger.debug(f"Shuffled deck of {len(shuffled)} cards.")
    return shuffled


def contains(deck: Sequence[str], card: str) -> bool:
    """Check whether ``card`` appears in ``deck`` by exact string match."""
    return card in deck


def deal(deck: Sequence[str], hand_size: int) -> Tuple[List[str], List[str]]:
    """
    Split ``deck`` into a hand and the rest of the deck.

    The hand is the first ``hand_size`` cards, clamped to ``[0, len(deck)]``:
    a negative size deals nothing and an oversized one deals the whole deck.
    Both parts keep the original relative order, so ``hand + rest`` rebuilds
    the deck.

    Returns:
        Tuple[List[str], List[str]]: ``(hand, rest)``.
    """
    size = max(0, min(hand_size, len(deck)))
    hand, rest = list(deck[:size]), list(deck[size:])
    logger.debug(f"Dealt {len(hand)} cards, {len(rest)} left in deck.")
    return hand, rest


def create_hand(
    hand_size: int, rng: Optional[random.Random] = None
) -> Tuple[List[str], List[str]]:
    """Create a fresh deck, shuffle it and deal ``hand_size`` cards from it."""
    return deal(shuffle(create_deck(), rng), hand_size)
