"""
Reads and writes decks to files.

The on-disk payload is the UTF-8 JSON form of ``PersistedDeck``. Write
failures are raised as ``DeckSaveError``; read failures of any kind collapse
into a single ``NotFound`` value.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import ValidationError

from .exceptions import DeckDecodeError, DeckSaveError
from .models import Loaded, LoadResult, NotFound, PersistedDeck

logger = logging.getLogger(__name__)


def encode_deck(deck: Sequence[str]) -> bytes:
    """Encode ``deck`` into the bytes written by ``save``."""
    return PersistedDeck(cards=list(deck)).model_dump_json().encode("utf-8")


def decode_deck(data: bytes) -> List[str]:
    """
    Decode bytes produced by ``encode_deck`` back into a deck.

    Raises:
        DeckDecodeError: If ``data`` is not a validly encoded deck.
    """
    try:
        return PersistedDeck.model_validate_json(data).cards
    except ValidationError as e:
        raise DeckDecodeError(
            f"File contents are not a valid deck: {e}", original_exception=e
        ) from e


def save(deck: Sequence[str], filename: Union[str, Path]) -> None:
    """
    Write ``deck`` to ``filename``, replacing any existing file.

    Parameters:
        deck (Sequence[str]): Cards to persist, in order.
        filename (Union[str, Path]): Destination path.

    Raises:
        DeckSaveError: If the file cannot be written. The underlying OSError
            is kept as ``original_exception``.
    """
    payload = encode_deck(deck)
    try:
        with open(filename, "wb") as f:
            f.write(payload)
    except OSError as e:
        logger.error(f"Could not save deck to {filename}: {e}")
        raise DeckSaveError(
            f"Failed to save deck to {filename}: {e}", original_exception=e
        ) from e
    logger.info(f"Saved deck of {len(deck)} cards to {filename}")


def load(filename: Union[str, Path]) -> LoadResult:
    """
    Read a deck previously written by ``save``.

    Any failure to read the file (missing, unreadable, a directory) yields
    ``NotFound`` instead of raising; the cause is logged and otherwise
    discarded.

    Returns:
        LoadResult: ``Loaded`` with the deck, or ``NotFound``.

    Raises:
        DeckDecodeError: If the file was read but does not hold a deck.
    """
    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.warning(f"Could not read deck file {filename}: {e}")
        return NotFound()

    try:
        deck = decode_deck(data)
    except DeckDecodeError:
        logger.error(f"Deck file {filename} could not be decoded.")
        raise
    logger.info(f"Loaded deck of {len(deck)} cards from {filename}")
    return Loaded(deck=deck)
