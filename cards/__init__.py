"""cards - create, shuffle, deal and persist a small deck of playing cards."""

from .constants import NOT_FOUND_MESSAGE, SUITS, VALUES
from .deck import contains, create_deck, create_hand, deal, shuffle
from .exceptions import DeckDecodeError, DeckError, DeckSaveError
from .models import Loaded, LoadResult, NotFound, PersistedDeck
from .service import DeckService, DeckServiceConfig
from .storage import load, save

__all__ = [
    "VALUES",
    "SUITS",
    "NOT_FOUND_MESSAGE",
    "create_deck",
    "shuffle",
    "contains",
    "deal",
    "create_hand",
    "save",
    "load",
    "DeckService",
    "DeckServiceConfig",
    "Loaded",
    "LoadResult",
    "NotFound",
    "PersistedDeck",
    "DeckError",
    "DeckSaveError",
    "DeckDecodeError",
]
