"""
Pydantic models for persisted decks and load outcomes.
"""

from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from .constants import NOT_FOUND_MESSAGE


class PersistedDeck(BaseModel):
    """
    On-disk representation of a deck.

    Serialized with ``model_dump_json`` and written as UTF-8 bytes; the card
    order in ``cards`` is the deck order.
    """

    model_config = ConfigDict(extra="forbid")

    cards: List[str] = Field(
        default_factory=list, description="Card labels in deck order."
    )


class Loaded(BaseModel):
    """A deck successfully read back from a file."""

    model_config = ConfigDict(frozen=True)

    deck: List[str] = Field(..., description="The decoded deck.")


class NotFound(BaseModel):
    """
    Returned by ``load`` for any read failure.

    Missing files, permission problems and unreadable paths all produce the
    same value; the underlying cause is only logged.
    """

    model_config = ConfigDict(frozen=True)

    message: str = NOT_FOUND_MESSAGE


LoadResult = Union[Loaded, NotFound]
