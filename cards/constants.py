"""
Deck constants.

Static card vocabulary and the fixed strings shared by the library and the CLI.
"""
from typing import Tuple

# Card values, lowest first. A fresh deck iterates these inside each suit.
VALUES: Tuple[str, ...] = ("Ace", "Two", "Three", "Four", "Five")

# Suits in deck order.
SUITS: Tuple[str, ...] = ("Spades", "Clubs", "Hearts", "Diamonds")

# Message carried by every failed load, whatever the underlying cause.
NOT_FOUND_MESSAGE: str = "That file does not exist"

# Environment variable the CLI falls back to when --file is omitted.
DECK_FILE_ENVVAR: str = "CARDS_DECK_FILE"
