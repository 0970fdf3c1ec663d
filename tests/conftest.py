import random
from pathlib import Path

import pytest

from cards.constants import DECK_FILE_ENVVAR
from cards.deck import create_deck


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Run each test from its own temporary directory with no deck file configured.

    Parameters:
        tmp_path: pytest temporary directory for the current test.
        monkeypatch: used to chdir and to clear the CARDS_DECK_FILE env var.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(DECK_FILE_ENVVAR, raising=False)
    yield


@pytest.fixture
def fresh_deck():
    """The canonical unshuffled deck."""
    return create_deck()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def deck_path(tmp_path: Path) -> Path:
    """
    Provide the filesystem path for a temporary deck file.

    Returns:
        Path: Path to the file named "my_deck" inside `tmp_path`.
    """
    return tmp_path / "my_deck"
