"""
CLI entry point for cards.
"""

# Standard library imports
import os
from pathlib import Path
from typing import List, Optional

# Third-party imports
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Local application imports
from cards.constants import DECK_FILE_ENVVAR
from cards.exceptions import DeckError
from cards.models import NotFound
from cards.service import DeckService, DeckServiceConfig


console = Console()

app = typer.Typer(
    name="cards",
    help="Cards: create, shuffle, deal and save a deck of playing cards.",
    add_completion=False,
    rich_markup_mode="markdown",
)


# ---------------------------------------------------------------------------
# Helpers for resolving the --file path (CARDS_DECK_FILE envvar fallback)
# ---------------------------------------------------------------------------


def _resolve_deck_file(deck_file: Optional[Path]) -> Path:
    """Resolve the deck file from --file or CARDS_DECK_FILE. Exits on missing."""
    if deck_file is not None:
        return deck_file
    env_val = os.environ.get(DECK_FILE_ENVVAR)
    if env_val:
        return Path(env_val)
    console.print(
        "[bold red]Error: --file is required "
        f"(or set the {DECK_FILE_ENVVAR} environment variable).[/bold red]"
    )
    raise typer.Exit(code=1)


# Common typer options reused across commands
_file_option = typer.Option(  # noqa: B008
    None,
    "--file",
    "-f",
    help="Path to the saved deck file. "
    f"Falls back to {DECK_FILE_ENVVAR} env var.",
    envvar=DECK_FILE_ENVVAR,
)

_seed_option = typer.Option(  # noqa: B008
    None,
    "--seed",
    help="Seed for the shuffle, for reproducible decks.",
)


def _service(seed: Optional[int]) -> DeckService:
    return DeckService.from_config(DeckServiceConfig(seed=seed))


def _load_or_exit(service: DeckService, deck_file: Path) -> List[str]:
    """
    Load a deck from deck_file, exiting with code 1 when it cannot be used.

    A NotFound result prints its message; a decode failure prints the error.
    """
    try:
        result = service.load(deck_file)
    except DeckError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e
    if isinstance(result, NotFound):
        console.print(f"[bold red]{result.message}[/bold red]")
        raise typer.Exit(code=1)
    return result.deck


def _save_or_exit(
    service: DeckService, deck: List[str], deck_file: Path
) -> None:
    try:
        service.save(deck, deck_file)
    except DeckError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e


def _cards_table(title: str, cards: List[str]) -> Table:
    table = Table(title=escape(title))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Card", style="cyan")
    for position, card in enumerate(cards, start=1):
        table.add_row(str(position), escape(card))
    return table


# ---------------------------------------------------------------------------
# Deck file commands
# ---------------------------------------------------------------------------


@app.command()
def new(
    deck_file: Optional[Path] = _file_option,
    shuffle: bool = typer.Option(
        False, "--shuffle", help="Shuffle the deck before saving it."
    ),
    seed: Optional[int] = _seed_option,
):
    """Create a fresh deck and save it to the deck file."""
    path = _resolve_deck_file(deck_file)
    service = _service(seed)
    deck = service.create_deck()
    if shuffle:
        deck = service.shuffle(deck)
    _save_or_exit(service, deck, path)
    console.print(
        f"[bold green]Saved a deck of {len(deck)} cards "
        f"to[/bold green] [cyan]{escape(str(path))}[/cyan]"
    )


@app.command()
def show(deck_file: Optional[Path] = _file_option):
    """Print the cards of a saved deck in order."""
    path = _resolve_deck_file(deck_file)
    deck = _load_or_exit(DeckService(), path)
    if not deck:
        console.print("[yellow]The deck is empty.[/yellow]")
        return
    console.print(_cards_table(f"Deck: {path.name}", deck))


@app.command("shuffle")
def shuffle_deck(
    deck_file: Optional[Path] = _file_option,
    seed: Optional[int] = _seed_option,
):
    """Shuffle a saved deck in place on disk."""
    path = _resolve_deck_file(deck_file)
    service = _service(seed)
    deck = _load_or_exit(service, path)
    _save_or_exit(service, service.shuffle(deck), path)
    console.print(f"[bold green]Shuffled {len(deck)} cards.[/bold green]")


@app.command()
def contains(
    card: str = typer.Argument(..., help='Card label, e.g. "Ace of Spades".'),
    deck_file: Optional[Path] = _file_option,
):
    """Report whether a saved deck holds the given card."""
    path = _resolve_deck_file(deck_file)
    service = DeckService()
    deck = _load_or_exit(service, path)
    if service.contains(deck, card):
        console.print(f"[green]{escape(card)} is in the deck.[/green]")
    else:
        console.print(f"[yellow]{escape(card)} is not in the deck.[/yellow]")


@app.command()
def deal(
    hand_size: int = typer.Argument(..., help="Number of cards to deal."),
    deck_file: Optional[Path] = _file_option,
):
    """Deal a hand from the top of a saved deck and save the rest back."""
    path = _resolve_deck_file(deck_file)
    service = DeckService()
    deck = _load_or_exit(service, path)
    hand, rest = service.deal(deck, hand_size)
    console.print(_cards_table("Hand", hand))
    _save_or_exit(service, rest, path)
    console.print(
        f"{len(rest)} cards left in [cyan]{escape(str(path))}[/cyan]"
    )


# ---------------------------------------------------------------------------
# Standalone hand
# ---------------------------------------------------------------------------


@app.command()
def hand(
    hand_size: int = typer.Argument(..., help="Number of cards to deal."),
    seed: Optional[int] = _seed_option,
):
    """Deal a hand from a freshly created and shuffled deck."""
    service = _service(seed)
    dealt, rest = service.create_hand(hand_size)
    console.print(_cards_table("Hand", dealt))
    console.print(f"{len(rest)} cards left in the deck.")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message to the console and exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {escape(str(e))}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
