import logging
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from jumbleword.errors import JumbleError
from jumbleword.game.engine import JumbleEngine
from jumbleword.game.models import EngineConfig, GameState

app = typer.Typer(help="Jumble: word puzzles over a dictionary word list.")
console = Console()

QUIT = ":quit"


class _State:
    def __init__(self, config: EngineConfig):
        self.config = config
        self._engine = None

    @property
    def engine(self) -> JumbleEngine:
        # Loaded on first use so --help works without a word list
        if self._engine is None:
            self._engine = JumbleEngine.from_config(self.config)
        return self._engine


@app.callback()
def main(
    ctx: typer.Context,
    dictionary: Path = typer.Option(
        Path("data/words.txt"), envvar="JUMBLE_WORDS", help="Path to the word list, one word per line"
    ),
    seed: Optional[int] = typer.Option(None, envvar="JUMBLE_SEED", help="Seed for reproducible rounds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)]
    )
    ctx.obj = _State(EngineConfig(dictionary_path=dictionary, seed=seed))


def _engine(ctx: typer.Context) -> JumbleEngine:
    try:
        return ctx.obj.engine
    except JumbleError as e:
        _fail(e)


def _fail(error):
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(code=1)


def _print_words(words: set[str], title: str):
    console.print(f"[bold]{title}[/bold] ({len(words)})")
    if words:
        console.print(", ".join(sorted(words)))


@app.command()
def scramble(ctx: typer.Context, word: str):
    """
    Shuffles the letters of WORD.
    """
    console.print(_engine(ctx).scramble(word))


@app.command()
def palindromes(ctx: typer.Context):
    """
    Lists the palindromes of the word list.
    """
    _print_words(_engine(ctx).retrieve_palindrome_words(), "Palindromes")


@app.command("random")
def random_word(ctx: typer.Context, length: Optional[int] = typer.Option(None, help="Exact word length")):
    """
    Picks one word at random.
    """
    word = _engine(ctx).pick_one_random_word(length)
    if word is None:
        _fail(f"No word of length {length}")
    console.print(word)


@app.command()
def exists(ctx: typer.Context, word: str):
    """
    Checks whether WORD is in the word list.
    """
    if _engine(ctx).exists(word):
        console.print(f"[green]{word} is a word[/green]")
    else:
        console.print(f"[yellow]{word} is not a word[/yellow]")
        raise typer.Exit(code=1)


@app.command()
def prefix(ctx: typer.Context, text: str):
    """
    Lists the words starting with TEXT.
    """
    _print_words(_engine(ctx).words_matching_prefix(text), f"Words starting with {text!r}")


@app.command()
def search(
    ctx: typer.Context,
    start: Optional[str] = typer.Option(None, help="First letter"),
    end: Optional[str] = typer.Option(None, help="Last letter"),
    length: Optional[int] = typer.Option(None, help="Exact word length")
):
    """
    Lists the words matching every given criterion.
    """
    _print_words(_engine(ctx).search_words(start, end, length), "Matches")


@app.command()
def subwords(
    ctx: typer.Context,
    word: str,
    min_length: Optional[int] = typer.Option(None, help="Shortest sub-word to keep (default 3)")
):
    """
    Lists the words that can be spelled with the letters of WORD.
    """
    _print_words(_engine(ctx).generate_sub_words(word, min_length), f"Sub-words of {word!r}")


def _new_state(ctx: typer.Context, length: int, min_length: Optional[int]) -> GameState:
    try:
        return _engine(ctx).create_game_state(length, min_length)
    except JumbleError as e:
        _fail(e)


def _print_state(state: GameState, reveal: bool = False):
    table = Table(title=f"Unscramble: [bold cyan]{state.scrambled.upper()}[/bold cyan]")
    table.add_column("#", justify="right")
    table.add_column("Sub-word", style="cyan")
    table.add_column("Found", justify="center")

    for i, (word, guessed) in enumerate(state.sub_words.items()):
        shown = word if (reveal or guessed) else "_" * len(word)
        table.add_row(str(i + 1), shown, "[green]yes[/green]" if guessed else "")
    console.print(table)
    if reveal:
        console.print(f"Word: [bold]{state.original}[/bold]")


@app.command("new-game")
def new_game(
    ctx: typer.Context,
    length: int = typer.Option(6, help="Length of the hidden word"),
    min_length: Optional[int] = typer.Option(None, help="Shortest sub-word (default 3)"),
    reveal: bool = typer.Option(False, help="Show the answers")
):
    """
    Creates a round and prints it.
    """
    _print_state(_new_state(ctx, length, min_length), reveal=reveal)


@app.command()
def play(
    ctx: typer.Context,
    length: int = typer.Option(6, help="Length of the hidden word"),
    min_length: Optional[int] = typer.Option(None, help="Shortest sub-word (default 3)")
):
    """
    Plays one round interactively.
    """
    state = _new_state(ctx, length, min_length)
    console.print(f"Letters: [bold cyan]{state.scrambled.upper()}[/bold cyan]")
    console.print(f"Find {len(state.sub_words)} words. Type {QUIT} to give up.")

    while not state.is_complete:
        try:
            guess = Prompt.ask("Guess", console=console).strip()
        except EOFError:
            break
        if guess == QUIT:
            break
        if guess.lower() == state.original.lower():
            console.print("[bold green]That's the hidden word![/bold green]")
        elif state.guess(guess):
            console.print(f"[green]Found {guess}[/green] ({len(state.remaining)} left)")
        elif guess.lower() in (w.lower() for w in state.found):
            console.print(f"[yellow]Already found {guess}[/yellow]")
        else:
            console.print(f"[red]{guess} is not in this puzzle[/red]")

    if state.is_complete:
        console.print("[bold green]All words found![/bold green]")
    _print_state(state, reveal=True)


if __name__ == "__main__":
    app()
