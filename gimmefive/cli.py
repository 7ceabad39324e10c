import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from gimmefive.config import Settings, build_rng, configure_logging, load_catalog
from gimmefive.draw.pool import IndexPool
from gimmefive.errors import GimmeFiveError, TerminalError
from gimmefive.reveal.controller import RoundController
from gimmefive.reveal.rules import ROUND_SIZE
from gimmefive.runtime.scheduler import AsyncioScheduler, ManualScheduler
from gimmefive.runtime.session import RevealSession, run_headless
from gimmefive.terminal.app import TerminalApp
from gimmefive.words.catalog import WordCatalog

app = typer.Typer(help="gimmefive: draw a random five-letter word with a roulette-style reveal.")
console = Console()
logger = logging.getLogger(__name__)

def _fail(error: GimmeFiveError):
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(code=1)

def _startup(settings: Settings) -> WordCatalog:
    configure_logging(settings)
    try:
        catalog = load_catalog(settings)
        catalog.require_round_size(ROUND_SIZE)
    except GimmeFiveError as e:
        _fail(e)
    logger.info(f"Catalog ready: {len(catalog)} words from {catalog.source}")
    return catalog

@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """
    Without a command, starts the interactive reveal.
    """
    if ctx.invoked_subcommand is None:
        play(words=None, seed=None, log_file=None, verbose=False)

@app.command()
def play(
    words: Optional[Path] = typer.Option(None, "--words", help="Word list to draw from (defaults to the bundled list)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible draw order"),
    log_file: Optional[Path] = typer.Option(None, help="Write logs here instead of stderr"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log round results")
):
    """
    Runs the interactive reveal. Enter or scroll for a new round, q / Esc to quit.
    """
    settings = Settings(words_path=words, seed=seed, log_file=log_file, verbose=verbose)
    catalog = _startup(settings)
    if not sys.stdin.isatty():
        _fail(TerminalError("play needs an interactive terminal on stdin, try 'gimmefive draw' instead"))
    asyncio.run(_async_play(catalog, settings))

async def _async_play(catalog: WordCatalog, settings: Settings):
    queue = asyncio.Queue()
    pool = IndexPool(len(catalog), rng=build_rng(settings.seed))
    controller = RoundController(catalog, pool, AsyncioScheduler(queue))
    session = RevealSession(controller, queue)
    await TerminalApp(session, console).run()

@app.command()
def draw(
    rounds: int = typer.Option(1, min=1, help="Number of rounds to draw"),
    show_roll: bool = typer.Option(False, "--show-roll", help="Also print the words shown before the final one"),
    words: Optional[Path] = typer.Option(None, "--words", help="Word list to draw from (defaults to the bundled list)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible draw order")
):
    """
    Draws words without the animation and prints each round's result.
    """
    settings = Settings(words_path=words, seed=seed)
    catalog = _startup(settings)

    scheduler = ManualScheduler()
    pool = IndexPool(len(catalog), rng=build_rng(settings.seed))
    controller = RoundController(catalog, pool, scheduler)

    for result in run_headless(controller, scheduler, rounds):
        if show_roll:
            console.print(f"[dim]{' '.join(w.upper() for w in result.revealed[:-1])}[/dim]")
        console.print(f"[bold green]{result.final_word.upper()}[/bold green]")

@app.command()
def catalog(words: Optional[Path] = typer.Option(None, "--words", help="Word list to draw from (defaults to the bundled list)")):
    """
    Shows where the word list comes from and how many words it holds.
    """
    settings = Settings(words_path=words)
    cat = _startup(settings)

    table = Table(title="Word Catalog")
    table.add_column("Source", style="cyan")
    table.add_column("Words", justify="right", style="bold green")
    table.add_column("Rounds per shuffle", justify="right")
    table.add_row(cat.source, str(len(cat)), str(len(cat) // ROUND_SIZE))
    console.print(table)

if __name__ == "__main__":
    app()
