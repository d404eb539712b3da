# src/monkey/cli/main.py
import sys

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..config import config as monkey_config, configure_logging
from ..errors import collect_illegal
from ..lexer import Lexer, tokenize
from ..repl import start as start_repl

console = Console()

DEBUG_LEVELS = ["none", "error", "warning", "info", "debug"]


def _read_source(file):
    with open(file, 'r', encoding='utf-8') as f:
        return f.read()


@click.group()
@click.version_option(version=__version__, prog_name="Monkey")
@click.option('--debug-level', type=click.Choice(DEBUG_LEVELS),
              help="Override the configured log level for this run.")
def cli(debug_level):
    """Monkey Programming Language - lexical scanner tools"""
    if debug_level:
        monkey_config.debug_level = debug_level
    configure_logging(monkey_config)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Monkey file"""
    try:
        source_code = _read_source(file)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in Lexer(source_code, filename=file):
        table.add_row(token.type, token.literal, str(token.line), str(token.column))

    console.print(table)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Report unrecognized characters in a Monkey file"""
    try:
        source_code = _read_source(file)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    errors = collect_illegal(tokenize(source_code, filename=file), filename=file)
    if errors:
        console.print(f"[bold red]❌ {len(errors)} illegal character(s) found:[/bold red]")
        for error in errors:
            console.print(f"  {error}", markup=False, highlight=False)
            console.print(f"    [dim]{error.suggestion}[/dim]")
        sys.exit(1)

    console.print("[bold green]✅ No illegal characters[/bold green]")


@cli.command()
def repl():
    """Start the Monkey token REPL"""
    console.print(f"[bold green]Monkey REPL v{__version__}[/bold green]")
    console.print("Type 'exit' to quit\n")

    try:
        start_repl(click.get_text_stream('stdin'), click.get_text_stream('stdout'))
    except KeyboardInterrupt:
        console.print("\n👋 Goodbye!")


@cli.command(name='config')
@click.option('--set-debug-level', 'new_level', type=click.Choice(DEBUG_LEVELS),
              help="Persist the default log level.")
@click.option('--set-prompt', 'new_prompt', help="Persist the REPL prompt.")
def config_cmd(new_level, new_prompt):
    """Show or update saved settings"""
    if new_level is not None or new_prompt is not None:
        if new_level is not None:
            monkey_config.debug_level = new_level
        if new_prompt is not None:
            monkey_config.prompt = new_prompt
        try:
            monkey_config.save()
        except OSError as e:
            console.print(f"[bold red]Error:[/bold red] {e}")
            sys.exit(1)
        console.print(f"[bold green]✅ Saved[/bold green] {monkey_config.path}", highlight=False)

    table = Table(title="Settings")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("debug_level", monkey_config.debug_level)
    table.add_row("prompt", Text(repr(monkey_config.prompt)))
    console.print(table)


if __name__ == "__main__":
    cli()
