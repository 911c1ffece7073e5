# src/monkey/cli/main.py
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..config import config
from ..environment import Environment
from ..errors import MonkeyError, MonkeyRuntimeError, MonkeySyntaxError, print_error
from ..interpreter import parse, run as run_source
from ..lexer import Lexer
from ..monkey_token import EOF

console = Console()


def _read(file):
    with open(file, 'r', encoding='utf-8') as f:
        return f.read()


def _show_result(result, typed):
    if result is None:
        return
    text = result.describe() if typed else result.inspect()
    console.print(Text(text, style="green"))


def _execute(source, filename, typed):
    try:
        result = run_source(source, Environment(), filename=filename)
    except (MonkeySyntaxError, MonkeyRuntimeError) as e:
        print_error(e)
        sys.exit(1)
    _show_result(result, typed)


@click.group()
@click.version_option(version=__version__, prog_name="Monkey")
@click.option('--debug', is_flag=True, help="Trace parsing and evaluation.")
def cli(debug):
    """Monkey Programming Language - lexer, parser and tree-walking evaluator"""
    if debug:
        config.enable_debug_logs = True
    config.configure_logging()


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--typed', is_flag=True, help="Print the result with its type.")
def run(file, typed):
    """Run a Monkey program"""
    _execute(_read(file), file, typed)


@cli.command(name='eval')
@click.argument('source')
@click.option('--typed', is_flag=True, help="Print the result with its type.")
def eval_command(source, typed):
    """Evaluate a source string"""
    _execute(source, "<eval>", typed)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check syntax of a Monkey file"""
    try:
        parse(_read(file), file)
    except MonkeySyntaxError as e:
        print_error(e)
        sys.exit(1)
    console.print("[bold green]Syntax is valid![/bold green]")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show the parsed program in its parenthesized form"""
    try:
        program = parse(_read(file), file)
    except MonkeyError as e:
        print_error(e)
        sys.exit(1)

    console.print(Panel.fit(
        Text("\n".join(str(stmt) for stmt in program.statements)),
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue",
    ), highlight=False)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Monkey file"""
    lexer = Lexer(_read(file), file)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in lexer.tokens():
        if token.type == EOF:
            break
        table.add_row(token.type, Text(token.literal), str(token.line), str(token.column))

    console.print(table)


if __name__ == '__main__':
    cli()
