"""commentgate languages - show supported languages and grammar status."""

import click
from rich.console import Console
from rich.table import Table

from commentgate.parsing.grammars import get_missing_grammars, grammar_status
from commentgate.parsing.packs import PACKS
from commentgate.parsing.queries import docstring_query


def _make_languages_table() -> Table:
    status = grammar_status()
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
    table.add_column("Language")
    table.add_column("Extensions", style="dim")
    table.add_column("Grammar")
    table.add_column("Docstrings", justify="center")
    table.add_column("Installed", justify="center")

    for language, pack in PACKS.items():
        extensions = ", ".join(sorted(pack.extensions | pack.filenames))
        table.add_row(
            language.value,
            extensions,
            pack.grammar_package,
            "✓" if docstring_query(language) is not None else "",
            "[green]✓[/green]" if status[language] else "[red]✗[/red]",
        )
    return table


@click.command()
def languages_command() -> None:
    """List supported languages and whether their grammars are installed."""
    console = Console()
    console.print(_make_languages_table())

    missing = get_missing_grammars()
    if missing:
        specs = " ".join(f'"{pkg}>={ver}"' for pkg, ver in missing)
        console.print()
        console.print(f"[yellow]Missing grammars.[/yellow] Install with: pip install {specs}")
