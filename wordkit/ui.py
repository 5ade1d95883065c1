#!/usr/bin/env python3
"""
Terminal Output
===============
Rich-based rendering for generated words and model statistics.

Usage:
    from wordkit.ui import words_table, model_panel
    from rich.console import Console

    console = Console()
    console.print(words_table(["ashby", "brandon"], corpus=corpus))
    console.print(model_panel(generator.model))
"""

from typing import Iterable, Optional

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .settings import get_setting


def make_console(stderr: bool = False, quiet: bool = False) -> Console:
    """Console for stdout (or stderr); quiet consoles print nothing."""
    return Console(stderr=stderr, quiet=quiet, highlight=False)


def words_table(words: list[str],
                corpus: Optional[Iterable[str]] = None,
                title: Optional[str] = None,
                max_results: Optional[int] = None) -> Table:
    """
    Build a table of generated words.

    Args:
        words: Generated words
        corpus: Training words; adds a column marking words that already exist
        title: Table title
        max_results: Rows to show (default from config ui.max_results)
    """
    if max_results is None:
        max_results = get_setting("ui.max_results") or len(words)

    known = set(corpus) if corpus is not None else None

    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Word", style="bold")
    table.add_column("Len", justify="right")
    if known is not None:
        table.add_column("Novel", justify="center")

    for i, word in enumerate(words[:max_results], 1):
        row = [str(i), Text(word), str(len(word))]
        if known is not None:
            row.append(Text("no", style="yellow") if word in known else Text("yes", style="green"))
        table.add_row(*row)

    hidden = len(words) - max_results
    if hidden > 0:
        table.caption = f"{hidden} more not shown"

    return table


def model_panel(model) -> Panel:
    """Summary of a model's order, alphabet and chain tables."""
    table = Table(box=box.MINIMAL, show_header=True)
    table.add_column("Order", justify="right")
    table.add_column("Contexts", justify="right")

    for order, size in enumerate(model.table_sizes(), 1):
        table.add_row(str(order), str(size))

    alphabet = ''.join(model.alphabet)
    prior = "-" if model.prior is None else f"{model.prior:g}"
    header = Text.assemble(
        ("Order ", "bold"), str(model.order),
        ("   Prior ", "bold"), prior,
        ("   Alphabet ", "bold"), f"{len(model.alphabet)} symbols: {alphabet}",
    )
    return Panel.fit(Group(header, table), title="Markov model", border_style="cyan")
