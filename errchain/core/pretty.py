from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from errchain.core.chain import WrappedError, format_fields


def chain_table(err: BaseException, title: str = "error chain") -> Table:
    """One row per error in the chain, outermost first."""
    table = Table(title=title)
    table.add_column("#")
    table.add_column("Message")
    table.add_column("Location")
    table.add_column("Fields")

    i = 0
    node: Optional[BaseException] = err
    while node is not None:
        i += 1
        if not isinstance(node, WrappedError):
            table.add_row(str(i), Text(str(node)), "", "")
            break
        # Text, not str: field maps are bracketed and must not parse as markup.
        fields = Text(format_fields(node.fields)) if node.fields else ""
        table.add_row(str(i), Text(str(node.actual)), Text(str(node.location)), fields)
        node = node.previous
    return table


def print_chain(err: BaseException, console: Console | None = None) -> None:
    console = console or Console()
    console.print(chain_table(err))
    if isinstance(err, WrappedError):
        frames = err.root().frames
        if frames:
            console.print("\nStacktrace:")
            for entry in frames:
                console.print(f"- {entry}", markup=False)
