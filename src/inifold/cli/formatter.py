# src/inifold/cli/formatter.py
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from inifold.folding.value import ValueObject

# Initialize the Rich console for high-quality terminal output
console = Console()


class FoldFormatter:
    """
    FoldFormatter: renders folded values for the CLI.
    Bytes are shown with Python escapes so whitespace stays visible.
    """

    def __init__(self, out: Console = None):
        self.console = out or console

    def show_lines(self, vo: ValueObject, title: str = "Physical Lines"):
        """
        Builds a table with one row per physical line: index, stored
        length and the escaped bytes.
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Length", justify="right")
        table.add_column("Bytes", style="cyan")

        for i, (part, length) in enumerate(zip(vo.raw_lines, vo.raw_lengths)):
            table.add_row(str(i), str(length), repr(part))

        self.console.print(table)

    def show_serialized(self, text: bytes, key: str):
        """Wraps the serialized key in a panel with INI highlighting."""
        decoded = text.decode("utf-8", errors="replace")
        syntax = Syntax(decoded.rstrip("\r\n"), "ini", theme="monokai", line_numbers=True)

        self.console.print(Panel(
            syntax,
            title=f"Serialized: {key}",
            border_style="green"
        ))

    def show_value(self, vo: ValueObject):
        """Prints the logical value of an unfolded key."""
        self.console.print(Panel(
            repr(vo.concatenated),
            title=f"Unfolded value ({len(vo.concatenated)} bytes)",
            border_style="cyan"
        ))

    def show_error(self, message: str):
        self.console.print(f"[bold red]Error:[/bold red] {message}")
