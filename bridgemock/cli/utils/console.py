"""Bridge CLI console utilities for result formatting."""

from typing import Dict

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from bridgemock.cli.design_standards import COLORS, LAYOUT, SYMBOLS
from bridgemock.core.models import Count, Record, RecordList

BRIDGE_THEME = Theme(COLORS)


class BridgeConsole(Console):
    """Themed console for printing bridge results."""

    def __init__(self, **kwargs):
        kwargs.setdefault("width", LAYOUT['terminal_width'])
        super().__init__(theme=BRIDGE_THEME, **kwargs)

    def print_header(self, text: str) -> None:
        """Print a styled header."""
        self.print()
        self.print(f"[primary]{text}[/primary]")
        self.print("─" * len(text), style="muted")

    def print_metadata(self, metadata: Dict[str, str]) -> None:
        for key, value in metadata.items():
            self.print(f"[muted]{key}:[/muted] [info]{value}[/info]")

    def print_count(self, result: Count) -> None:
        self.print(f"[muted]count:[/muted] [accent]{result.value}[/accent]")
        self.print_metadata(result.metadata)

    def print_record(self, result: Record) -> None:
        table = Table(show_header=True)
        table.add_column("Field", style="muted")
        table.add_column("Value")
        for field, value in result.record.items():
            table.add_row(field, value)
        self.print(table)
        self.print_metadata(result.metadata or {})

    def print_record_list(self, result: RecordList) -> None:
        columns = list(result.fields)
        for record in result.records:
            for field in record.record:
                if field not in columns:
                    columns.append(field)

        table = Table(show_header=True)
        for column in columns:
            table.add_column(column)
        for record in result.records:
            table.add_row(*[record.record.get(column, "") for column in columns])
        self.print(table)
        self.print_metadata(result.metadata)


def format_error(message: str) -> Text:
    """Format an error message."""
    return Text(f"{SYMBOLS['fail']} {message}", style="error")

