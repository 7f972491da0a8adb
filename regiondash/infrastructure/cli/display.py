import logging
from typing import Any, List, Optional, Sequence

from rich.box import HEAVY, ROUNDED, SIMPLE
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from regiondash.domain.interfaces.user_interface import UserInterface
from regiondash.domain.models.manager import Manager

logger = logging.getLogger(__name__)

class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output."""

    def __init__(self, console: Optional[Console] = None):
        """Initializes the rich Console (or uses the one given)."""
        self._console = console or Console()

    @property
    def console(self) -> Console:
        """Get the Rich console instance for direct operations."""
        return self._console

    def display_managers(self, managers: List[Manager]) -> None:
        """Displays the selectable managers as a table."""
        if not managers:
            self.display_info("No managers available.")
            return

        table = Table(title="Managers", show_header=True, box=ROUNDED, border_style="cyan", padding=(0, 1))
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Region")
        table.add_column("Email", style="dim")
        for manager in managers:
            table.add_row(
                str(manager.id),
                manager.name,
                f"{manager.region_name} ({manager.region_type})",
                manager.email or "",
            )
        self.console.print(table)

    def display_table(self, title: str, rows: Sequence[Sequence[Any]]) -> None:
        """Displays a projection table; the first row is the header."""
        if not rows:
            logger.debug(f"Nothing to display for table '{title}'")
            return

        header, *body = rows
        table = Table(title=title, show_header=True, box=ROUNDED, border_style="blue", padding=(0, 1))
        for index, column in enumerate(header):
            # Counts live in the last column
            table.add_column(str(column), justify="right" if index == len(header) - 1 else "left")
        for row in body:
            table.add_row(*("" if cell is None else str(cell) for cell in row))
        self.console.print(table)

    def display_loading(self, message: str) -> None:
        """Displays a dim placeholder line while data is being fetched."""
        self.console.print(Text(message, style="dim italic"))

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error banner.

        Args:
            error_message: The error message to display.
        """
        panel = Panel(
            Text(error_message, style="white"),
            title="[bold red]Error[/bold red]",
            border_style="red",
            box=HEAVY,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message.

        Args:
            info_message: The informational message to display.
        """
        panel = Panel(
            Text(info_message, style="white"),
            title="[bold blue]Info[/bold blue]",
            border_style="blue",
            box=SIMPLE,
            padding=(0, 1)
        )
        self.console.print(panel)

    def get_prompt(self, prompt_message: str = "> ") -> str:
        """Gets input from the user with a styled prompt.

        Args:
            prompt_message: The message to display before the input cursor.

        Returns:
            The text input by the user.
        """
        self.console.print("")
        return self.console.input(f"[bold green]{prompt_message}[/bold green]")
