"""Interface for interacting with the user (input/output).

Defines the contract for displaying dashboard tables, errors and progress,
and getting input from the user, allowing different UI implementations.
"""

import abc
from typing import Any, List, Sequence

from regiondash.domain.models.manager import Manager

class UserInterface(abc.ABC):
    """Abstract Base Class for user interaction."""

    @abc.abstractmethod
    def display_managers(self, managers: List[Manager]) -> None:
        """Displays the list of selectable managers."""
        pass

    @abc.abstractmethod
    def display_table(self, title: str, rows: Sequence[Sequence[Any]]) -> None:
        """Displays a projection table.

        Args:
            title: Heading shown above the table.
            rows: Header row followed by data rows.
        """
        pass

    @abc.abstractmethod
    def display_loading(self, message: str) -> None:
        """Displays a placeholder while data is loading."""
        pass

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error banner to the user."""
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message to the user."""
        pass

    @abc.abstractmethod
    def get_prompt(self, prompt_message: str = "Input: ") -> str:
        """Gets input from the user synchronously.

        Args:
            prompt_message: The message to display before the input cursor.

        Returns:
            The text entered by the user.
        """
        pass
