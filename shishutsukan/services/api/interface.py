"""
Abstract Expense API Interface

DESIGN DECISION: The operations the shishutsukan server offers are declared
here, separately from the HTTP client. This allows us to:
1. Hand callers a fake implementation in their own tests
2. Keep the operation contract readable in one place

The interface is intentionally small - one method per endpoint.
"""

from abc import ABC, abstractmethod

from shishutsukan.models import (
    APIMessage,
    Expense,
    ExpenseWithId,
    Genre,
    GenreWithId,
)


class ExpenseAPIInterface(ABC):
    """
    Abstract interface for the shishutsukan API operations.

    Mutating operations return the server's envelope and raise
    ServerError when the envelope carries an error.
    """

    @abstractmethod
    async def add_expense(self, expense: Expense) -> APIMessage:
        """
        Add an expense.

        Args:
            expense: The expense to store. Its genre must already exist.

        Returns:
            The server's envelope (message "ok" on the reference server)

        Raises:
            ServerError: If the server rejected the expense
        """
        pass

    @abstractmethod
    async def get_expenses(self) -> list[ExpenseWithId]:
        """
        List every stored expense.

        Raises:
            DecodingError: If the body is not a list of expenses
        """
        pass

    @abstractmethod
    async def delete_expense(self, expense_id: int) -> APIMessage:
        """
        Delete an expense by id.

        Deleting an id that does not exist still succeeds on the server.
        """
        pass

    @abstractmethod
    async def get_genres(self) -> list[GenreWithId]:
        """List every genre."""
        pass

    @abstractmethod
    async def add_genre(self, genre: Genre) -> APIMessage:
        """
        Add a genre.

        Raises:
            ServerError: If a genre with the same name exists
        """
        pass

    @abstractmethod
    async def delete_genre(self, genre_id: int) -> APIMessage:
        """
        Delete a genre by id.

        Raises:
            ServerError: If expenses still reference the genre
        """
        pass
