"""
Expense Models

The server stores one row per expense. We model it twice:
1. Expense - what we SEND (no id, the server assigns one)
2. ExpenseWithId - what we RECEIVE

DESIGN DECISION: The genre is referenced by NAME, not by an id or a nested
Genre object. Referential integrity is the server's job, not ours.
The date is an opaque string; we never parse it locally.
"""

from pydantic import BaseModel, ConfigDict, Field


class Expense(BaseModel):
    """A single expense as sent to the server."""
    model_config = ConfigDict(frozen=True)

    date: str = Field(
        ...,
        description="Expense date as the server expects it (e.g. 2025-01-15)"
    )
    genre: str = Field(
        ...,
        description="Name of an existing genre"
    )
    amount: int = Field(
        ...,
        description="Amount in yen"
    )


class ExpenseWithId(BaseModel):
    """
    A stored expense as returned by the server.

    Validated strictly: an id or amount sent as a string is a decoding
    failure, not something we quietly coerce.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    id: int = Field(
        ...,
        description="Server-assigned identifier"
    )
    date: str
    genre: str
    amount: int

    def without_id(self) -> Expense:
        """Get the write-side shape of this expense."""
        return Expense(date=self.date, genre=self.genre, amount=self.amount)
