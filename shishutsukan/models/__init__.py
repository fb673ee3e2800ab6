"""
Data Models Package

This package contains the Pydantic models exchanged with the shishutsukan API.
Write-side shapes carry no identity; read-side shapes carry server-assigned
fields. All of them are immutable.
"""

from shishutsukan.models.expense import Expense, ExpenseWithId
from shishutsukan.models.genre import Genre, GenreWithId
from shishutsukan.models.message import APIMessage
from shishutsukan.models.audit import ExchangeEvent

__all__ = [
    # Resource models
    "Expense",
    "ExpenseWithId",
    "Genre",
    "GenreWithId",
    # Envelope
    "APIMessage",
    # Logging
    "ExchangeEvent",
]
