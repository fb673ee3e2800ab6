"""
Genre Models

A genre is an expense category (食費, 交通費, ...).
Names are unique on the server; duplicates are rejected there.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Genre(BaseModel):
    """A genre as sent to the server."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Genre name, unique per server"
    )


class GenreWithId(BaseModel):
    """
    A stored genre as returned by the server.

    The creation timestamp travels as ``created_at`` on the wire.
    ``createdAt`` is accepted on input too, but output always uses the
    snake-case key.
    """
    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    id: int
    name: str
    created_at: str = Field(
        ...,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="created_at",
        description="Server-assigned creation timestamp, kept as sent"
    )

    def without_id(self) -> Genre:
        """Get the write-side shape of this genre."""
        return Genre(name=self.name)
