"""Character schemas for the characters endpoint responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Character(BaseModel):
    """A single character record.

    Only `name` is validated. `_id` and `url` are read as-is whatever
    their type, and everything else (films, tvShows, ...) is kept as
    extra data.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any | None = Field(default=None, alias="_id")
    name: str | None = None
    url: Any | None = None


class CharacterPage(BaseModel):
    """Response model for GET /characters (one page of characters).

    Only `data` is validated; the pagination fields are carried untyped.
    """

    model_config = ConfigDict(extra="allow")

    data: list[Any]
    count: Any | None = None
    totalPages: Any | None = None
    nextPage: Any | None = None
    previousPage: Any | None = None

    def characters(self) -> list[Character | None]:
        """Parse `data` into characters.

        Non-object entries come back as None.

        Raises:
            pydantic.ValidationError: If an object entry has a non-string name
        """
        return [
            Character.model_validate(item) if isinstance(item, dict) else None
            for item in self.data
        ]
