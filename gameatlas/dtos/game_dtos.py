from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class GameRecord(BaseModel):
    """
    A game as stored in the catalog.
    `genres`, `platforms` and `tags` are treated as sets by the match and discovery engines.
    """

    id: str = Field(..., description="Catalog id of the game.")
    title: str
    genres: List[str] = Field(default_factory=list)
    platforms: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    developer: Optional[str] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    cover_url: Optional[str] = None
    release_date: Optional[date] = None
    price: Optional[float] = Field(None, ge=0)
    rating_average: Optional[float] = None
    review_count: Optional[int] = Field(None, ge=0)
    download_count: Optional[int] = Field(None, ge=0)
    revenue_estimate: Optional[float] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("genres", "platforms", "tags", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value

    @property
    def release_year(self) -> Optional[int]:
        return self.release_date.year if self.release_date else None


class ImportGamesRequest(BaseModel):
    """Input DTO for bulk-importing games into the catalog."""

    games: List[GameRecord] = Field(..., min_length=1)
