from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

NumericRange = Tuple[float, float]

_RANGE_FIELDS = (
    "price_range",
    "rating_range",
    "release_year_range",
    "download_range",
    "revenue_range",
)


class DiscoveryFilters(BaseModel):
    """
    A discovery query. Every field is optional; only present criteria are applied,
    and a game must satisfy all of them. Ranges are inclusive [min, max] pairs.
    """

    platforms: Optional[List[str]] = None
    genres: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    developers: Optional[List[str]] = None
    publishers: Optional[List[str]] = None
    price_range: Optional[NumericRange] = None
    rating_range: Optional[NumericRange] = None
    release_year_range: Optional[NumericRange] = None
    download_range: Optional[NumericRange] = None
    revenue_range: Optional[NumericRange] = None

    @model_validator(mode="after")
    def _check_ranges(self):
        for name in _RANGE_FIELDS:
            bounds = getattr(self, name)
            if bounds is not None and bounds[0] > bounds[1]:
                raise ValueError(f"{name}: minimum {bounds[0]} is greater than maximum {bounds[1]}")
        return self


class DiscoverySearchRequest(BaseModel):
    filters: DiscoveryFilters = Field(default_factory=DiscoveryFilters)
    page: int = Field(1, ge=1, description="The page number to retrieve.")
    per_page: int = Field(20, ge=1, le=100, description="The number of games per page.")


class CreateDiscoveryListRequest(BaseModel):
    """Input DTO for saving a named discovery list."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    filters: DiscoveryFilters = Field(default_factory=DiscoveryFilters)


class UpdateDiscoveryListRequest(BaseModel):
    """Partial update; only the fields sent by the client are changed."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    filters: Optional[DiscoveryFilters] = None
    is_public: Optional[bool] = None


class DiscoveryListDTO(BaseModel):
    id: str
    project_id: str
    name: str
    description: str = ""
    filters: DiscoveryFilters
    is_public: bool = False
    created_at: datetime
    updated_at: datetime
