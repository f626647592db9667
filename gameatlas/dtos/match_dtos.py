from typing import List, Optional

from pydantic import BaseModel, Field


class MatchWeights(BaseModel):
    """
    Tuning parameters of the match scorer.
    A candidate is kept only when its score is strictly greater than `min_score`.
    """

    genre_weight: int = Field(3, ge=0, description="Points per shared genre.")
    tag_weight: int = Field(2, ge=0, description="Points per shared tag.")
    platform_weight: int = Field(1, ge=0, description="Points per shared platform.")
    min_score: int = Field(0, ge=0, description="Candidates scoring at or below this are dropped.")
    top_n: int = Field(10, ge=1, le=100, description="Maximum number of matches returned.")


class MatchRequest(BaseModel):
    """
    Input DTO for the match endpoint. Omitted fields fall back to the configured defaults.
    """

    genre_weight: Optional[int] = Field(None, ge=0)
    tag_weight: Optional[int] = Field(None, ge=0)
    platform_weight: Optional[int] = Field(None, ge=0)
    min_score: Optional[int] = Field(None, ge=0)
    top_n: Optional[int] = Field(None, ge=1, le=100)
    candidate_pool_size: Optional[int] = Field(
        None, ge=1, le=1000, description="Number of catalog games considered as candidates."
    )

    def apply_to(self, defaults: MatchWeights) -> MatchWeights:
        overrides = self.model_dump(exclude_none=True, exclude={"candidate_pool_size"})
        return defaults.model_copy(update=overrides)


class GameMatch(BaseModel):
    """A ranked candidate returned by the match engine."""

    id: str
    title: str
    score: int
    genres: List[str]
    platforms: List[str]
    tags: List[str]
