from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RatingSummary:
    """Read-time rating of a movie. Computed from its votes, never stored."""

    movie_id: Optional[int]
    vote_count: int
    average: Optional[float]
    average_rating: str
