from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from movie_catalog.domain.models.rating_summary import RatingSummary
from movie_catalog.domain.models.vote import Vote
from movie_catalog.domain.services import rating_aggregator

TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 250
DIRECTOR_MAX_LENGTH = 50


class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    ANIMATION = "Animation"
    COMEDY = "Comedy"
    DOCUMENTARY = "Documentary"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    ROMANCE = "Romance"
    SCI_FI = "SciFi"
    THRILLER = "Thriller"


class MovieStatus(str, Enum):
    ACTIVE = "active"
    DELETED = "deleted"


@dataclass
class Movie:
    title: str
    description: str
    director: str
    genre: Genre
    votes: List[Vote]
    id: Optional[int] = None
    deleted_at: Optional[datetime] = None

    @property
    def status(self) -> MovieStatus:
        return MovieStatus.DELETED if self.deleted_at is not None else MovieStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is MovieStatus.ACTIVE

    def vote_values(self) -> List[float]:
        return [vote.value for vote in self.votes]

    def calculate_average_rating(self) -> str:
        return rating_aggregator.format_average(self.vote_values())

    def rating_summary(self) -> RatingSummary:
        return rating_aggregator.summarize(self.id, self.vote_values())
