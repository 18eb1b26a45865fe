from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from movie_catalog.domain.models.movie import Genre


class MovieSchema(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    director: Optional[str] = None
    genre: Optional[str] = None


class MoviePublic(BaseModel):
    id: int
    title: str
    description: str
    director: str
    genre: Genre
    model_config = ConfigDict(from_attributes=True)


class MovieFilter(BaseModel):
    offset: int = Field(default=0, ge=0, description="Number of movies to skip")
    limit: int = Field(default=100, gt=0, le=1000, description="Maximum number of movies to return")
    director: Optional[str] = Field(default=None, description="Exact director name")
    title: Optional[str] = Field(default=None, description="Exact movie title")
    genre: Optional[Genre] = Field(default=None, description="Movie genre")


class MovieRating(BaseModel):
    movie: MoviePublic
    average_rating: str
    vote_count: int


class MovieRatingList(BaseModel):
    movies: list[MovieRating]
