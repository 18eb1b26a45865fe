from abc import ABC, abstractmethod
from typing import List, Optional

from movie_catalog.domain.models.movie import Genre, Movie


class MovieRepository(ABC):
    @abstractmethod
    async def find_movies(
        self,
        director: Optional[str] = None,
        title: Optional[str] = None,
        genre: Optional[Genre] = None,
        offset: int = 0,
        limit: int = 100,
    ) -> List[Movie]:
        """Active movies matching every given filter, with their votes loaded."""
        pass

    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Active movie with ``movie_id``; soft-deleted movies are not returned."""
        pass

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def soft_delete(self, movie_id: int) -> bool:
        pass
