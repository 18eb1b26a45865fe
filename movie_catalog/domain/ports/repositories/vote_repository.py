from abc import ABC, abstractmethod
from typing import List, Optional

from movie_catalog.domain.models.vote import Vote


class VoteRepository(ABC):
    @abstractmethod
    async def create(self, vote: Vote) -> Vote:
        pass

    @abstractmethod
    async def get_by_movie_id(self, movie_id: int) -> List[Vote]:
        pass

    @abstractmethod
    async def get_by_user_and_movie(self, user_id: int, movie_id: int) -> Optional[Vote]:
        pass
