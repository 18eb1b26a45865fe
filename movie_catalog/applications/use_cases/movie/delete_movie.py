from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteMovieUseCase:
    """Logical deletion: the movie is tombstoned, its votes stay in the store."""

    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> None:
        logger.info(f"Deleting movie {movie_id}")

        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie or not existing_movie.is_active:
            raise NotFoundError("Movie not found")

        if not await self.movie_repository.soft_delete(movie_id):
            # deleted by a concurrent request between the lookup and the update
            raise NotFoundError("Movie not found")
