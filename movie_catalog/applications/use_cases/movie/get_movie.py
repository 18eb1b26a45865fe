from movie_catalog.applications.interfaces.dtos.movie import MoviePublic
from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> MoviePublic:
        logger.info(f"Finding movie {movie_id}")

        movie = await self.movie_repository.get_by_id(movie_id)
        if not movie or not movie.is_active:
            raise NotFoundError("Movie not found")

        return MoviePublic(
            id=movie.id,
            title=movie.title,
            description=movie.description,
            director=movie.director,
            genre=movie.genre,
        )
