from dataclasses import replace

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.domain.exceptions import InvalidInputError, ValidationError
from movie_catalog.domain.models.movie import Genre, Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.validator import Validator
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, validator: Validator):
        self.movie_repository = movie_repository
        self.validator = validator

    async def execute(self, movie_data: MovieSchema) -> MoviePublic:
        logger.info("Creating movie")

        if not (movie_data.title and movie_data.description):
            raise InvalidInputError("Invalid parameters passed to request.")

        movie = Movie(movie_data.title, movie_data.description, movie_data.director, movie_data.genre, [])

        violations = self.validator.validate(movie)
        if violations:
            logger.info(f"Movie rejected with {len(violations)} constraint violation(s)")
            raise ValidationError(violations)

        created_movie = await self.movie_repository.create(replace(movie, genre=Genre(movie.genre)))

        if created_movie.id is None:
            raise RuntimeError("Movie creation failed - no ID assigned")

        logger.info(f"Movie created successfully: {created_movie.id}")

        return MoviePublic(
            id=created_movie.id,
            title=created_movie.title,
            description=created_movie.description,
            director=created_movie.director,
            genre=created_movie.genre,
        )
