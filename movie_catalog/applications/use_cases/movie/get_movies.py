from movie_catalog.applications.interfaces.dtos.movie import MovieFilter, MoviePublic, MovieRating, MovieRatingList
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_filter: MovieFilter) -> MovieRatingList:
        logger.info(
            "Finding movies (director=%s, title=%s, genre=%s)",
            movie_filter.director,
            movie_filter.title,
            movie_filter.genre,
        )

        movies = await self.movie_repository.find_movies(
            director=movie_filter.director,
            title=movie_filter.title,
            genre=movie_filter.genre,
            offset=movie_filter.offset,
            limit=movie_filter.limit,
        )

        ratings = []
        for movie in movies:
            summary = movie.rating_summary()
            ratings.append(
                MovieRating(
                    movie=MoviePublic(
                        id=movie.id,
                        title=movie.title,
                        description=movie.description,
                        director=movie.director,
                        genre=movie.genre,
                    ),
                    average_rating=summary.average_rating,
                    vote_count=summary.vote_count,
                )
            )

        return MovieRatingList(movies=ratings)
