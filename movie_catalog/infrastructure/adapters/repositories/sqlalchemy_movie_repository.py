from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from movie_catalog.domain.models.movie import Genre
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.models.vote import Vote as DomainVote
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.persistence.errors import store_operation
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie, with_votes: bool = False) -> DomainMovie:
        votes = []
        if with_votes:
            votes = [
                DomainVote(
                    id=v.id,
                    value=v.value,
                    user_id=v.user_id,
                    movie_id=v.movie_id,
                    created_at=v.created_at,
                )
                for v in sql_movie.votes
            ]
        return DomainMovie(
            sql_movie.title,
            sql_movie.description,
            sql_movie.director,
            sql_movie.genre,
            votes,
            id=sql_movie.id,
            deleted_at=sql_movie.deleted_at,
        )

    @store_operation
    async def find_movies(
        self,
        director: Optional[str] = None,
        title: Optional[str] = None,
        genre: Optional[Genre] = None,
        offset: int = 0,
        limit: int = 100,
    ) -> List[DomainMovie]:
        query = (
            select(SQLMovie)
            .options(selectinload(SQLMovie.votes))
            .where(SQLMovie.deleted_at.is_(None))
            .execution_options(populate_existing=True)
        )
        if director:
            query = query.where(SQLMovie.director == director)
        if title:
            query = query.where(SQLMovie.title == title)
        if genre:
            query = query.where(SQLMovie.genre == genre)

        result = await self.session.scalars(query.order_by(SQLMovie.id).offset(offset).limit(limit))
        return [self._to_domain(movie, with_votes=True) for movie in result.all()]

    @store_operation
    async def get_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        sql_movie = await self.session.scalar(
            select(SQLMovie).where(SQLMovie.id == movie_id, SQLMovie.deleted_at.is_(None))
        )
        return self._to_domain(sql_movie) if sql_movie else None

    @store_operation
    async def create(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = SQLMovie(
            title=movie.title,
            description=movie.description,
            director=movie.director,
            genre=movie.genre,
        )
        self.session.add(sql_movie)
        await self.session.commit()
        await self.session.refresh(sql_movie)
        return self._to_domain(sql_movie)

    @store_operation
    async def soft_delete(self, movie_id: int) -> bool:
        result = await self.session.execute(
            update(SQLMovie)
            .where(SQLMovie.id == movie_id, SQLMovie.deleted_at.is_(None))
            .values(deleted_at=datetime.now(tz=ZoneInfo("UTC")))
        )
        await self.session.commit()
        return (result.rowcount or 0) > 0
