from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.models.vote import Vote as DomainVote
from movie_catalog.domain.ports.repositories.vote_repository import VoteRepository
from movie_catalog.infrastructure.persistence.errors import store_operation
from movie_catalog.infrastructure.persistence.models import Vote as SQLVote


class SQLAlchemyVoteRepository(VoteRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, row: SQLVote) -> DomainVote:
        return DomainVote(
            id=row.id,
            value=row.value,
            user_id=row.user_id,
            movie_id=row.movie_id,
            created_at=row.created_at,
        )

    @store_operation
    async def create(self, vote: DomainVote) -> DomainVote:
        sql_vote = SQLVote(value=vote.value, user_id=vote.user_id, movie_id=vote.movie_id)
        self.session.add(sql_vote)
        await self.session.commit()
        await self.session.refresh(sql_vote)
        return self._to_domain(sql_vote)

    @store_operation
    async def get_by_movie_id(self, movie_id: int) -> List[DomainVote]:
        # no join on movies: votes of soft-deleted movies are still returned
        sql_votes = await self.session.scalars(
            select(SQLVote).where(SQLVote.movie_id == movie_id).order_by(SQLVote.id)
        )
        return [self._to_domain(row) for row in sql_votes.all()]

    @store_operation
    async def get_by_user_and_movie(self, user_id: int, movie_id: int) -> Optional[DomainVote]:
        sql_vote = await self.session.scalar(
            select(SQLVote).where(SQLVote.user_id == user_id, SQLVote.movie_id == movie_id).limit(1)
        )
        return self._to_domain(sql_vote) if sql_vote else None
