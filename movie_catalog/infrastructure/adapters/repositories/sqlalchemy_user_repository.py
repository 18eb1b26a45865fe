from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.models.user import User as DomainUser
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.infrastructure.persistence.errors import store_operation
from movie_catalog.infrastructure.persistence.models import User as SQLUser


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_user: SQLUser) -> DomainUser:
        return DomainUser(
            username=sql_user.username,
            email=sql_user.email,
            password_hash=sql_user.password,
            id=sql_user.id,
            created_at=sql_user.created_at,
        )

    @store_operation
    async def create(self, user: DomainUser) -> DomainUser:
        sql_user = SQLUser(
            username=user.username,
            email=user.email,
            password=user.password_hash,
        )
        self.session.add(sql_user)
        await self.session.commit()
        await self.session.refresh(sql_user)
        return self._to_domain(sql_user)

    @store_operation
    async def get_by_id(self, user_id: int) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user_id))
        return self._to_domain(sql_user) if sql_user else None

    @store_operation
    async def get_by_email(self, email: str) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.email == email))
        return self._to_domain(sql_user) if sql_user else None

    @store_operation
    async def get_by_username_or_email(self, username: str, email: str) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(
            select(SQLUser).where((SQLUser.username == username) | (SQLUser.email == email))
        )
        return self._to_domain(sql_user) if sql_user else None
