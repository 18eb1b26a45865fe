from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.repositories.vote_repository import VoteRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.domain.ports.services.validator import Validator
from movie_catalog.domain.services.schema_validator import SchemaValidator
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_vote_repository import (
    SQLAlchemyVoteRepository,
)
from movie_catalog.infrastructure.adapters.services.jwt_auth_service import JWTAuthService
from movie_catalog.infrastructure.config.settings import CatalogSettings, Settings
from movie_catalog.infrastructure.persistence.database import get_session

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def get_settings() -> Settings:
    return Settings()


def get_catalog_settings() -> CatalogSettings:
    return CatalogSettings()


def get_validator() -> Validator:
    return SchemaValidator()


def get_auth_service(settings: Annotated[Settings, Depends(get_settings)]) -> AuthService:
    return JWTAuthService(settings)


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    return SQLAlchemyUserRepository(session)


def get_movie_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> MovieRepository:
    return SQLAlchemyMovieRepository(session)


def get_vote_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> VoteRepository:
    return SQLAlchemyVoteRepository(session)
