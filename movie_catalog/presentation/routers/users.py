from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from movie_catalog.applications.interfaces.dtos.user import UserPublic, UserSchema
from movie_catalog.applications.use_cases.user.create_user import CreateUserUseCase
from movie_catalog.domain.exceptions import DomainError
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.config.dependencies import get_auth_service, get_user_repository
from movie_catalog.presentation.errors import to_http_exception

router = APIRouter(prefix="/users", tags=["users"])

UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/", status_code=HTTPStatus.CREATED, response_model=UserPublic)
async def create_user(user: UserSchema, user_repository: UserRepositoryDep, auth_service: AuthServiceDep):
    try:
        use_case = CreateUserUseCase(user_repository, auth_service)
        return await use_case.execute(user)
    except DomainError as e:
        raise to_http_exception(e)
