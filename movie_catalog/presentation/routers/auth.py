from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm

from movie_catalog.applications.interfaces.dtos.message import Token
from movie_catalog.domain.exceptions import DomainError
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.config.dependencies import get_auth_service, get_user_repository
from movie_catalog.presentation.errors import to_http_exception

router = APIRouter(prefix="/auth", tags=["auth"])

OAuth2Form = Annotated[OAuth2PasswordRequestForm, Depends()]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/token", response_model=Token)
async def login_for_access_token(
    form_data: OAuth2Form, user_repository: UserRepositoryDep, auth_service: AuthServiceDep
):
    try:
        user = await user_repository.get_by_email(form_data.username)
    except DomainError as e:
        raise to_http_exception(e)

    if not user or not auth_service.verify_password(form_data.password, user.password_hash):
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = auth_service.create_access_token(user)

    return {"access_token": access_token, "token_type": "bearer"}
