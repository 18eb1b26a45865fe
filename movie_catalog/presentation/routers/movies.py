from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from movie_catalog.applications.interfaces.dtos.movie import (
    MovieFilter,
    MoviePublic,
    MovieRatingList,
    MovieSchema,
)
from movie_catalog.applications.interfaces.dtos.vote import VoteList, VotePublic, VoteSchema
from movie_catalog.applications.use_cases.movie.create_movie import CreateMovieUseCase
from movie_catalog.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_catalog.applications.use_cases.vote.cast_vote import CastVoteUseCase
from movie_catalog.applications.use_cases.vote.list_movie_votes import ListMovieVotesUseCase
from movie_catalog.domain.exceptions import DomainError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.repositories.vote_repository import VoteRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.domain.ports.services.validator import Validator
from movie_catalog.infrastructure.config.dependencies import (
    get_auth_service,
    get_catalog_settings,
    get_movie_repository,
    get_user_repository,
    get_validator,
    get_vote_repository,
    oauth2_scheme,
)
from movie_catalog.infrastructure.config.settings import CatalogSettings
from movie_catalog.presentation.errors import to_http_exception

router = APIRouter(prefix="/movies", tags=["movies"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
VoteRepositoryDep = Annotated[VoteRepository, Depends(get_vote_repository)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ValidatorDep = Annotated[Validator, Depends(get_validator)]
CatalogSettingsDep = Annotated[CatalogSettings, Depends(get_catalog_settings)]
CredentialDep = Annotated[str, Depends(oauth2_scheme)]


@router.get("/", response_model=MovieRatingList)
async def read_movies(filter_movies: Annotated[MovieFilter, Query()], movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMoviesUseCase(movie_repository)
        return await use_case.execute(filter_movies)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: int, movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(movie: MovieSchema, movie_repository: MovieRepositoryDep, validator: ValidatorDep):
    try:
        use_case = CreateMovieUseCase(movie_repository, validator)
        return await use_case.execute(movie)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{movie_id}/votes", status_code=HTTPStatus.CREATED, response_model=VotePublic)
async def cast_vote(
    movie_id: int,
    vote: VoteSchema,
    credential: CredentialDep,
    movie_repository: MovieRepositoryDep,
    vote_repository: VoteRepositoryDep,
    user_repository: UserRepositoryDep,
    auth_service: AuthServiceDep,
    validator: ValidatorDep,
    catalog_settings: CatalogSettingsDep,
):
    try:
        use_case = CastVoteUseCase(
            movie_repository,
            vote_repository,
            user_repository,
            auth_service,
            validator,
            allow_zero_votes=catalog_settings.allow_zero_votes,
            one_vote_per_user=catalog_settings.one_vote_per_user,
        )
        return await use_case.execute(movie_id, vote, credential)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{movie_id}/votes", response_model=VoteList)
async def read_movie_votes(movie_id: int, vote_repository: VoteRepositoryDep):
    try:
        use_case = ListMovieVotesUseCase(vote_repository)
        return await use_case.execute(movie_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{movie_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_movie(movie_id: int, movie_repository: MovieRepositoryDep):
    try:
        use_case = DeleteMovieUseCase(movie_repository)
        await use_case.execute(movie_id)
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=HTTPStatus.NO_CONTENT)
