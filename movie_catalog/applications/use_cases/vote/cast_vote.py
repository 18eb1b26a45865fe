from typing import Optional

from movie_catalog.applications.interfaces.dtos.vote import VotePublic, VoteSchema
from movie_catalog.domain.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from movie_catalog.domain.models.vote import Vote
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.repositories.vote_repository import VoteRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.domain.ports.services.validator import Validator
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CastVoteUseCase:
    """Records one user's rating of an active movie.

    The steps run in a fixed order and stop at the first failure:

    1. the movie must exist and not be soft-deleted (``NotFoundError``);
    2. the value must be present (``InvalidInputError``), zero counts as
       absent unless ``allow_zero_votes`` is set;
    3. the credential must resolve to a known user (``UnauthenticatedError``);
    4. with ``one_vote_per_user`` set, the user must not have voted on this
       movie yet (``ConflictError``);
    5. the vote must satisfy its validation schema (``ValidationError``);
    6. the vote is persisted.
    """

    def __init__(
        self,
        movie_repository: MovieRepository,
        vote_repository: VoteRepository,
        user_repository: UserRepository,
        auth_service: AuthService,
        validator: Validator,
        allow_zero_votes: bool = False,
        one_vote_per_user: bool = False,
    ):
        self.movie_repository = movie_repository
        self.vote_repository = vote_repository
        self.user_repository = user_repository
        self.auth_service = auth_service
        self.validator = validator
        self.allow_zero_votes = allow_zero_votes
        self.one_vote_per_user = one_vote_per_user

    def _is_missing(self, value: Optional[float]) -> bool:
        if value is None:
            return True
        return value == 0 and not self.allow_zero_votes

    async def execute(self, movie_id: int, vote_data: VoteSchema, credential: str) -> VotePublic:
        logger.info(f"Voting on movie {movie_id}")

        movie = await self.movie_repository.get_by_id(movie_id)
        if not movie or not movie.is_active:
            raise NotFoundError("Movie not found.")

        if self._is_missing(vote_data.value):
            raise InvalidInputError("Invalid parameters passed to request.")

        user_id = await self.auth_service.resolve_identity(credential)
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise UnauthenticatedError("User not found or not authenticated.")

        if self.one_vote_per_user:
            existing_vote = await self.vote_repository.get_by_user_and_movie(user.id, movie.id)
            if existing_vote:
                raise ConflictError("User has already voted on this movie.")

        vote = Vote(value=vote_data.value, user_id=user.id, movie_id=movie.id)
        violations = self.validator.validate(vote)
        if violations:
            raise ValidationError(violations)

        created_vote = await self.vote_repository.create(vote)
        logger.info(f"Vote {created_vote.id} recorded on movie {movie.id} by user {user.id}")

        return VotePublic(
            id=created_vote.id,
            value=created_vote.value,
            user_id=created_vote.user_id,
            movie_id=created_vote.movie_id,
            created_at=created_vote.created_at,
        )
