from movie_catalog.applications.interfaces.dtos.vote import VoteList, VotePublic
from movie_catalog.domain.ports.repositories.vote_repository import VoteRepository


class ListMovieVotesUseCase:
    """Votes recorded on a movie, whether or not the movie was soft-deleted since."""

    def __init__(self, vote_repository: VoteRepository):
        self.vote_repository = vote_repository

    async def execute(self, movie_id: int) -> VoteList:
        votes = await self.vote_repository.get_by_movie_id(movie_id)
        return VoteList(
            votes=[
                VotePublic(
                    id=v.id,
                    value=v.value,
                    user_id=v.user_id,
                    movie_id=v.movie_id,
                    created_at=v.created_at,
                )
                for v in votes
            ]
        )
