from abc import ABC, abstractmethod

from movie_catalog.domain.models.user import User


class AuthService(ABC):
    @abstractmethod
    def hash_password(self, password: str) -> str:
        pass

    @abstractmethod
    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        pass

    @abstractmethod
    def create_access_token(self, user: User) -> str:
        pass

    @abstractmethod
    async def resolve_identity(self, credential: str) -> int:
        """Return the id of the user the credential was issued to.

        Raises ``UnauthenticatedError`` when the credential cannot be verified.
        """
        pass
