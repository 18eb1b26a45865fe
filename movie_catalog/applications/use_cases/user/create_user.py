from movie_catalog.applications.interfaces.dtos.user import UserPublic, UserSchema
from movie_catalog.domain.exceptions import ConflictError
from movie_catalog.domain.models.user import User
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateUserUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def execute(self, user_data: UserSchema) -> UserPublic:
        logger.info(f"Creating user: {user_data.username}")

        existing_user = await self.user_repository.get_by_username_or_email(user_data.username, user_data.email)
        if existing_user:
            if existing_user.username == user_data.username:
                raise ConflictError("Username already exists")
            raise ConflictError("Email already exists")

        user = User(
            username=user_data.username,
            email=user_data.email,
            password_hash=self.auth_service.hash_password(user_data.password),
        )

        created_user = await self.user_repository.create(user)

        if created_user.id is None:
            raise RuntimeError("User creation failed - no ID assigned")

        logger.info(f"User created successfully: {created_user.username}")

        return UserPublic(id=created_user.id, username=created_user.username, email=created_user.email)
