from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from jwt import InvalidTokenError, decode, encode
from pwdlib import PasswordHash

from movie_catalog.domain.exceptions import UnauthenticatedError
from movie_catalog.domain.models.user import User as DomainUser
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.config.settings import Settings


class JWTAuthService(AuthService):
    def __init__(self, settings: Settings):
        self.settings = settings
        self.pwd_context = PasswordHash.recommended()

    def hash_password(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return self.pwd_context.verify(plain_password, hashed_password)

    def create_access_token(self, user: DomainUser) -> str:
        expire = datetime.now(tz=ZoneInfo("UTC")) + timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode = {"sub": str(user.id), "exp": expire}
        return encode(to_encode, self.settings.SECRET_KEY, algorithm=self.settings.ALGORITHM)

    async def resolve_identity(self, credential: str) -> int:
        if not credential:
            raise UnauthenticatedError("No access token provided.")

        try:
            payload = decode(credential, self.settings.SECRET_KEY, algorithms=[self.settings.ALGORITHM])
        except InvalidTokenError:
            raise UnauthenticatedError("Failed to authenticate token.")

        subject = payload.get("sub")
        if subject is None or not str(subject).isdigit():
            raise UnauthenticatedError("Failed to authenticate token.")

        return int(subject)
