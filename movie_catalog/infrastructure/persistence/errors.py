from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from movie_catalog.domain.exceptions import RepositoryError
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


def store_operation(func):
    """Turn driver/ORM failures of a repository coroutine into ``RepositoryError``.

    The session is rolled back and the original error logged with its
    traceback; only a generic message travels up to the caller.
    """

    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.exception(f"Catalog store failure in {func.__qualname__}")
            await self.session.rollback()
            raise RepositoryError("Catalog store failure") from e

    return wrapper
