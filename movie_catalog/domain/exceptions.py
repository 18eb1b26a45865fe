from typing import List

from movie_catalog.domain.ports.services.validator import ConstraintViolation


class DomainError(Exception):
    pass


class InvalidInputError(DomainError):
    pass


class ValidationError(DomainError):
    def __init__(self, violations: List[ConstraintViolation]):
        self.violations = list(violations)
        super().__init__("Validation error - " + "; ".join(v.message for v in self.violations))

    @property
    def messages(self) -> List[str]:
        return [v.message for v in self.violations]


class NotFoundError(DomainError):
    pass


class UnauthenticatedError(DomainError):
    pass


class ConflictError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass
