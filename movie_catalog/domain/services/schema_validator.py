from typing import Annotated, Any, Dict, List, Optional, Type

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from movie_catalog.domain.exceptions import ConfigurationError
from movie_catalog.domain.models.movie import (
    DESCRIPTION_MAX_LENGTH,
    DIRECTOR_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Genre,
    Movie,
)
from movie_catalog.domain.models.vote import Vote
from movie_catalog.domain.ports.services.validator import ConstraintViolation, Validator


class MovieRules(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: Annotated[str, Field(min_length=1, max_length=TITLE_MAX_LENGTH)]
    description: Annotated[str, Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)]
    director: Annotated[str, Field(min_length=1, max_length=DIRECTOR_MAX_LENGTH)]
    genre: Genre


class VoteRules(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    # strict keeps bools and numeric strings out
    value: Annotated[float, Field(strict=True, allow_inf_nan=False)]
    user_id: int
    movie_id: int


DEFAULT_SCHEMAS: Dict[type, Type[BaseModel]] = {
    Movie: MovieRules,
    Vote: VoteRules,
}


class SchemaValidator(Validator):
    """Checks entities against the pydantic model registered for their type.

    Every failing field constraint yields its own violation, named after the
    pydantic error type (``string_too_long``, ``enum``, ``finite_number``...).
    """

    def __init__(self, schemas: Optional[Dict[type, Type[BaseModel]]] = None):
        self.schemas = dict(DEFAULT_SCHEMAS if schemas is None else schemas)

    def validate(self, entity: Any) -> List[ConstraintViolation]:
        schema = self.schemas.get(type(entity))
        if schema is None:
            raise ConfigurationError(f"No validation schema registered for {type(entity).__name__}")

        try:
            schema.model_validate(entity, from_attributes=True)
        except pydantic.ValidationError as e:
            return [self._to_violation(error) for error in e.errors()]
        return []

    @staticmethod
    def _to_violation(error: Dict[str, Any]) -> ConstraintViolation:
        field = ".".join(str(part) for part in error["loc"])
        return ConstraintViolation(field=field, constraint=error["type"], message=f"{field}: {error['msg']}")
