import math

import pytest
from pydantic import BaseModel, ConfigDict, Field

from movie_catalog.domain.exceptions import ConfigurationError, ValidationError
from movie_catalog.domain.models.movie import Genre, Movie
from movie_catalog.domain.models.vote import Vote
from movie_catalog.domain.services.schema_validator import SchemaValidator


class TestSchemaValidator:
    @pytest.fixture
    def valid_movie(self):
        return Movie("Matrix", "desc", "Wachowski", Genre.SCI_FI, [])

    def test_valid_movie_has_no_violations(self, validator, valid_movie):
        assert validator.validate(valid_movie) == []

    def test_genre_given_as_raw_value_is_accepted(self, validator):
        movie = Movie("Matrix", "desc", "Wachowski", "SciFi", [])

        assert validator.validate(movie) == []

    def test_title_too_long(self, validator):
        movie = Movie("x" * 51, "desc", "Wachowski", Genre.SCI_FI, [])

        violations = validator.validate(movie)

        assert len(violations) == 1
        assert violations[0].field == "title"
        assert violations[0].constraint == "string_too_long"
        assert violations[0].message.startswith("title: ")
        assert "50" in violations[0].message

    def test_title_at_bound_is_accepted(self, validator):
        movie = Movie("x" * 50, "d" * 250, "y" * 50, Genre.DRAMA, [])

        assert validator.validate(movie) == []

    def test_empty_title(self, validator):
        violations = validator.validate(Movie("", "desc", "Wachowski", Genre.DRAMA, []))

        assert [(v.field, v.constraint) for v in violations] == [("title", "string_too_short")]

    def test_every_violation_is_reported(self, validator):
        movie = Movie("x" * 60, "d" * 300, None, "Western", [])

        violations = validator.validate(movie)

        assert [v.field for v in violations] == ["title", "description", "director", "genre"]
        assert violations[3].constraint == "enum"

    def test_vote_without_value(self, validator):
        violations = validator.validate(Vote(value=None, user_id=1, movie_id=1))

        assert [v.field for v in violations] == ["value"]

    def test_vote_with_non_numeric_value(self, validator):
        violations = validator.validate(Vote(value="five", user_id=1, movie_id=1))

        assert [v.field for v in violations] == ["value"]

    def test_integer_vote_is_a_number(self, validator):
        assert validator.validate(Vote(value=5, user_id=1, movie_id=1)) == []

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_vote(self, validator, value):
        violations = validator.validate(Vote(value=value, user_id=1, movie_id=1))

        assert [(v.field, v.constraint) for v in violations] == [("value", "finite_number")]

    def test_negative_and_zero_votes_are_numerically_valid(self, validator):
        assert validator.validate(Vote(value=-3.0, user_id=1, movie_id=1)) == []
        assert validator.validate(Vote(value=0.0, user_id=1, movie_id=1)) == []

    def test_custom_schema(self, valid_movie):
        class ShortTitle(BaseModel):
            model_config = ConfigDict(from_attributes=True)

            title: str = Field(max_length=3)

        validator = SchemaValidator({Movie: ShortTitle})

        violations = validator.validate(valid_movie)

        assert len(violations) == 1
        assert violations[0].field == "title"

    def test_unknown_entity_type(self, validator):
        with pytest.raises(ConfigurationError):
            validator.validate(object())

    def test_validation_error_lists_messages(self, validator):
        violations = validator.validate(Movie("x" * 51, "desc", "Wachowski", "Western", []))

        error = ValidationError(violations)

        assert len(error.messages) == 2
        assert str(error).startswith("Validation error - ")
        for message in error.messages:
            assert message in str(error)
