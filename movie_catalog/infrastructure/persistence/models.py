from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, registry, relationship

from movie_catalog.domain.models.movie import DESCRIPTION_MAX_LENGTH, DIRECTOR_MAX_LENGTH, TITLE_MAX_LENGTH, Genre

table_registry = registry()


@table_registry.mapped_as_dataclass
class Vote:
    __tablename__ = "votes"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    value: Mapped[float]
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), init=False, server_default=func.now())

    user: Mapped["User"] = relationship("User", back_populates="votes", init=False)
    movie: Mapped["Movie"] = relationship("Movie", back_populates="votes", init=False)


@table_registry.mapped_as_dataclass
class User:
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    username: Mapped[str] = mapped_column(String(50), unique=True)
    email: Mapped[str] = mapped_column(String(255), unique=True)
    password: Mapped[str]
    votes: Mapped[List[Vote]] = relationship("Vote", back_populates="user", default_factory=list, init=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), init=False, server_default=func.now())


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH))
    description: Mapped[str] = mapped_column(String(DESCRIPTION_MAX_LENGTH))
    director: Mapped[str] = mapped_column(String(DIRECTOR_MAX_LENGTH))
    genre: Mapped[Genre] = mapped_column(
        Enum(Genre, name="genre", values_callable=lambda genres: [g.value for g in genres])
    )
    # soft-delete tombstone, NULL while the movie is active
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=None, index=True)
    votes: Mapped[List[Vote]] = relationship("Vote", back_populates="movie", default_factory=list, init=False)
