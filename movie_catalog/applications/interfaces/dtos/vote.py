from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class VoteSchema(BaseModel):
    value: Optional[float] = None


class VotePublic(BaseModel):
    id: int
    value: float
    user_id: int
    movie_id: int
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class VoteList(BaseModel):
    votes: list[VotePublic]
