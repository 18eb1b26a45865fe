from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Vote:
    value: Optional[float]
    user_id: Optional[int]
    movie_id: Optional[int]
    id: Optional[int] = None
    created_at: Optional[datetime] = None
