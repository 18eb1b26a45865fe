from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List


@dataclass(frozen=True)
class ConstraintViolation:
    field: str
    constraint: str
    message: str

    def __str__(self) -> str:
        return self.message


class Validator(ABC):
    @abstractmethod
    def validate(self, entity: Any) -> List[ConstraintViolation]:
        pass
