from dataclasses import asdict, dataclass
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

# Integer columns are 32-bit signed on every supported store.
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1

StoreInt = Annotated[int, Field(ge=INTEGER_MIN, le=INTEGER_MAX)]


@dataclass(frozen=True)
class CandidateCreate:
    """A creation payload after validation, with every default applied."""

    name: str
    age: int
    email: str
    phone: str
    skills: str
    experience: int
    applied_position: str
    status: str

    def as_row(self) -> dict:
        return asdict(self)


class CandidateUpdate(BaseModel):
    name: str
    status: str
    experience: StoreInt | None = 0

    @field_validator("experience")
    @classmethod
    def _default_experience(cls, v: int | None) -> int:
        return 0 if v is None else v
