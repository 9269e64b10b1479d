# mathquiz/schemas/age_groups.py
from typing import List

from pydantic import BaseModel

from models import AgeGroupConfig, Operation, canonical


class AgeGroupOut(BaseModel):
    id: str
    name: str
    description: str
    max_number: int
    operations: List[Operation]
    default: bool = False

    @classmethod
    def from_config(cls, group: AgeGroupConfig, default_id: str) -> "AgeGroupOut":
        return cls(
            id=group.id,
            name=group.name,
            description=group.description,
            max_number=group.max_number,
            operations=canonical(group.operations),
            default=group.id == default_id,
        )
