from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class Operation(str, Enum):
    addition = "addition"
    subtraction = "subtraction"
    multiplication = "multiplication"
    division = "division"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operation.addition: "+",
    Operation.subtraction: "-",
    Operation.multiplication: "×",
    Operation.division: "÷",
}


def canonical(operations) -> List[Operation]:
    """Order a collection of operations the way they are declared on the enum."""
    wanted = set(operations)
    return [op for op in Operation if op in wanted]


class QuizError(Exception):
    """Base class for errors raised by the quiz core."""


class UnknownAgeGroup(QuizError):
    pass


class OperationNotAllowed(QuizError):
    pass


class AgeGroupConfig(BaseModel):
    """One difficulty tier: which operations it offers and how big operands get."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    max_number: int = Field(gt=0)
    operations: FrozenSet[Operation]
    # upper bound for addition operands (the lowest tier counts to 3)
    addition_max: int = Field(gt=0)
    # upper bound N for multiplication factors and division divisor/quotient
    factor_max: int = Field(default=10, gt=0)

    @model_validator(mode="before")
    @classmethod
    def _default_addition_max(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("addition_max"):
            data = {**data, "addition_max": data.get("max_number")}
        return data

    @model_validator(mode="after")
    def _check(self) -> "AgeGroupConfig":
        if not self.operations:
            raise ValueError(f"age group {self.id!r} must allow at least one operation")
        if Operation.addition not in self.operations:
            # addition is the fallback when a toggle would empty the selection
            raise ValueError(f"age group {self.id!r} must allow addition")
        return self


class Problem(BaseModel):
    model_config = ConfigDict(frozen=True)

    operand1: int
    operand2: int
    operation: Operation
    correct_answer: int
    options: List[int]

    @model_validator(mode="after")
    def _check_options(self) -> "Problem":
        if len(self.options) != 4 or len(set(self.options)) != 4:
            raise ValueError("a problem needs exactly four distinct options")
        if self.options.count(self.correct_answer) != 1:
            raise ValueError("options must contain the correct answer exactly once")
        return self

    @computed_field
    @property
    def prompt(self) -> str:
        return f"{self.operand1} {self.operation.symbol} {self.operand2} = ?"
