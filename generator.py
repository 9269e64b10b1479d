from __future__ import annotations

import random
from typing import Iterable, List, Optional

from models import AgeGroupConfig, Operation, OperationNotAllowed, Problem, canonical

# --- Wrong-answer policy ----------------------------------------------------------
WRONG_ANSWER_COUNT = 3

# Half-width of the "near miss" strategy: offsets are drawn from [-5, 4]
PERTURBATION = 5

SPREAD = {
    Operation.addition: 20,
    Operation.subtraction: 20,
    Operation.multiplication: 30,
    Operation.division: 25,
}

# After this many rejected candidates the remaining slots are filled sequentially
MAX_ATTEMPTS = 1000


def wrong_answers(
    correct_answer: int, operation: Operation, rng: Optional[random.Random] = None
) -> List[int]:
    """
    Return three distinct positive distractors, none equal to correct_answer.

    Each candidate comes from one of two strategies picked with equal
    probability: a small perturbation of the answer, or an offset inside an
    operation-dependent spread floored at 1.
    """
    rng = rng or random.Random()
    spread = SPREAD[operation]
    accepted: List[int] = []

    attempts = 0
    while len(accepted) < WRONG_ANSWER_COUNT and attempts < MAX_ATTEMPTS:
        attempts += 1
        if rng.random() < 0.5:
            candidate = correct_answer + rng.randint(-PERTURBATION, PERTURBATION - 1)
        else:
            candidate = max(1, correct_answer + rng.randint(0, spread - 1) - spread // 2)

        if candidate > 0 and candidate != correct_answer and candidate not in accepted:
            accepted.append(candidate)

    candidate = max(correct_answer, 0)
    while len(accepted) < WRONG_ANSWER_COUNT:
        candidate += 1
        if candidate not in accepted:
            accepted.append(candidate)

    return accepted


# --- Problem generation -----------------------------------------------------------


class ProblemGenerator:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _operands(self, config: AgeGroupConfig, operation: Operation):
        rng = self.rng
        if operation is Operation.addition:
            a = rng.randint(1, config.addition_max)
            b = rng.randint(1, config.addition_max)
            return a, b, a + b
        if operation is Operation.subtraction:
            a = rng.randint(1, config.max_number)
            b = rng.randint(1, a)
            return a, b, a - b
        if operation is Operation.multiplication:
            a = rng.randint(1, config.factor_max)
            b = rng.randint(1, config.factor_max)
            return a, b, a * b
        # division is built from its answer so the quotient is always whole
        divisor = rng.randint(1, config.factor_max)
        quotient = rng.randint(1, config.factor_max)
        return divisor * quotient, divisor, quotient

    def generate(self, config: AgeGroupConfig, operations: Iterable[Operation]) -> Problem:
        ops = canonical(operations)
        if not ops:
            raise ValueError("cannot generate a problem without at least one operation")
        outside = [op.value for op in ops if op not in config.operations]
        if outside:
            raise OperationNotAllowed(f"{config.id} does not offer {', '.join(outside)}")

        operation = self.rng.choice(ops)
        operand1, operand2, answer = self._operands(config, operation)

        options = [answer] + wrong_answers(answer, operation, self.rng)
        self.rng.shuffle(options)

        return Problem(
            operand1=operand1,
            operand2=operand2,
            operation=operation,
            correct_answer=answer,
            options=options,
        )
