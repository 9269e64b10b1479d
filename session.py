from __future__ import annotations

import logging
import random
import threading
from typing import Callable, List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, computed_field

import config
from generator import ProblemGenerator
from models import AgeGroupConfig, Operation, OperationNotAllowed, Problem, canonical

logger = logging.getLogger("mathquiz.session")

SUCCESS_FEEDBACK = "Good! 🌟"
FAILURE_FEEDBACK = "Not quite! The answer is {answer}. Try the next one! 💪"


def accuracy(score: int, total: int) -> int:
    """Percentage of correct answers, rounded half up; 0 before the first answer."""
    if total <= 0:
        return 0
    return (200 * score + total) // (2 * total)


class SessionState(BaseModel):
    """Immutable snapshot handed to the presentation layer after every change."""

    model_config = ConfigDict(frozen=True)

    age_group: str
    selected_operations: List[Operation]
    score: int = 0
    total_answered: int = 0
    current_problem: Optional[Problem] = None
    selected_answer: Optional[int] = None
    is_answered: bool = False
    feedback: Optional[str] = None
    celebrate: bool = False

    @computed_field
    @property
    def accuracy(self) -> int:
        return accuracy(self.score, self.total_answered)


# --- Scheduling -------------------------------------------------------------------


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable: ...


class ThreadingScheduler:
    """Runs callbacks on daemon timer threads."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


Listener = Callable[[SessionState], None]


# --- Controller -------------------------------------------------------------------


class SessionController:
    """
    Owns one quiz session: the current problem, the score counters and the
    answer state. Every public operation returns the new SessionState and
    notifies subscribers.

    After an answer the session stays "answered" for a short feedback window,
    then a scheduled callback generates the next problem. Each scheduled
    callback carries the generation token current at scheduling time; reset
    and config changes bump the token, so a callback that fires late finds a
    newer token and drops its result.
    """

    def __init__(
        self,
        age_group: AgeGroupConfig,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        success_delay_ms: int = config.SUCCESS_DELAY_MS,
        failure_delay_ms: int = config.FAILURE_DELAY_MS,
    ):
        self._lock = threading.RLock()
        self._scheduler = scheduler or ThreadingScheduler()
        self._generator = ProblemGenerator(rng)
        self._listeners: List[Listener] = []
        self.success_delay_ms = success_delay_ms
        self.failure_delay_ms = failure_delay_ms

        self._age_group = age_group
        self._operations = set(age_group.operations)
        self._score = 0
        self._total = 0
        self._problem: Optional[Problem] = None
        self._selected: Optional[int] = None
        self._feedback: Optional[str] = None
        self._celebrate = False

        self._token = 0
        self._pending: Optional[Cancellable] = None

        self._next_problem()

    # -- observers --

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: SessionState) -> SessionState:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(state)
        return state

    # -- queries --

    @property
    def age_group(self) -> AgeGroupConfig:
        return self._age_group

    @property
    def is_answered(self) -> bool:
        return self._selected is not None

    def snapshot(self) -> SessionState:
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> SessionState:
        return SessionState(
            age_group=self._age_group.id,
            selected_operations=canonical(self._operations),
            score=self._score,
            total_answered=self._total,
            current_problem=self._problem,
            selected_answer=self._selected,
            is_answered=self._selected is not None,
            feedback=self._feedback,
            celebrate=self._celebrate,
        )

    # -- internals --

    def _next_problem(self) -> None:
        self._problem = self._generator.generate(self._age_group, self._operations)
        self._selected = None
        self._feedback = None
        self._celebrate = False

    def _supersede_pending(self) -> None:
        self._token += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _advance(self, token: int) -> None:
        with self._lock:
            if token != self._token:
                logger.debug("dropping stale advance (token %d, current %d)", token, self._token)
                return
            self._pending = None
            self._next_problem()
            state = self._snapshot()
        self._publish(state)

    # -- intents --

    def select_answer(self, value: int) -> SessionState:
        with self._lock:
            if self._selected is not None or self._problem is None:
                return self._snapshot()

            self._selected = value
            self._total += 1
            correct = value == self._problem.correct_answer
            if correct:
                self._score += 1
                self._feedback = SUCCESS_FEEDBACK
                self._celebrate = True
            else:
                self._feedback = FAILURE_FEEDBACK.format(answer=self._problem.correct_answer)

            self._supersede_pending()
            token = self._token
            delay_ms = self.success_delay_ms if correct else self.failure_delay_ms
            self._pending = self._scheduler.call_later(delay_ms / 1000, lambda: self._advance(token))
            state = self._snapshot()
        return self._publish(state)

    def select_age_group(self, age_group: AgeGroupConfig) -> SessionState:
        with self._lock:
            if self._selected is not None:
                return self._snapshot()
            self._age_group = age_group
            self._operations = set(age_group.operations)
            self._supersede_pending()
            self._next_problem()
            state = self._snapshot()
        logger.info("age group changed to %s", age_group.id)
        return self._publish(state)

    def toggle_operation(self, operation: Operation) -> SessionState:
        with self._lock:
            if self._selected is not None:
                return self._snapshot()
            if operation not in self._age_group.operations:
                raise OperationNotAllowed(f"{self._age_group.id} does not offer {operation.value}")

            operations = set(self._operations)
            if operation in operations:
                operations.discard(operation)
            else:
                operations.add(operation)
            if not operations:
                operations.add(Operation.addition)

            self._operations = operations
            self._supersede_pending()
            self._next_problem()
            state = self._snapshot()
        return self._publish(state)

    def reset(self) -> SessionState:
        with self._lock:
            self._score = 0
            self._total = 0
            self._supersede_pending()
            self._next_problem()
            state = self._snapshot()
        return self._publish(state)

    def close(self) -> None:
        with self._lock:
            self._supersede_pending()
            self._listeners.clear()
