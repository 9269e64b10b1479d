# mathquiz/schemas/sessions.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from session import SessionState

# ---------- Requests ----------


class CreateSessionRequest(BaseModel):
    age_group: Optional[str] = None


class AnswerRequest(BaseModel):
    value: int


class AgeGroupRequest(BaseModel):
    age_group: str


# ---------- Responses ----------


class SessionOut(BaseModel):
    id: str
    state: SessionState
