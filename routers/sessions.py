# mathquiz/routers/sessions.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from models import Operation, OperationNotAllowed, UnknownAgeGroup
from schemas.sessions import AgeGroupRequest, AnswerRequest, CreateSessionRequest, SessionOut
from session import SessionController
from store import SessionNotFound, SessionStore, get_store

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _controller(session_id: str, store: SessionStore) -> SessionController:
    try:
        return store.get(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="session not found")


@router.post("", response_model=SessionOut, status_code=201)
def create_session(
    req: Optional[CreateSessionRequest] = None,
    store: SessionStore = Depends(get_store),
):
    age_group = req.age_group if req else None
    try:
        session_id, controller = store.create(age_group)
    except UnknownAgeGroup:
        raise HTTPException(status_code=404, detail="age group not found")
    return {"id": session_id, "state": controller.snapshot()}


@router.get("/{session_id}", response_model=SessionOut)
def get_session(session_id: str, store: SessionStore = Depends(get_store)):
    controller = _controller(session_id, store)
    return {"id": session_id, "state": controller.snapshot()}


@router.post("/{session_id}/answer", response_model=SessionOut)
def select_answer(session_id: str, req: AnswerRequest, store: SessionStore = Depends(get_store)):
    controller = _controller(session_id, store)
    return {"id": session_id, "state": controller.select_answer(req.value)}


@router.post("/{session_id}/age-group", response_model=SessionOut)
def select_age_group(
    session_id: str, req: AgeGroupRequest, store: SessionStore = Depends(get_store)
):
    controller = _controller(session_id, store)
    try:
        group = store.bank.get(req.age_group)
    except UnknownAgeGroup:
        raise HTTPException(status_code=404, detail="age group not found")
    return {"id": session_id, "state": controller.select_age_group(group)}


@router.post("/{session_id}/operations/{operation}/toggle", response_model=SessionOut)
def toggle_operation(
    session_id: str, operation: Operation, store: SessionStore = Depends(get_store)
):
    controller = _controller(session_id, store)
    try:
        state = controller.toggle_operation(operation)
    except OperationNotAllowed as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"id": session_id, "state": state}


@router.post("/{session_id}/reset", response_model=SessionOut)
def reset_session(session_id: str, store: SessionStore = Depends(get_store)):
    controller = _controller(session_id, store)
    return {"id": session_id, "state": controller.reset()}


@router.delete("/{session_id}", status_code=204)
def delete_session(session_id: str, store: SessionStore = Depends(get_store)):
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail="session not found")
    return Response(status_code=204)
