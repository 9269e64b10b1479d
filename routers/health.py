# mathquiz/routers/health.py
from fastapi import APIRouter, Depends

from store import SessionStore, get_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/sessions")
def health_sessions(store: SessionStore = Depends(get_store)):
    return {
        "ok": True,
        "active": len(store),
        "variant": store.bank.variant,
        "default_age_group": store.bank.default_id,
    }
