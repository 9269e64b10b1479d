from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from deps.auth import require_admin
from store import SessionStore, get_store

logger = logging.getLogger("mathquiz.admin")

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/purge")
def purge_sessions(store: SessionStore = Depends(get_store)):
    n = store.purge_expired()
    logger.info("admin purge removed %d sessions", n)
    return {"ok": True, "purged": n, "active": len(store)}
