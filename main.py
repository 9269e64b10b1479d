import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from routers.admin import router as admin_router

# Routers
from routers.age_groups import router as age_groups_router
from routers.health import router as health_router
from routers.sessions import router as sessions_router

logger = logging.getLogger("mathquiz")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Math Quiz Champion API")

# Allow calls from the quiz front-end
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(age_groups_router)  # /age-groups/...
app.include_router(sessions_router)  # /sessions/...
app.include_router(health_router)  # /health/...
app.include_router(admin_router)  # /admin/...


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
