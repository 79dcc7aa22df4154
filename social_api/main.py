import logging
import time

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from .config import get_settings
from .db import close_mongo_connection, connect_to_mongo, is_connected
from .routers import member_types, posts, profiles, users
from .services.user_deletion_service import get_user_deletion_service

LOGGER = logging.getLogger("uvicorn.error")

app = FastAPI(title="Social API", default_response_class=ORJSONResponse)
settings = get_settings()

LOGGER.info("CORS allow_origins=%s", settings.allow_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)
app.add_middleware(GZipMiddleware, minimum_size=512)


# Simple slow-request logger
@app.middleware("http")
async def log_slow_requests(request, call_next):
    t0 = time.time()
    response = await call_next(request)
    dt = (time.time() - t0) * 1000
    if dt >= get_settings().slow_request_ms:
        LOGGER.warning(
            "slow request %s %s %sms status=%s",
            request.method,
            request.url.path,
            int(dt),
            response.status_code,
        )
    return response


@app.on_event("startup")
async def startup():
    await connect_to_mongo()
    # Finish cascades a previous process left half done (best-effort)
    try:
        resumed = await get_user_deletion_service().resume_pending_deletions()
        if resumed:
            LOGGER.info("Resumed %s pending user deletion(s)", resumed)
    except Exception as exc:
        LOGGER.error("Resuming pending user deletions failed (non-fatal): %s", exc)


@app.on_event("shutdown")
async def shutdown():
    await close_mongo_connection()


# Routers
app.include_router(users.router, prefix="/api")
app.include_router(profiles.router, prefix="/api")
app.include_router(posts.router, prefix="/api")
app.include_router(member_types.router, prefix="/api")


@app.get("/")
async def root():
    return {"status": "social-api-ok"}


@app.get("/api/health/db")
async def db_health():
    return {
        "mongo": "connected" if is_connected() else "disconnected",
        "db": str(get_settings().mongo_db),
    }


def run() -> None:
    uvicorn.run("social_api.main:app", host="0.0.0.0", port=get_settings().port)
