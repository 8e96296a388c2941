import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import Settings
from app.core.errors import ShareItError
from app.core.logging import setup_logging
from app.db.base import Base
from app.db.session import engine
from app.api.routers import (
    users as users_router,
    items as items_router,
    bookings as bookings_router,
    requests as requests_router,
)

settings = Settings()

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# ---------------------------
# CORS
# ---------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------
# Startup
# ---------------------------
@app.on_event("startup")
async def on_startup():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ---------------------------
# Errors
# ---------------------------
@app.exception_handler(ShareItError)
async def shareit_error_handler(request: Request, exc: ShareItError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error at %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


# ---------------------------
# Routers
# ---------------------------
app.include_router(users_router.router, prefix="/users", tags=["users"])
app.include_router(items_router.router, prefix="/items", tags=["items"])
app.include_router(bookings_router.router, prefix="/bookings", tags=["bookings"])
app.include_router(requests_router.router, prefix="/requests", tags=["requests"])


# ---------------------------
# Health check
# ---------------------------
@app.get("/ping")
async def ping():
    return {"status": "ok"}


# ---------------------------
# Run
# ---------------------------
if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
