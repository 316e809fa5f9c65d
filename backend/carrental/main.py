import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from carrental.core.config import settings
from carrental.core.logger import get_logger
from carrental.db.bootstrap import init_db
from carrental.db.session import engine
from carrental.api.routers import (
    admin as admin_router,
    auth as auth_router,
    bookings as bookings_router,
    cars as cars_router,
)

logger = get_logger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# ---------------------------
# CORS
# ---------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------
# Request logging
# ---------------------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(
        "%s %s -> %s (%sms)", request.method, request.url.path, response.status_code, duration
    )
    return response


# ---------------------------
# Startup
# ---------------------------
@app.on_event("startup")
async def on_startup():
    await init_db(engine, seed=settings.SEED_ON_STARTUP)
    logger.info("Database ready")


# ---------------------------
# Routers
# ---------------------------
app.include_router(cars_router.router, prefix="/api", tags=["cars"])
app.include_router(bookings_router.router, prefix="/api", tags=["bookings"])
app.include_router(auth_router.router, prefix="/api", tags=["auth"])
app.include_router(admin_router.router, prefix="/api/admin", tags=["admin"])


# ---------------------------
# Health check
# ---------------------------
@app.get("/ping")
async def ping():
    return {"status": "ok"}


# ---------------------------
# Static files (site front end). Mounted last so /api/* wins.
# ---------------------------
app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

# ---------------------------
# Run
# ---------------------------
if __name__ == "__main__":
    uvicorn.run("carrental.main:app", host="0.0.0.0", port=8000, reload=True)
