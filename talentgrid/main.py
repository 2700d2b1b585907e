# talentgrid/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from talentgrid.config import ENV, AUTO_MIGRATE, ALLOWED_ORIGINS, APP_NAME, APP_VERSION

# -----------
# Logging
# -----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("talentgrid")

# ----------------------------------------
# DB metadata (DEV ONLY: auto-create tables)
# ----------------------------------------
from talentgrid.database import Base, engine  # noqa: E402
from talentgrid import models  # noqa: F401,E402

if ENV in ("dev", "test") or AUTO_MIGRATE:
    Base.metadata.create_all(bind=engine)

# -----------
# Routers
# -----------
from talentgrid.routes import profiles, teams, leaderboard  # noqa: E402
from talentgrid.utils.responses import (  # noqa: E402
    http_exception_handler,
    validation_exception_handler,
    error_response,
)

app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    description="Profiles with skills, skill-based team builder and leaderboards",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600,
)

# ------------------------------------------------
# Error envelope: {"success": false, "error": "..."}
# ------------------------------------------------
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Internal Server Error")


# ------------------------------------------------
# Request log
# ------------------------------------------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    log.info("REQ %s %s -> %s", request.method, request.url.path, response.status_code)
    return response

# ------------------------------------------------
# Mount routers
# ------------------------------------------------
app.include_router(profiles.router,    prefix="/api")
app.include_router(teams.router,       prefix="/api")
app.include_router(leaderboard.router, prefix="/api")

# -----------
# Health & root
# -----------
@app.get("/health")
def health():
    return {"status": "ok", "env": ENV}

@app.get("/")
def root():
    return {"name": APP_NAME, "version": APP_VERSION}


@app.on_event("startup")
async def list_routes():
    log.info("ENV=%s AUTO_MIGRATE=%s", ENV, AUTO_MIGRATE)
    for r in app.routes:
        if isinstance(r, APIRoute):
            methods = ",".join(sorted(r.methods))
            log.info("ROUTE %-10s %s", methods, r.path)
