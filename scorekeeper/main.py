"""
FastAPI main application
Scorekeeper - team scores with adjustable increments

Modular architecture with separated API routers in scorekeeper/api/:
- health.py: Health check and system status
- team.py: Team CRUD and increment/decrement controls
- settings.py: Team count and score increment settings
- admin.py: Reset scores, shuffle team names

All routers access shared state via the scorekeeper.state module.
"""
from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from scorekeeper import state
from scorekeeper.config import VERSION, resolve_config
from scorekeeper.services.team_store import TeamStore

# Import all API routers
from scorekeeper.api import health, team, settings, admin


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

state.CONFIG = resolve_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: build the team store into global state
    state.STORE = TeamStore(state.CONFIG)
    logger.info(f"✅ Server started with {len(state.STORE.get_teams())} teams")

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="Scorekeeper",
    description="Scoreboard server for named, colored teams",
    version=VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=state.CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400 rather than 422"""
    logger.warning(f"⚠️ Invalid request data for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Teams (GET/POST /api/teams, GET/PUT/DELETE /api/teams/{id}, ...)
app.include_router(team.router)

# Settings (GET/PUT /api/settings)
app.include_router(settings.router)

# Bulk actions (POST /api/reset-scores, /api/shuffle-team-names)
app.include_router(admin.router)


# ==================== STATIC FILES ====================

# Mount a built client, if present
if os.path.exists(state.CONFIG.static_dir):
    app.mount("/static", StaticFiles(directory=state.CONFIG.static_dir), name="static")


# ==================== RUN SERVER ====================

def run():
    import uvicorn
    uvicorn.run(app, host=state.CONFIG.host, port=state.CONFIG.port)


if __name__ == "__main__":
    run()
