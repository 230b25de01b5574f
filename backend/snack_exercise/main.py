"""FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from snack_exercise.config import settings
from snack_exercise.database import Base, engine
from snack_exercise.error_handlers import register_error_handlers
from snack_exercise.logging_config import setup_logging

# Import routers
from snack_exercise.routers import members, exgroups, exercises

# Import all models so Base.metadata knows about them
from snack_exercise.models.member import Member          # noqa: F401
from snack_exercise.models.exgroup import Exgroup        # noqa: F401
from snack_exercise.models.join_list import JoinList     # noqa: F401
from snack_exercise.models.exercise import Exercise      # noqa: F401

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Snack Exercise",
    description="Group exercise relays: exgroups with join codes, hosts and member rules",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Register routers
app.include_router(members.router, prefix="/api/members", tags=["Members"])
app.include_router(exgroups.router, prefix="/api/exgroups", tags=["Exgroups"])
app.include_router(exercises.router, prefix="/api/exercises", tags=["Exercises"])


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
