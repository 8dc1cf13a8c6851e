"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars at import time
load_dotenv()

# main.py is at <root>/src/api/main.py; src is one level up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.routes import health, words
from utils.logging import setup_structured_logging
from adapter.sqlite.connection import open_default_engine
from adapter.sqlite.word_repository import SqlWordRepository

setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Wordbook API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the word store, close it on shutdown."""
    repository = SqlWordRepository(open_default_engine())
    repository.ensure_schema()
    app.state.word_repository = repository
    logger.info("Word store ready")

    yield  # App runs here

    app.state.word_repository = None
    repository.close()


app = FastAPI(
    title=SERVICE_NAME,
    description="Personal vocabulary manager: dictionary lookups stored in a local word list",
    version=VERSION,
    lifespan=lifespan,
)

# CORS_ORIGINS="*" cannot be combined with credentials; an explicit
# comma-separated list can.
cors_origins_env = os.getenv("CORS_ORIGINS", "*")

if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(words.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        app,
        host="127.0.0.1",
        port=port,
        access_log=False
    )
