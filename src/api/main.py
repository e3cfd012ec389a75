"""FastAPI application entry point."""

import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Must run before utils.config reads the environment
load_dotenv()

from api.errors import register_exception_handlers
from api.routes import auth, health
from adapter.mongodb.connection import get_database_name, get_mongodb_client, is_configured
from adapter.mongodb.indexes import ensure_all_indexes
from utils.config import get_settings
from utils.logging import setup_structured_logging

setup_structured_logging()

logger = logging.getLogger(__name__)

# pyproject.toml is the single source of truth for the version
_project_root = Path(__file__).parent.parent.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Identity Service"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: ensure the unique email index before serving."""
    if not is_configured():
        logger.warning("MONGO_URL not set, using in-memory user directory")
    else:
        client = get_mongodb_client()
        if client is None:
            logger.warning("MongoDB unavailable, skipping index creation")
        elif ensure_all_indexes(client[get_database_name()]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")

    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Registers users and issues/refreshes signed bearer tokens",
    version=VERSION,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Wildcard origins cannot be combined with credentials
cors_origins_env = get_settings().cors_origins
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

app.include_router(auth.router)
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
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=get_settings().port,
        access_log=False
    )
