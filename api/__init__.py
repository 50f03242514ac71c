"""
FastAPI application factory for the Lumen API server.

Serves the portfolio's photo listings, filter options and site search as JSON.
"""

import os
import sys

# Ensure the project root is in Python path for local imports
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup/shutdown hooks."""
    # Startup: warm up the corpus cache; a missing export is reported, not fatal
    from api.corpus import get_corpus
    try:
        corpus = get_corpus()
        logger.info("Corpus ready: %d photos, %d albums", len(corpus.photos), len(corpus.albums))
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Corpus not loaded at startup: %s", e)
    yield
    # Shutdown: nothing to clean up (corpus is in memory)


def create_app() -> FastAPI:
    """FastAPI application factory."""
    app = FastAPI(
        title="Lumen API",
        description="Portfolio photo filtering, ranking and search API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
    )

    # CORS middleware (dev: allow the site's dev server)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:4321",  # Site dev server
            "http://localhost:5000",  # Same-port access
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    from api.routers.gallery import router as gallery_router
    from api.routers.filter_options import router as filter_options_router
    from api.routers.search import router as search_router

    app.include_router(gallery_router)
    app.include_router(filter_options_router)
    app.include_router(search_router)

    return app
