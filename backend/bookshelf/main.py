"""
Bookshelf Backend - FastAPI Application

User authentication and book lookup API backed by MongoDB.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from bookshelf import __version__
from bookshelf.config import Settings, get_settings
from bookshelf.core.exceptions import BookshelfError
from bookshelf.core.logging import configure_logging
from bookshelf.database.connections import MongoStore
from bookshelf.database.library_db import create_indexes
from bookshelf.routers import books, health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the MongoDB connection
    - Create indexes

    Shutdown:
    - Close the MongoDB connection
    """
    store: MongoStore = app.state.store
    logger.info("Starting up Bookshelf Backend...")

    await store.connect()
    try:
        await create_indexes(store.database)
    except PyMongoError as e:
        logger.warning(f"Database initialization warning: {e}")

    yield

    logger.info("Shutting down Bookshelf Backend...")
    await store.close()


async def bookshelf_error_handler(request: Request, exc: BookshelfError):
    """Render domain errors as {message} with their status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Reject malformed request bodies with 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Invalid request",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def store_error_handler(request: Request, exc: PyMongoError):
    """Unhandled data store errors surface as 500."""
    logger.exception(f"Data store error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


async def document_error_handler(request: Request, exc: ValidationError):
    """Stored documents that do not fit the models surface as 500."""
    logger.error(
        f"Malformed document on {request.method} {request.url.path}: "
        f"{exc.error_count()} validation errors"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[MongoStore] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment settings)
        store: Store to use (defaults to one built from settings)
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Bookshelf API",
        description="""
## Bookshelf API

User accounts and their book collections.

### Features
- **Users**: Register, login, and look up a user's books
- **Books**: Browse, fetch, and delete catalogue entries
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store or MongoStore(
        uri=settings.mongo_uri,
        db_name=settings.mongo_db_name,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BookshelfError, bookshelf_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    app.add_exception_handler(ValidationError, document_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(books.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Bookshelf API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
