"""Main FastAPI application."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from api.routes import router
from config.settings import settings
from models.database import close_mongo_connection, get_users_collection, init_mongo
from models.repository import InMemoryUserRepository, MongoUserRepository
from utils.errors import StoreFailure, TrackerError
from utils.logger import setup_logger

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the user store on startup and close it on shutdown."""
    logger.info("Starting application...")
    if settings.store_backend == "memory":
        app.state.user_repository = InMemoryUserRepository()
        logger.info("Using in-memory user store")
    else:
        await init_mongo()
        app.state.user_repository = MongoUserRepository(get_users_collection())
    logger.info("Application started successfully")
    
    yield
    
    logger.info("Shutting down application...")
    if settings.store_backend != "memory":
        await close_mongo_connection()
    logger.info("Application shut down")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Users and their exercise logs",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    """Render tracker errors as ``{"error": message}``."""
    if isinstance(exc, StoreFailure):
        logger.error(f"Store failure on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Hide internal faults behind a generic 500."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "server error"})


# Include API routes
app.include_router(router)

static_dir = Path(settings.static_dir)
if static_dir.is_dir():
    app.mount("/public", StaticFiles(directory=static_dir), name="public")


@app.get("/")
async def root():
    """Landing page with forms for the API, or a status document."""
    index = Path(settings.views_dir) / "index.html"
    if index.is_file():
        return FileResponse(index)
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
