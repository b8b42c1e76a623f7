import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles

from chirpy_app.config import settings
from chirpy_app.database.connection import engine, Base
from chirpy_app.api import admin, chirps, health, users
from chirpy_app.exceptions import (
    ChirpyError,
    chirpy_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from chirpy_app.middleware.metrics import MetricsMiddleware
from chirpy_app.services.metrics import HitCounter

# Import models to ensure they're registered with Base
from chirpy_app.models import User, Chirp

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Users and short posts, with a profanity filter and a visit counter",
)

# Process-wide hit counter, lives as long as the app
app.state.hit_counter = HitCounter()


######## Exception handlers
app.add_exception_handler(ChirpyError, chirpy_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


######## Include routers
app.include_router(health.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(chirps.router, prefix="/api")
app.include_router(admin.router)

# Static files, counted by the metrics middleware
app.mount(
    "/app",
    MetricsMiddleware(StaticFiles(directory=settings.filepath_root, html=True), app.state.hit_counter),
    name="app",
)

logger.info("%s started (platform=%s, storage=%s)", settings.app_name, settings.platform, settings.storage_backend)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
