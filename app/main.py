import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import get_settings
from app.core.errors import add_error_handlers
from app.core.logging_setup import setup_logging
from app.database import create_db_and_tables, dispose_engine
from app.routers import tasks

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.task_store == "sql" and settings.create_tables_on_startup:
        await create_db_and_tables()
    logger.info(f"Task store ready (backend={settings.task_store})")
    yield
    await dispose_engine()


app = FastAPI(
    title=settings.app_title,
    description="Simple async task management API with SQLModel",
    swagger_ui_parameters={"displayRequestDuration": True},
    version=settings.app_version,
    lifespan=lifespan,
)

add_error_handlers(app)

# Include routers
app.include_router(tasks.router)


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.app_title}",
        "docs": "/docs",
        "version": settings.app_version,
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
