# src/api/main.py

from fastapi import FastAPI
from contextlib import asynccontextmanager

from core.config.settings import settings
from core.containers.app_containers import AppContainer
from core.logging.logger import get_logger
from api.routes.health_router import router as health_router
from api.routes.projects_router import router as projects_router
from api.routes.animations_router import router as animations_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: AppContainer = app.container

    # 목록은 시작 시 한 번만 만든다 (정적 사이트 빌드와 동일)
    project_service = container.project_service()
    await project_service.load()
    logger.info("Project list loaded")

    yield

    logger.info("Shutting down")


def create_app() -> FastAPI:
    container = AppContainer()
    container.wire(modules=["api.routes.health_router", "api.routes.projects_router"])
    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan
    )

    app.container = container

    app.include_router(health_router)
    app.include_router(projects_router)
    app.include_router(animations_router)

    return app


app = create_app()
