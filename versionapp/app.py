from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator
from versionapp.core.config import Settings, settings as default_settings
from versionapp.core.logger import logger
from versionapp.core.middleware import RequestLoggingMiddleware
from versionapp.routers import meta
from versionapp.version import resolve_version

SWAGGER_UI_PATH = "/swagger"
OPENAPI_PATH = "/swagger/v1/swagger.json"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("APP_STARTING", extra={
        "project": app.title,
        "version": app.state.version,
        "environment": app.state.environment
    })

    yield

    logger.info("APP_SHUTDOWN")


def create_app(settings: Optional[Settings] = None, version: Optional[str] = None) -> FastAPI:
    settings = settings or default_settings

    # 버전은 프로세스 시작 시 한 번만 확정
    if version is None:
        version = resolve_version()

    # Swagger 는 Development 환경에서만 등록 (운영에서는 404)
    docs_enabled = settings.is_development

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=version,
        lifespan=lifespan,
        docs_url=SWAGGER_UI_PATH if docs_enabled else None,
        openapi_url=OPENAPI_PATH if docs_enabled else None,
        redoc_url=None,
        swagger_ui_oauth2_redirect_url=None,
    )
    app.state.version = version
    app.state.environment = settings.ENVIRONMENT

    app.include_router(meta.router, tags=["meta"])

    app.add_middleware(RequestLoggingMiddleware)

    # Prometheus 메트릭 수집
    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app).expose(app, include_in_schema=False)

    return app
