from fastapi import FastAPI
from blogpost_publisher.core.config import settings
from blogpost_publisher.core.logging import setup_logging

from blogpost_publisher.api.v1.health import router as health_router
from blogpost_publisher.api.v1.publish import router as publish_router

logger = setup_logging(settings.LOG_LEVEL)

def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(publish_router, prefix="/api/v1")

    logger.info("{} ready (env={})", settings.APP_NAME, settings.ENV)
    return app

app = create_app()
