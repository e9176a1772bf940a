import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from mangum import Mangum

from app.config import settings
from app.errors import TimeBucketValidationError, validation_error_handler
from app.models import TimeBucketAssetQuery, TimeBucketQuery
from app.openapi import install_openapi
from app.repository import TimelineRepository
from app.routers import timeline

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up (env=%s)...", settings.ENV)
    if app.state.timeline_repository is None:
        logger.warning("No timeline repository configured; timeline routes will return 503")
    yield
    logger.info("Shutting down...")


def create_app(repository: Optional[TimelineRepository] = None) -> FastAPI:
    app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan, root_path=settings.ROOT_PATH)
    app.state.timeline_repository = repository

    app.include_router(timeline.router)
    app.add_exception_handler(TimeBucketValidationError, validation_error_handler)
    install_openapi(app, [TimeBucketQuery, TimeBucketAssetQuery])

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to {settings.APP_TITLE}"}

    return app


app = create_app()

# Adapter for AWS Lambda
handler = Mangum(app)

if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True, env_file="dev.env")
