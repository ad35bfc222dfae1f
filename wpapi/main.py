import logging

from fastapi import Depends, FastAPI

from wpapi.routers import content
from wpapi.security import get_api_key
from wpapi.settings import get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    configure_logging(get_settings().LOG_LEVEL)

    app = FastAPI(
        title="WPAPI", description="Read-only WordPress content over typed routes"
    )
    app.include_router(content.router, dependencies=[Depends(get_api_key)])

    @app.get("/")
    async def root():
        return {"message": "WPAPI is running"}

    logger.info("WPAPI application created")
    return app
