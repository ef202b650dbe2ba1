import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from workboard.core.config import get_settings
from workboard.core.errors import install_error_handlers
from workboard.core.log import configure_logging
from workboard.routers import auth as auth_router
from workboard.routers import pages as pages_router
from workboard.routers.entities import build_entity_routers

logger = logging.getLogger(__name__)

ASSET_DIRS = ("css", "js", "images")


class AssetFiles(StaticFiles):
    """Serves 404s while the asset folder does not exist instead of failing."""

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            logger.debug("Asset folder %s missing", self.directory)
            return
        await super().check_config()


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    app = FastAPI(title="Workboard API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    for name in ASSET_DIRS:
        directory = settings.web_root / name
        app.mount(f"/{name}", AssetFiles(directory=directory, check_dir=False), name=name)

    app.include_router(pages_router.router)
    app.include_router(auth_router.router)
    for router in build_entity_routers():
        app.include_router(router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    configure_logging()
    settings = get_settings()
    logger.info("Starting Workboard on http://%s:%s", settings.host, settings.port)
    logger.warning("Data is saved to JSON files under %s; changes are lost if the host disk is ephemeral.", settings.data_dir)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
