from typing import Mapping, Optional, Type

from fastapi import FastAPI, Request
from fastapi.responses import Response
import uvicorn

from ..controllers import BaseController
from ..core.config_manager import ConfigManager
from ..core.logging import LineLogger, setup_logging
from ..services.dispatch_service import DispatchService
from .middleware import RequestLoggerMiddleware


def create_app(
    config_manager: Optional[ConfigManager] = None,
    logger: Optional[LineLogger] = None,
    controllers: Optional[Mapping[str, Type[BaseController]]] = None,
) -> FastAPI:
    """
    Composition root: builds the app and the one LineLogger everything shares.

    A logger passed in stays owned by the caller; one built here is closed on
    shutdown.
    """
    if config_manager is None:
        config_manager = ConfigManager()
    diag_logger = setup_logging(config_manager.log_level)

    owns_logger = logger is None
    if owns_logger:
        logger = LineLogger(config_manager.base_dir, debug_enabled=config_manager.debug)
    diag_logger.info("Line logger ready: %s", logger.paths)

    app = FastAPI(title=config_manager.app_name)
    app.state.config_manager = config_manager
    app.state.logger = logger
    app.state.dispatch_service = DispatchService(
        logger,
        controllers=controllers,
        default_controller=config_manager.default_controller,
        default_action=config_manager.default_action,
    )
    logger.debug("create_app - logger attached", {"logger_class": type(logger).__name__})

    @app.on_event("shutdown")
    async def shutdown_event():
        if owns_logger:
            app.state.logger.close()

    app.add_middleware(RequestLoggerMiddleware)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.get("/")
    def front_controller(request: Request, route: str = "") -> Response:
        request_id = getattr(request.state, 'request_id', None)
        return app.state.dispatch_service.dispatch(route, request_id=request_id)

    return app


if __name__ == "__main__":
    uvicorn.run("frontline.api.main:create_app", factory=True, host="0.0.0.0", port=8000)
