"""
Route -> controller -> action dispatch.

The ``route`` query parameter has the form ``controller/action``. Segments
that are missing or do not look like identifiers fall back to the configured
defaults, so ``?route=`` and ``?route=..`` both land on Home/index.
"""

import re
import traceback
from typing import Mapping, Optional, Tuple, Type

from fastapi import HTTPException
from fastapi.responses import HTMLResponse, Response

from ..controllers import CONTROLLERS, BaseController
from ..core.error_handling import ErrorContext, ErrorHandler
from ..core.logging import LineLogger

ROUTE_SEGMENT_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_]*")


def parse_route(raw_route: Optional[str], default_controller: str = "Home", default_action: str = "index") -> Tuple[str, str]:
    """Split ``controller/action`` into a capitalized controller name and an action."""
    parts = [part for part in (raw_route or "").split("/") if part]
    controller_name = default_controller
    action = default_action

    if len(parts) >= 1 and ROUTE_SEGMENT_PATTERN.fullmatch(parts[0]):
        controller_name = parts[0][:1].upper() + parts[0][1:]
    if len(parts) >= 2 and ROUTE_SEGMENT_PATTERN.fullmatch(parts[1]):
        action = parts[1]

    return controller_name, action


def _exception_location(exc: BaseException) -> str:
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return "unknown"
    last = frames[-1]
    return f"{last.filename}:{last.lineno}"


class DispatchService:
    def __init__(
        self,
        logger: LineLogger,
        controllers: Optional[Mapping[str, Type[BaseController]]] = None,
        default_controller: str = "Home",
        default_action: str = "index",
    ):
        self.logger = logger
        self.controllers = dict(CONTROLLERS if controllers is None else controllers)
        self.default_controller = default_controller
        self.default_action = default_action

    def _resolve_action(self, controller: BaseController, action: str):
        # Helpers inherited from BaseController (render, ...) are not actions
        if action.startswith("_") or hasattr(BaseController, action):
            return None
        handler = getattr(controller, action, None)
        return handler if callable(handler) else None

    def dispatch(self, raw_route: Optional[str], request_id: Optional[str] = None) -> Response:
        controller_name, action = parse_route(raw_route, self.default_controller, self.default_action)
        controller_class = f"{controller_name}Controller"
        context = ErrorContext(request_id=request_id)

        self.logger.debug("DispatchService.dispatch - resolved route", {
            "route": raw_route or "",
            "controller_class": controller_class,
            "action": action,
        })

        controller_cls = self.controllers.get(controller_class)
        if controller_cls is None:
            raise ErrorHandler.handle_controller_not_found(controller_class, context, self.logger)

        controller = controller_cls(self.logger)
        handler = self._resolve_action(controller, action)
        if handler is None:
            raise ErrorHandler.handle_action_not_found(action, controller_class, context, self.logger)

        context.controller_class = controller_class
        context.action = action
        try:
            self.logger.debug(f"DispatchService.dispatch - calling {controller_class}.{action}()")
            result = handler()
            self.logger.debug(f"DispatchService.dispatch - returned from {controller_class}.{action}()")
        except HTTPException:
            raise
        except Exception as e:
            context.additional_context["file"] = _exception_location(e)
            raise ErrorHandler.handle_internal_server_error(context, self.logger, original_exception=e) from e

        if isinstance(result, Response):
            return result
        return HTMLResponse(content="" if result is None else str(result))
