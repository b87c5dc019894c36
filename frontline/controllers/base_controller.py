import html
from pathlib import Path
from string import Template
from typing import Any, Mapping, Optional

from fastapi.responses import HTMLResponse

from ..core.exceptions import ViewNotFound
from ..core.logging import LineLogger

VIEWS_DIR = Path(__file__).resolve().parent / "views"


class BaseController:
    """
    Base class for front controller targets.

    Public methods defined on a subclass are routable actions; everything
    defined here is not.
    """

    def __init__(self, logger: LineLogger, views_dir: Optional[Path] = None):
        self.logger = logger
        self.views_dir = Path(views_dir) if views_dir is not None else VIEWS_DIR

    def render(self, view: str, data: Optional[Mapping[str, Any]] = None, status_code: int = 200) -> HTMLResponse:
        """
        Render views/<view>.html, substituting ``$name`` placeholders.

        Values are HTML-escaped; unknown placeholders are left as they are.
        """
        data = dict(data or {})
        self.logger.debug("BaseController.render - entering", {
            "view": view,
            "data_keys": ",".join(data),
        })

        view_file = self.views_dir / f"{view}.html"
        self.logger.debug("BaseController.render - computed view_file", {"view_file": view_file})

        if not view_file.is_file():
            self.logger.error("BaseController.render - view file not found", {"view_file": view_file})
            raise ViewNotFound(str(view_file))

        template = Template(view_file.read_text(encoding="utf-8"))
        body = template.safe_substitute({key: html.escape(str(value)) for key, value in data.items()})

        self.logger.debug("BaseController.render - view rendered", {
            "view_file": view_file,
            "data_count": len(data),
        })
        return HTMLResponse(content=body, status_code=status_code)
