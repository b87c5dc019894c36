from fastapi.responses import HTMLResponse

from .base_controller import BaseController


class HomeController(BaseController):
    def index(self) -> HTMLResponse:
        self.logger.info("HomeController.index called")
        return self.render("home", {
            "title": "Frontline Home",
            "message": "You are seeing the home page.",
        })
