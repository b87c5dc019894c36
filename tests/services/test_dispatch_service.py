import pytest
from fastapi import HTTPException
from fastapi.responses import HTMLResponse, PlainTextResponse

from frontline.controllers import BaseController, HomeController
from frontline.services.dispatch_service import DispatchService, parse_route
from tests.log_helpers import message_of


class ReportsController(BaseController):
    def summary(self):
        self.logger.info("ReportsController.summary called", {"rows": 3})
        return PlainTextResponse("3 rows")

    def raw(self):
        return "<b>raw</b>"

    def broken(self):
        raise KeyError("missing_column")

    def forbidden(self):
        raise HTTPException(status_code=403, detail="nope")

    def _hidden(self):
        return "hidden"


@pytest.fixture
def service(make_logger):
    logger = make_logger(debug_enabled=True)
    return DispatchService(logger, controllers={
        "HomeController": HomeController,
        "ReportsController": ReportsController,
    })


@pytest.mark.parametrize("raw, expected", [
    (None, ("Home", "index")),
    ("", ("Home", "index")),
    ("reports", ("Reports", "index")),
    ("reports/summary", ("Reports", "summary")),
    ("/reports//summary/", ("Reports", "summary")),
    ("reports/summary/extra", ("Reports", "summary")),
    ("1reports/summary", ("Home", "summary")),
    ("reports/sum-mary", ("Reports", "index")),
    ("../etc", ("Home", "etc")),
])
def test_parse_route(raw, expected):
    assert parse_route(raw) == expected


def test_parse_route_custom_defaults():
    assert parse_route("", "Dashboard", "show") == ("Dashboard", "show")


def test_dispatch_calls_action(service, read_lines):
    response = service.dispatch("reports/summary", request_id="abc123")

    assert response.body == b"3 rows"
    assert "ReportsController.summary called" in [message_of(line) for line in read_lines("app")]
    debug_messages = [message_of(line) for line in read_lines("debug")]
    assert "DispatchService.dispatch - calling ReportsController.summary()" in debug_messages
    assert "DispatchService.dispatch - returned from ReportsController.summary()" in debug_messages


def test_non_response_results_are_wrapped(service):
    response = service.dispatch("reports/raw")

    assert isinstance(response, HTMLResponse)
    assert response.body == b"<b>raw</b>"


def test_unknown_controller(service):
    with pytest.raises(HTTPException) as exc_info:
        service.dispatch("admin/index")

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail["error"]["message"] == "Controller not found: AdminController"


@pytest.mark.parametrize("action", ["missing", "render", "_hidden", "__init__"])
def test_unroutable_actions(service, action):
    with pytest.raises(HTTPException) as exc_info:
        service.dispatch(f"reports/{action}")

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail["error"]["code"] == "action_not_found"


def test_action_exception_becomes_500(service, read_lines):
    with pytest.raises(HTTPException) as exc_info:
        service.dispatch("reports/broken", request_id="req42")

    assert exc_info.value.status_code == 500
    assert isinstance(exc_info.value.__cause__, KeyError)

    (line,) = read_lines("error")
    assert 'request_id="req42"' in line
    assert 'controller_class="ReportsController"' in line
    assert 'action="broken"' in line
    assert "test_dispatch_service.py:" in line


def test_http_exceptions_from_actions_pass_through(service, read_lines):
    with pytest.raises(HTTPException) as exc_info:
        service.dispatch("reports/forbidden")

    assert exc_info.value.status_code == 403
    assert read_lines("error") == []
