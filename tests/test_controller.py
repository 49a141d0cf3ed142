"""Handler context resolution and handler helper methods."""

import pytest

from actuator import Controller, ErrorResult, Params, Request, Response
from actuator.results import RedirectResult
from conftest import Greeter


def test_set_action_instantiates_handler(registry) -> None:
    controller = Controller(Request())
    controller.set_action(registry, "greeter.GREET")
    assert isinstance(controller.app_controller, Greeter)
    assert controller.app_controller.controller is controller
    assert controller.action == "Greeter.greet"
    assert controller.name == "Greeter"
    assert controller.method_type.name == "greet"
    assert controller.result is None


def test_set_action_unknown(registry) -> None:
    with pytest.raises(LookupError):
        Controller(Request()).set_action(registry, "Greeter.nope")


def test_defaults() -> None:
    request = Request()
    controller = Controller(request)
    assert controller.request is request
    assert isinstance(controller.response, Response)
    assert isinstance(controller.params, Params)
    assert controller.args == {}


def test_handler_helpers(registry) -> None:
    controller = Controller(Request(url="/?a=1"))
    controller.set_action(registry, "Greeter.echo")
    handler = controller.app_controller
    assert handler.request is controller.request
    assert handler.response is controller.response
    assert handler.params is controller.params
    assert handler.render_text("%d items", 3).content == "3 items"
    assert handler.render_text("100%").content == "100%"
    assert handler.render_html("<p/>").content == "<p/>"
    assert handler.render_json([1]).content == [1]
    redirect = handler.redirect("/x/%s", "y")
    assert isinstance(redirect, RedirectResult) and redirect.url == "/x/y"
    assert handler.not_found().status_code == 404
    assert handler.forbidden("no").message == "no"
    error = handler.render_error(ValueError())
    assert isinstance(error, ErrorResult)
    assert error.status_code == 500
    assert error.message == "ValueError"
