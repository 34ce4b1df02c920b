import threading

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtWidgets import QLabel

from ui.admin_dashboard import MainWindow
from ui.dashboard_core import DashboardContext, NavigationController, PageRegistry
from utils.settings import Settings


class EmptyApi:
    def get(self, path, **params):
        return []


def _context():
    return DashboardContext(api=EmptyApi(), settings=Settings())


def test_registry_rejects_duplicates():
    registry = PageRegistry()
    registry.register("a", "A", lambda ctx: None)
    with pytest.raises(KeyError):
        registry.register("a", "Again", lambda ctx: None)
    assert list(registry.keys()) == ["a"]
    assert registry.title("a") == "A"


def test_controller_notifies_listeners():
    registry = PageRegistry()
    registry.register("a", "A", lambda ctx: None)
    registry.register("b", "B", lambda ctx: None)
    controller = NavigationController(registry)
    seen = []
    controller.add_listener(seen.append)
    controller.set_current("b")
    controller.set_current("b")
    assert seen == ["b", "b"]
    assert controller.current_key == "b"
    with pytest.raises(KeyError):
        controller.set_current("missing")
    controller.remove_listener(seen.append)
    controller.set_current("a")
    assert seen == ["b", "b"]


def test_main_window_builds_pages_lazily(qapp):
    built = []
    registry = PageRegistry()

    def factory(name):
        def build(ctx):
            built.append(name)
            return QLabel(name)
        return build

    registry.register("one", "One", factory("one"))
    registry.register("two", "Two", factory("two"))
    window = MainWindow(_context(), registry)
    assert built == ["one"]
    assert window.current_key == "one"
    assert window.nav_buttons["one"].isChecked()

    window.nav_buttons["two"].click()
    assert built == ["one", "two"]
    assert window.current_key == "two"
    assert window.title_label.text() == "Two"
    assert not window.nav_buttons["one"].isChecked()

    window.nav_buttons["one"].click()
    assert built == ["one", "two"]


def test_default_window_shows_customer_page(qapp):
    window = MainWindow(_context())
    assert list(window.nav_buttons) == ["customers", "employees", "tours", "reviews"]
    page = window.pages["customers"]
    assert page.table.header_labels()[-1] == "Action"
    window.context.toast("info", "hello")
    assert "hello" in window.statusBar().currentMessage()
    window.close()


def test_window_runs_background_work_off_the_gui_thread(qapp):
    window = MainWindow(_context(), PageRegistry())
    future = window.context.run_async(threading.get_ident)
    assert future.result(timeout=5) != threading.get_ident()
    window.close()


def test_context_without_executor_runs_inline():
    context = _context()
    assert context.submit(lambda: 42).result() == 42
    failed = context.submit(lambda: 1 / 0)
    assert isinstance(failed.exception(), ZeroDivisionError)
