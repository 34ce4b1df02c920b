import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtWidgets import QLabel

from ui.admin_dashboard.pages import ToursPage
from ui.dashboard_core import DashboardContext
from utils.exceptions import ApiError
from utils.settings import Settings

TOURS = [
    {"tour_id": 10, "tour_name": "Ha Long Bay", "image": "tours/halong.jpg",
     "category": {"category_name": "Cruise"}, "price": "1500000.00",
     "discount_price": None, "is_deleted": "active"},
    {"tour_id": 11, "tour_name": "Sa Pa", "image": None,
     "category": {"category_name": "Trekking"}, "price": 2890000,
     "discount_price": 2500000, "is_deleted": "inactive"},
]


class FakeApi:
    def __init__(self, tours, fail_actions=False):
        self.tours = [dict(t) for t in tours]
        self.fail_actions = fail_actions
        self.calls = []

    def get(self, path, **params):
        self.calls.append(("GET", path))
        return [dict(t) for t in self.tours]

    def post(self, path, payload=None):
        self.calls.append(("POST", path))
        if self.fail_actions:
            raise ApiError("nope", status=422)
        tour_id = int(path.split("/")[1])
        for tour in self.tours:
            if tour["tour_id"] == tour_id:
                tour["is_deleted"] = "inactive" if tour["is_deleted"] == "active" else "active"

    def delete(self, path):
        self.calls.append(("DELETE", path))
        tour_id = int(path.split("/")[1])
        self.tours = [t for t in self.tours if t["tour_id"] != tour_id]


def _page(role, api, answer=True):
    prompts = []

    def confirm(title, text, button):
        prompts.append(title)
        return answer

    page = ToursPage("Tours", confirm=confirm)
    page.attach(
        DashboardContext(
            api=api,
            settings=Settings(role=role, backend_url="http://cdn.test/"),
        )
    )
    return page, prompts


def _item(page, row, key):
    return next(i for i in page.table.action_items_for_row(row) if i.key == key)


def test_prices_are_shown_in_dong(qapp):
    page, _ = _page("admin", FakeApi(TOURS))
    labels = page.table.header_labels()
    price = labels.index("Price")
    discount = labels.index("Discount price")
    assert page.table.table.item(0, price).text() == "1.500.000 ₫"
    assert page.table.table.item(0, discount).text() == "N/A"
    assert page.table.table.item(1, discount).text() == "2.500.000 ₫"
    assert page.table.table.item(0, labels.index("Category")).text() == "Cruise"


def test_image_links_use_backend_storage(qapp):
    page, _ = _page("admin", FakeApi(TOURS))
    column = page.table.header_labels().index("Image")
    link = page.table.table.cellWidget(0, column)
    assert isinstance(link, QLabel)
    assert "http://cdn.test/storage/tours/halong.jpg" in link.text()
    assert page.table.table.cellWidget(1, column).text() == "No image"


def test_staff_only_sees_active_tours(qapp):
    page, _ = _page("staff", FakeApi(TOURS))
    assert page.table.row_keys() == [10]
    assert "Status" not in page.table.header_labels()
    assert [i.label for i in page.table.action_items_for_row(0)] == ["Delete"]


def test_admin_toggle_confirms_and_reloads(qapp):
    api = FakeApi(TOURS)
    page, prompts = _page("admin", api)
    assert _item(page, 1, "toggle-status").label == "Enable"
    _item(page, 0, "toggle-status").trigger()
    assert prompts == ["Confirm tour deactivation"]
    assert ("POST", "tours/10/toggle") in api.calls
    assert _item(page, 0, "toggle-status").label == "Enable"
    assert page.notifier.current_kind == "success"


def test_admin_force_delete(qapp):
    api = FakeApi(TOURS)
    page, prompts = _page("admin", api)
    _item(page, 0, "delete").trigger()
    assert prompts == ["Confirm permanent deletion"]
    assert page.table.row_keys() == [11]


def test_failed_action_keeps_rows_and_reports(qapp):
    api = FakeApi(TOURS, fail_actions=True)
    page, _ = _page("admin", api)
    _item(page, 0, "toggle-status").trigger()
    assert page.table.row_keys() == [10, 11]
    assert not page.table.loading
    assert page.notifier.current_kind == "error"
