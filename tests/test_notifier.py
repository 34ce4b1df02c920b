import pytest

pytest.importorskip("PyQt6.QtWidgets")

from ui.notifier import LOADING_DURATION, SHORT_DURATION, Notifier


def test_message_shows_kind_and_text(qapp):
    notifier = Notifier()
    assert notifier.context_holder.isHidden()
    notifier.notify_success("Saved")
    assert not notifier.context_holder.isHidden()
    assert notifier.current_kind == "success"
    assert "Saved" in notifier.current_text


def test_close_runs_on_close_once_and_hides(qapp):
    closed = []
    notifier = Notifier()
    message_id = notifier.notify_error("Nope", on_close=lambda: closed.append(1))
    notifier.close(message_id)
    notifier.close(message_id)
    assert closed == [1]
    assert notifier.context_holder.isHidden()
    assert notifier.current_kind is None


def test_older_message_expiry_keeps_newer_visible(qapp):
    notifier = Notifier()
    first = notifier.notify_warning("first")
    notifier.notify_loading("second")
    notifier.close(first)
    assert notifier.current_kind == "loading"
    assert "second" in notifier.current_text


def test_durations():
    assert SHORT_DURATION == 1.2
    assert LOADING_DURATION == 2.5


def test_show_toast_adapter(qapp):
    notifier = Notifier()
    notifier.show_toast("warning", "Careful")
    assert notifier.current_kind == "warning"
