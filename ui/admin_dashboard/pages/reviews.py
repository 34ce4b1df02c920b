"""Tour review moderation list."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from PyQt6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QWidget,
)

from services.reviews import delete_review, get_reviews, unpack_reviews
from services.tours import fetch_tours
from ui.custom_button import CustomButton
from ui.table_generic import TableGeneric
from ui.table_model import Column, TableAction
from utils.exceptions import ApiError
from utils.format import format_number_unit

from .base import ConfirmFn, DashboardPage, confirm_dialog

log = logging.getLogger(__name__)

Review = Dict[str, Any]

DEFAULT_FILTERS = {"tour_id": 0, "page": 1, "rating": 0, "search": ""}


def _stars(rating: Any) -> str:
    try:
        count = max(0, min(5, int(rating)))
    except (TypeError, ValueError):
        return ""
    return "★" * count + "☆" * (5 - count)


def summarize(reviews: List[Review]) -> str:
    """Return the count and average rating line shown above the table."""

    ratings = []
    for review in reviews:
        try:
            ratings.append(float(review.get("rating")))
        except (TypeError, ValueError):
            continue
    text = f"{format_number_unit(len(reviews))} reviews"
    if ratings:
        average = sum(ratings) / len(ratings)
        text += f" · average rating {format_number_unit(round(average, 2))}"
    return text


class ReviewsPage(DashboardPage):
    """Reviews filtered by tour, rating and free text, one server page at a time.

    Filters other than the page number send the view back to page 1.
    """

    def __init__(
        self,
        title: str,
        parent: Optional[QWidget] = None,
        *,
        confirm: Optional[ConfirmFn] = None,
    ) -> None:
        super().__init__(title, parent)
        self.filters: Dict[str, Any] = dict(DEFAULT_FILTERS)
        self.reviews: List[Review] = []
        self.last_page = 1
        self._tour_options_loaded = False
        self.confirm: ConfirmFn = confirm or confirm_dialog(self)

        bar = QHBoxLayout()
        self.tour_combo = QComboBox()
        self.tour_combo.addItem("All tours", 0)
        self.rating_combo = QComboBox()
        self.rating_combo.addItem("Any rating", 0)
        for stars in range(5, 0, -1):
            self.rating_combo.addItem(_stars(stars), stars)
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search comments")
        self.page_spin = QSpinBox()
        self.page_spin.setPrefix("Result page ")
        self.page_spin.setRange(1, 1)
        self.reset_button = QPushButton("Reset filters")
        for widget in (
            self.tour_combo,
            self.rating_combo,
            self.search_edit,
            self.page_spin,
            self.reset_button,
        ):
            bar.addWidget(widget)
        self.card.layout().addLayout(bar)

        self.summary_label = QLabel()
        self.summary_label.setObjectName("ReviewSummary")
        self.card.layout().addWidget(self.summary_label)

        self.table = TableGeneric(
            row_key="review_id",
            context_holder=self.notifier.context_holder,
        )
        self.card.layout().addWidget(self.table)

        self.tour_combo.currentIndexChanged.connect(
            lambda _index: self.set_filter("tour_id", self.tour_combo.currentData())
        )
        self.rating_combo.currentIndexChanged.connect(
            lambda _index: self.set_filter("rating", self.rating_combo.currentData())
        )
        self.search_edit.returnPressed.connect(
            lambda: self.set_filter("search", self.search_edit.text().strip())
        )
        self.page_spin.valueChanged.connect(lambda page: self.set_filter("page", page))
        self.reset_button.clicked.connect(self.reset_filters)

    def columns(self) -> List[Column]:
        return [
            Column(
                "user",
                "Reviewer",
                data_index="user",
                render=lambda value, _review: (value or {}).get("full_name", ""),
            ),
            Column(
                "tour",
                "Tour",
                data_index="tour",
                render=lambda value, _review: (value or {}).get("tour_name", ""),
            ),
            Column(
                "rating",
                "Rating",
                data_index="rating",
                render=lambda value, _review: _stars(value),
            ),
            Column("comment", "Comment", data_index="comment"),
            Column("created_at", "Created", data_index="created_at"),
        ]

    def get_actions(self, review: Review) -> List[TableAction]:
        review_id = review["review_id"]
        return [
            TableAction(
                "delete",
                "Delete",
                on_click=lambda: self.handle_delete(review_id),
                danger=True,
            )
        ]

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------
    def set_filter(self, key: str, value: Any) -> None:
        if self.filters.get(key) == value:
            return
        self.filters[key] = value
        if key != "page":
            self.filters["page"] = 1
        self._sync_filter_widgets()
        self.refresh()

    def reset_filters(self) -> None:
        if self.filters == DEFAULT_FILTERS:
            return
        self.filters = dict(DEFAULT_FILTERS)
        self._sync_filter_widgets()
        self.refresh()

    def _sync_filter_widgets(self) -> None:
        widgets = (self.tour_combo, self.rating_combo, self.search_edit, self.page_spin)
        for widget in widgets:
            widget.blockSignals(True)
        self.tour_combo.setCurrentIndex(
            max(self.tour_combo.findData(self.filters["tour_id"]), 0)
        )
        self.rating_combo.setCurrentIndex(
            max(self.rating_combo.findData(self.filters["rating"]), 0)
        )
        self.search_edit.setText(self.filters["search"])
        self.page_spin.setRange(1, max(self.last_page, 1))
        self.page_spin.setValue(self.filters["page"])
        for widget in widgets:
            widget.blockSignals(False)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        if not self._tour_options_loaded:
            self._load_tour_options()
        self.table.configure(self.reviews, self.columns(), self.get_actions)
        self.table.set_loading(True)
        api, filters = self.context.api, dict(self.filters)
        self.run_in_background(
            lambda: unpack_reviews(get_reviews(api, **filters)),
            self._on_reviews_loaded,
        )

    def _on_reviews_loaded(self, result: Any, error: Optional[ApiError]) -> None:
        self.table.set_loading(False)
        if error is not None:
            log.warning("Loading reviews failed: %s", error)
            self.notifier.notify_error("Failed to load reviews")
            return
        self.reviews, self.last_page = result
        self._sync_filter_widgets()
        self.summary_label.setText(summarize(self.reviews))
        self.table.configure(self.reviews, self.columns(), self.get_actions)

    def _load_tour_options(self) -> None:
        self._tour_options_loaded = True
        api = self.context.api
        self.run_in_background(lambda: fetch_tours(api, "admin"), self._on_tours_loaded)

    def _on_tours_loaded(self, tours: Any, error: Optional[ApiError]) -> None:
        if error is not None:
            log.warning("Loading tour filter options failed: %s", error)
            self._tour_options_loaded = False
            return
        self.tour_combo.blockSignals(True)
        for tour in tours or []:
            self.tour_combo.addItem(str(tour.get("tour_name", "")), tour.get("tour_id"))
        self.tour_combo.blockSignals(False)
        self._sync_filter_widgets()

    def handle_delete(self, review_id: Any) -> None:
        confirmed = self.confirm(
            "Confirm review deletion",
            "Are you sure you want to delete this review?",
            CustomButton("Delete", custom_type="delete"),
        )
        if not confirmed:
            return
        api = self.context.api
        self.table.set_loading(True)
        self.run_in_background(
            lambda: delete_review(api, review_id),
            lambda _result, error: self._on_deleted(review_id, error),
        )

    def _on_deleted(self, review_id: Any, error: Optional[ApiError]) -> None:
        self.table.set_loading(False)
        if error is not None:
            log.warning("Deleting review %s failed: %s", review_id, error)
            self.notifier.notify_error("Failed to delete the review")
            return
        self.notifier.notify_success("Review deleted")
        self.refresh()


__all__ = ["ReviewsPage", "summarize"]
