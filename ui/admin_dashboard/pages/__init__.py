"""Pages shown in the console's page stack."""
from .base import DashboardPage
from .reviews import ReviewsPage
from .tours import ToursPage
from .users import UsersPage

__all__ = ["DashboardPage", "ReviewsPage", "ToursPage", "UsersPage"]
