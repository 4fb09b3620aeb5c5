"""Domain services built on the database API."""
from .dashboard import DashboardService

__all__ = ["DashboardService"]
