# client/__init__.py
from .api import ApiError, BudgetClient
from .poller import RoomPoller

__all__ = [
    "ApiError",
    "BudgetClient",
    "RoomPoller",
]
