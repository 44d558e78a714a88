"""Domain repositories package."""

from .history_repository import IHistoryRepository, WindowState

__all__ = ["IHistoryRepository", "WindowState"]
