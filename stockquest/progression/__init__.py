"""Experience and level tracking for StockQuest."""

from stockquest.progression.tracker import ProgressionTracker

__all__ = ["ProgressionTracker"]
