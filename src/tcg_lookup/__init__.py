"""TCG lookup - card queries and deck list rendering for chat bots."""

__version__ = "0.1.0"
