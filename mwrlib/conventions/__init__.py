"""Day count conventions."""

from .daycount import get_day_count, register_day_count, year_fraction

__all__ = ["get_day_count", "register_day_count", "year_fraction"]
