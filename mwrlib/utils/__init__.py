from .date import reporting_window, to_date, to_timestamp

__all__ = ["to_date", "to_timestamp", "reporting_window"]
