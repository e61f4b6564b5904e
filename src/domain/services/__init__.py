"""Domain services."""

from .pass_time_formatter import DEFAULT_TIME_FORMAT, PassTimeFormatter

__all__ = ["PassTimeFormatter", "DEFAULT_TIME_FORMAT"]
