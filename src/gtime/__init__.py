"""gtime - convert a time expression into one or more timezones."""

__version__ = "0.1.0"
__author__ = "gtime contributors"
__description__ = "Convert timestamps, dates and times of day across timezones"

__all__ = ["__version__", "__author__", "__description__"]
