"""Usage selection routines."""

from .usage_filter import UsageFilter, filter_usage

__all__ = ["UsageFilter", "filter_usage"]
