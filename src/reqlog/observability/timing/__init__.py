"""Observability – request timing helpers."""
from reqlog.observability.timing.duration import NS_PER_SECOND, HrTime, format_time, hrtime

__all__ = ["NS_PER_SECOND", "HrTime", "format_time", "hrtime"]
