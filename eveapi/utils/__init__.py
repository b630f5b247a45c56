"""Shared helpers."""
from eveapi.utils.datetime_helpers import ensure_utc

__all__ = ["ensure_utc"]
