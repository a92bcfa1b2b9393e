"""Dataset storage and loading."""

from .store import RecordStore
from .loader import load_records, load_records_or_fallback

__all__ = ["RecordStore", "load_records", "load_records_or_fallback"]
