"""
Earbud Record Store
-------------------
Public API:

    RecordStore(...)            create / get / all / lost / mark_found / search / recent
    RecencyIndex(...)           most-recent-first view over a store
    EarbudRecord, EarbudStatus
"""

from .models import EarbudRecord, EarbudStatus, by_reported_at, new_record_id  # noqa: F401
from .recency import RecencyIndex, RecentReports  # noqa: F401
from .core import RecordStore  # noqa: F401  (re-export)
