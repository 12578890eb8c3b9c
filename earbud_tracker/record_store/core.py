"""
Earbud Record Store
-------------------
Authoritative in-memory collection of earbud reports, keyed by id
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Callable, Dict, List, Optional

from earbud_tracker.common.errors import NotFoundError
from earbud_tracker.common.schemas import SearchParams

from .models import EarbudRecord, EarbudStatus, by_reported_at, new_record_id
from .recency import RecencyIndex, RecencyKey, RecentReports

logger = logging.getLogger(__name__)

Clock = Callable[[], dt.datetime]


class RecordStore:
    """
    Owns every EarbudRecord of a session.

    Args:
        clock: Source of report timestamps, ``datetime.now`` by default
        recency_key: Ordering key for the recency index, report time by default
        id_factory: Generator of record ids, uuid4 text by default
    """

    def __init__(
            self,
            clock: Optional[Clock] = None,
            recency_key: Optional[RecencyKey] = None,
            id_factory: Callable[[], str] = new_record_id,
    ):
        self._clock = clock or dt.datetime.now
        self._id_factory = id_factory
        self._records: Dict[str, EarbudRecord] = {}
        self.recency = RecencyIndex(self.get, key=recency_key or by_reported_at)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def _next_id(self) -> str:
        record_id = self._id_factory()
        while record_id in self._records:
            logger.warning(f"Generated id {record_id} already in use, drawing another")
            record_id = self._id_factory()
        return record_id

    def create(self, brand: str, color: str, location: str) -> EarbudRecord:
        """Register a new lost earbud report and return it"""
        record = EarbudRecord(
            id=self._next_id(),
            brand=brand,
            color=color,
            location=location,
            reported_at=self._clock(),
            status=EarbudStatus.LOST,
        )
        self._records[record.id] = record
        self.recency.record_created(record)
        logger.info(f"Reported lost: {record.id} ({brand or '-'} / {color or '-'} at {location or '-'})")
        return record

    def get(self, record_id: str) -> EarbudRecord:
        try:
            return self._records[record_id]
        except KeyError:
            logger.warning(f"Lookup for unknown record id: {record_id}")
            raise NotFoundError(record_id) from None

    def all(self) -> List[EarbudRecord]:
        return list(self._records.values())

    def lost(self) -> List[EarbudRecord]:
        return [r for r in self._records.values() if r.status is EarbudStatus.LOST]

    def mark_found(self, record_id: str) -> EarbudRecord:
        """
        Mark a record as found. Repeating the call on a found record is a no-op.

        Raises:
            NotFoundError: if no record has this id
        """
        record = self.get(record_id)
        if record.mark_found():
            logger.info(f"Marked found: {record_id}")
        else:
            logger.info(f"Record {record_id} was already found")
        return record

    def search(self, brand: Optional[str] = "", color: Optional[str] = "") -> List[EarbudRecord]:
        """
        Lost records whose brand and color contain the given filters.

        Matching is case-insensitive; an empty filter matches every value.
        """
        params = SearchParams(brand=brand, color=color)
        brand_filter, color_filter = params.brand_filter, params.color_filter

        return [
            record for record in self._records.values()
            if record.status is EarbudStatus.LOST
            and (not brand_filter or brand_filter in record.brand.lower())
            and (not color_filter or color_filter in record.color.lower())
        ]

    def recent(self, limit: int) -> RecentReports:
        """Up to ``limit`` lost records, most recently reported first"""
        return self.recency.most_recent(limit)
