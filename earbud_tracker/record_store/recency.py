"""
Recency Index
-------------
Most-recent-first view over the records of a store.

The index keeps only record ids in a list sorted by ``(key, sequence)``.
Records are resolved through the owning store on every traversal, so the
status seen while walking is always the live one.
"""

from __future__ import annotations

import bisect
import itertools
import logging
from typing import Any, Callable, Iterator, List, Tuple

from .models import EarbudRecord, EarbudStatus, by_reported_at

logger = logging.getLogger(__name__)

RecencyKey = Callable[[EarbudRecord], Any]
Resolver = Callable[[str], EarbudRecord]


class RecentReports:
    """Lazy, restartable view of up to ``limit`` lost records, newest first"""

    def __init__(self, index: "RecencyIndex", limit: int):
        self._index = index
        self.limit = limit

    def __iter__(self) -> Iterator[EarbudRecord]:
        return self._index._walk(self.limit)

    def __repr__(self) -> str:
        return f"RecentReports(limit={self.limit})"


class RecencyIndex:

    def __init__(self, resolve: Resolver, key: RecencyKey = by_reported_at):
        self._resolve = resolve
        self._key = key
        # Ascending by (key, sequence); newest entry sits at the end.
        self._entries: List[Tuple[Any, int, str]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def record_created(self, record: EarbudRecord) -> None:
        """Add a freshly created record. Equal keys keep insertion order, later wins."""
        entry = (self._key(record), next(self._sequence), record.id)
        bisect.insort(self._entries, entry)
        logger.debug(f"Indexed record {record.id} ({len(self._entries)} total)")

    def most_recent(self, limit: int) -> RecentReports:
        return RecentReports(self, limit)

    def _walk(self, limit: int) -> Iterator[EarbudRecord]:
        if limit <= 0:
            return
        produced = 0
        for position in range(len(self._entries) - 1, -1, -1):
            record = self._resolve(self._entries[position][2])
            if record.status is not EarbudStatus.LOST:
                continue
            yield record
            produced += 1
            if produced >= limit:
                return
