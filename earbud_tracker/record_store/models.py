"""
Earbud Record Models
--------------------
The earbud report entity, its status enum and the default ordering key
"""

from __future__ import annotations

import uuid
import datetime as dt
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EarbudStatus(Enum):
    LOST = "lost"
    FOUND = "found"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def new_record_id() -> str:
    return str(uuid.uuid4())


class EarbudRecord(BaseModel):
    """One lost/found earbud report.

    Everything except ``status`` is fixed at construction; ``status`` may
    only move from LOST to FOUND.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_record_id, frozen=True)
    brand: str = Field(frozen=True)
    color: str = Field(frozen=True)
    location: str = Field(frozen=True)
    reported_at: dt.datetime = Field(default_factory=dt.datetime.now, frozen=True)
    status: EarbudStatus = EarbudStatus.LOST

    def __setattr__(self, name: str, value: Any) -> None:
        if (name == "status"
                and self.status is EarbudStatus.FOUND
                and EarbudStatus(value) is not EarbudStatus.FOUND):
            raise ValueError(f"Record {self.id} is already found and cannot be reopened")
        super().__setattr__(name, value)

    @property
    def is_found(self) -> bool:
        return self.status is EarbudStatus.FOUND

    def mark_found(self) -> bool:
        """Flip to FOUND. Returns False when the record was already found."""
        if self.is_found:
            return False
        self.status = EarbudStatus.FOUND
        return True


def by_reported_at(record: EarbudRecord) -> dt.datetime:
    """Default recency key: the time the record was reported"""
    return record.reported_at
