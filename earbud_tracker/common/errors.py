"""
Earbud Tracker Errors
---------------------
Exception hierarchy shared by the record store and the text shell.
"""


class TrackerError(Exception):
    """Base exception for Earbud Tracker operations"""
    pass


class NotFoundError(TrackerError, KeyError):
    """No record exists for the requested id"""

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(record_id)

    def __str__(self) -> str:
        return f"No earbud record with id {self.record_id!r}"


class InvalidInputError(TrackerError, ValueError):
    """Menu or selection input that cannot be used"""
    pass
