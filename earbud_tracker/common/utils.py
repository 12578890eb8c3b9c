from earbud_tracker.record_store.models import EarbudRecord

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_record(record: EarbudRecord) -> str:
    return (
        f"ID: {record.id}\n"
        f"Brand: {record.brand}\n"
        f"Color: {record.color}\n"
        f"Location: {record.location}\n"
        f"Date Reported: {record.reported_at.strftime(DATE_FORMAT)}\n"
        f"Status: {record.status.label}\n"
    )


def summary_line(position: int, record: EarbudRecord) -> str:
    return f"{position}. {record.brand} - {record.color}"
