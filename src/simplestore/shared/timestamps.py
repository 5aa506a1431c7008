from datetime import datetime


def parse_timestamp(value) -> datetime | None:
    """Parse an ISO-8601 timestamp stored in a document."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
