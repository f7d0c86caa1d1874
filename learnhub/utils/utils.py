from datetime import datetime, UTC


def utcnow() -> datetime:
    return datetime.now(UTC)


def completion_percentage(completed: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return 100 * completed / total
