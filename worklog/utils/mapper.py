# worklog/utils/mapper.py
"""Shape raw ``logs`` rows into the WorkLog records returned to callers."""

from typing import Any, Mapping

from worklog.schemas.work_log import WorkLogOut, WorkLogListItem
from worklog.utils.validation import to_utc

# Sentinel for rows whose notes column is NULL
MISSING_NOTES = "n/a"


def _mapping(row) -> Mapping[str, Any]:
    # SQLAlchemy Row objects expose their named columns through ._mapping
    return getattr(row, "_mapping", row)


def _fields(row) -> dict:
    data = _mapping(row)
    notes = data["notes"]

    return {
        "logId": data["log_id"],
        "taskName": data["task_name"],
        "taskType": data["task_type"],
        "taskStatus": data["task_status"],
        "notes": notes if notes is not None else MISSING_NOTES,
        "startedAt": to_utc(data["started_at"]),
        "completedAt": to_utc(data["completed_at"]),
        "createdAt": to_utc(data["created_at"]),
        "updatedAt": to_utc(data["updated_at"]),
        "priority": data["priority"],
    }


def to_work_log(row) -> WorkLogOut:
    return WorkLogOut(**_fields(row))


def to_list_item(row, total_pages: int) -> WorkLogListItem:
    return WorkLogListItem(**_fields(row), totalPages=total_pages)
