# worklog/utils/validation.py
"""Validation rules for work-log fields. Pure functions, no store access."""

import json
import re
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from worklog.exceptions import InvalidLogIds, ValidationFailed

TASK_TYPES = ("task", "bug", "story")
TASK_STATUSES = ("backlog", "pending", "progress", "pr", "staging")
PRIORITIES = (1, 5, 7, 10)

DEFAULT_PRIORITY = 1
HIGHEST_PRIORITY = max(PRIORITIES)

# Notes sentinel written when the caller sends none
DEFAULT_NOTES = "N/A"

BUCKET_VIEWS = ("week", "month")
LOOKBACK_PATTERN = re.compile(r"^\s*(\d{1,4})\s+(day|week|month|year)s?\s*$", re.IGNORECASE)


def is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def validate_task_type(task_type: Optional[str]) -> bool:
    return task_type in TASK_TYPES


def validate_task_status(task_status: Optional[str]) -> bool:
    return task_status in TASK_STATUSES


def validate_priority(priority) -> bool:
    # bool is an int subclass, True must not pass for priority 1
    return isinstance(priority, int) and not isinstance(priority, bool) and priority in PRIORITIES


def require_task_name(task_name: Optional[str]) -> str:
    if is_blank(task_name):
        raise ValidationFailed("Task name is required")
    return task_name


def require_task_type(task_type: Optional[str]) -> str:
    if not task_type or not validate_task_type(task_type):
        raise ValidationFailed("Invalid task type")
    return task_type


def require_task_status(task_status: Optional[str]) -> str:
    if not task_status or not validate_task_status(task_status):
        raise ValidationFailed("Invalid task status")
    return task_status


def require_priority(priority) -> int:
    if not validate_priority(priority):
        raise ValidationFailed("Invalid priority value")
    return priority


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a timestamp to UTC; naive values are taken as UTC already"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def require_bucket_view(view: Optional[str]) -> str:
    view = (view or "week").strip().lower()
    if view not in BUCKET_VIEWS:
        raise ValidationFailed("Invalid view value, expected one of: week, month")
    return view


def require_lookback(duration: Optional[str]) -> str:
    """Normalize a lookback like '3 months' into a Postgres interval literal"""
    if is_blank(duration):
        duration = "1 months"

    match = LOOKBACK_PATTERN.match(duration)
    if not match:
        raise ValidationFailed("Invalid duration value, expected e.g. '1 months' or '2 weeks'")

    amount, unit = match.groups()
    return f"{int(amount)} {unit.lower()}s"


def parse_log_ids(raw: Optional[str]) -> List[uuid.UUID]:
    """Decode the bulk delete ``logIds`` query value, a JSON array of ids"""
    if is_blank(raw):
        raise ValidationFailed("At least 1 log id is required.")

    try:
        ids = json.loads(raw)
    except ValueError as e:
        raise InvalidLogIds() from e

    if not isinstance(ids, list) or not all(isinstance(log_id, str) for log_id in ids):
        raise InvalidLogIds()
    if not ids:
        raise ValidationFailed("At least 1 log id is required.")

    try:
        return [uuid.UUID(log_id) for log_id in ids]
    except ValueError as e:
        raise InvalidLogIds() from e
