# worklog/services/update_builder.py
"""
Sparse patch construction for work logs.

Only fields the caller actually supplied (present and non-empty) make it into
the SET clause. Everything else is left untouched in storage.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import update
from sqlalchemy.sql import Update

from worklog.exceptions import NoFieldsToUpdate
from worklog.models import WorkLog, utcnow
from worklog.schemas.work_log import WorkLogUpdate
from worklog.utils.validation import (
    is_blank,
    require_priority,
    require_task_status,
    require_task_type,
    to_utc,
)

logger = logging.getLogger(__name__)


def build_update_values(payload: WorkLogUpdate) -> Dict[str, Any]:
    """Map supplied fields onto column values, validating constrained ones"""
    values: Dict[str, Any] = {}

    if not is_blank(payload.taskName):
        values["task_name"] = payload.taskName

    if payload.taskType:
        values["task_type"] = require_task_type(payload.taskType)

    if payload.taskStatus:
        values["task_status"] = require_task_status(payload.taskStatus)

    if not is_blank(payload.notes):
        values["notes"] = payload.notes

    if payload.startedAt is not None:
        values["started_at"] = to_utc(payload.startedAt)

    if payload.completedAt is not None:
        values["completed_at"] = to_utc(payload.completedAt)

    if payload.priority is not None:
        values["priority"] = require_priority(payload.priority)

    return values


def build_update_statement(log_id, payload: WorkLogUpdate, now: Optional[datetime] = None) -> Update:
    values = build_update_values(payload)
    if not values:
        raise NoFieldsToUpdate()

    # updated_at is refreshed on every successful update
    values["updated_at"] = now or utcnow()
    logger.debug(f"Updating log {log_id}: fields={sorted(values)}")

    return (
        update(WorkLog)
        .where(WorkLog.log_id == log_id)
        .values(**values)
        .execution_options(synchronize_session=False)
    )
