# worklog/services/work_log_service.py
"""
Work log store operations.

The service is built per request around an injected SQLAlchemy session, so
it keeps no state between requests and can be handed any session in tests.
"""

import logging
from contextlib import contextmanager
from datetime import date
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from worklog.database import get_db
from worklog.exceptions import DuplicateTaskName, LogNotFound, ValidationFailed
from worklog.models import WorkLog
from worklog.schemas.summary import (
    CompletedCount,
    DailyTaskCount,
    StatusSummaryItem,
    TaskSummary,
    TypeSummaryItem,
)
from worklog.schemas.work_log import WorkLogCreate, WorkLogListItem, WorkLogOut, WorkLogUpdate
from worklog.services import analytics
from worklog.services.query_builder import WORK_LOG_COLUMNS, build_list_query, count_pages, resolve_page_window
from worklog.services.update_builder import build_update_statement
from worklog.utils.mapper import to_list_item, to_work_log
from worklog.utils.validation import (
    DEFAULT_NOTES,
    DEFAULT_PRIORITY,
    is_blank,
    require_priority,
    require_task_name,
    require_task_status,
    require_task_type,
    to_utc,
)

logger = logging.getLogger(__name__)

# Fixed English labels; %b would follow the process locale
MONTH_ABBREVIATIONS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")


def format_day(day: date) -> str:
    """date(2024, 1, 5) -> '05 JAN 2024'"""
    return f"{day.day:02d} {MONTH_ABBREVIATIONS[day.month - 1]} {day.year:04d}"


class WorkLogService:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _committing(self, task_name: Optional[str] = None):
        """Commit on success; roll back on failure and turn unique violations into conflicts"""
        try:
            yield
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if task_name is not None:
                logger.info(f"Unique constraint rejected task name {task_name!r}")
                raise DuplicateTaskName(task_name) from e
            raise
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def _fetch_row(self, log_id):
        return self.db.execute(select(*WORK_LOG_COLUMNS).where(WorkLog.log_id == log_id)).first()

    def log_exists(self, log_id) -> bool:
        return self.db.execute(select(WorkLog.log_id).where(WorkLog.log_id == log_id)).first() is not None

    def task_name_taken(self, task_name: str) -> bool:
        return self.db.execute(select(WorkLog.log_id).where(WorkLog.task_name == task_name).limit(1)).first() is not None

    # Listing and lookup

    def list_logs(
        self,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
    ) -> List[WorkLogListItem]:
        stmt = build_list_query(search=search, sort_by=sort_by, sort_order=sort_order, limit=limit, page=page)
        page_size, _ = resolve_page_window(limit, page)

        rows = self.db.execute(stmt).all()
        return [to_list_item(row, count_pages(row.total_count, page_size)) for row in rows]

    def get_log(self, log_id) -> WorkLogOut:
        row = self._fetch_row(log_id)
        if row is None:
            raise LogNotFound(log_id, "No records found")
        return to_work_log(row)

    # Mutations

    def create_log(self, payload: WorkLogCreate) -> WorkLogOut:
        task_name = require_task_name(payload.taskName)
        task_status = require_task_status(payload.taskStatus)
        task_type = require_task_type(payload.taskType)
        priority = DEFAULT_PRIORITY if payload.priority is None else require_priority(payload.priority)
        notes = DEFAULT_NOTES if is_blank(payload.notes) else payload.notes

        # The unique constraint on task_name is the real guard, this check
        # only gives the common case a clean answer before the insert.
        if self.task_name_taken(task_name):
            raise DuplicateTaskName(task_name)

        log = WorkLog(
            task_name=task_name,
            task_type=task_type,
            task_status=task_status,
            priority=priority,
            notes=notes,
            started_at=to_utc(payload.startedAt),
            completed_at=to_utc(payload.completedAt),
        )

        with self._committing(task_name=task_name):
            self.db.add(log)

        logger.info(f"Created log {log.log_id} ({task_name!r})")
        return self.get_log(log.log_id)

    def update_log(self, payload: WorkLogUpdate) -> WorkLogOut:
        if payload.logId is None:
            raise ValidationFailed("Log id is required")

        if not self.log_exists(payload.logId):
            raise LogNotFound(payload.logId)

        stmt = build_update_statement(payload.logId, payload)
        with self._committing(task_name=payload.taskName):
            self.db.execute(stmt)

        logger.info(f"Updated log {payload.logId}")
        return self.get_log(payload.logId)

    def delete_log(self, log_id) -> None:
        if not self.log_exists(log_id):
            raise LogNotFound(log_id, "No log found")

        with self._committing():
            self.db.execute(
                delete(WorkLog)
                .where(WorkLog.log_id == log_id)
                .execution_options(synchronize_session=False)
            )

        logger.info(f"Deleted log {log_id}")

    def delete_logs(self, log_ids: List) -> int:
        """Delete every listed log in one statement; unknown ids are simply not counted"""
        with self._committing():
            result = self.db.execute(
                delete(WorkLog)
                .where(WorkLog.log_id.in_(log_ids))
                .execution_options(synchronize_session=False)
            )

        logger.info(f"Bulk delete removed {result.rowcount} of {len(log_ids)} requested logs")
        return result.rowcount

    # Analytics

    def status_summary(self) -> List[StatusSummaryItem]:
        rows = self.db.execute(analytics.status_summary_query()).all()
        return [
            StatusSummaryItem(taskStatus=row.task_status, statusCount=row.group_count, percentage=row.percentage)
            for row in rows
        ]

    def type_summary(self) -> List[TypeSummaryItem]:
        rows = self.db.execute(analytics.type_summary_query()).all()
        return [
            TypeSummaryItem(taskType=row.task_type, statusCount=row.group_count, percentage=row.percentage)
            for row in rows
        ]

    def daily_task_count(self) -> List[DailyTaskCount]:
        rows = self.db.execute(analytics.daily_task_count_query()).all()
        return [
            DailyTaskCount(createdDate=row.created_date, formattedDate=format_day(row.created_date), taskCount=row.task_count)
            for row in rows
        ]

    def completed_task_count(self, view: Optional[str] = None, duration: Optional[str] = None) -> List[CompletedCount]:
        rows = self.db.execute(analytics.completed_task_count_query(view, duration)).all()
        return [CompletedCount(completedAt=row.date_start, taskCount=row.task_count) for row in rows]

    def task_summary(self) -> TaskSummary:
        row = self.db.execute(analytics.task_summary_query()).one()
        return TaskSummary(
            totalTasks=row.total_tasks,
            totalBugs=row.total_bugs,
            totalProgressTasks=row.total_progress_tasks,
            highestPriorityTasks=row.highest_priority_tasks,
        )


def get_work_log_service(db: Session = Depends(get_db)) -> WorkLogService:
    return WorkLogService(db)
