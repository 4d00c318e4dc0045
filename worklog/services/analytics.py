# worklog/services/analytics.py
"""
Read-only analytic queries over the logs table.

Each builder returns a statement with a fixed shape; running one has no side
effects and can be repeated freely.
"""

from sqlalchemy import Date, DateTime, Float, Integer, cast, func, select, text

from worklog.models import WorkLog
from worklog.utils.validation import HIGHEST_PRIORITY, require_bucket_view, require_lookback

# Bucket starts for the whole window are generated first, then completed counts
# are left-joined so empty buckets still show up with a zero count.
COMPLETED_COUNT_SQL = """
    WITH date_series AS (
        SELECT generate_series(
            date_trunc(:unit, now() - CAST(:lookback AS INTERVAL)),
            date_trunc(:unit, now()),
            CAST(:step AS INTERVAL)
        ) AS date_start
    ),
    logs_by_view AS (
        SELECT
            date_trunc(:unit, completed_at) AS date_start,
            count(task_name) AS task_count
        FROM logs
        WHERE completed_at IS NOT NULL
        GROUP BY 1
    )
    SELECT
        d.date_start,
        coalesce(l.task_count, 0) AS task_count
    FROM date_series d
    LEFT JOIN logs_by_view l ON d.date_start = l.date_start
    ORDER BY d.date_start
"""


def _total_logs():
    return select(func.count()).select_from(WorkLog).scalar_subquery()


def _breakdown_query(column):
    group_count = func.count(column)
    return (
        select(
            column,
            group_count.label("group_count"),
            (cast(group_count, Float) / _total_logs() * 100).label("percentage"),
        )
        .group_by(column)
        .order_by(column)
    )


def status_summary_query():
    """Count and percentage of all logs per task status"""
    return _breakdown_query(WorkLog.task_status)


def type_summary_query():
    """Count and percentage of all logs per task type"""
    return _breakdown_query(WorkLog.task_type)


def daily_task_count_query():
    created_date = cast(WorkLog.created_at, Date).label("created_date")
    return (
        select(created_date, func.count().label("task_count"))
        .group_by(created_date)
        .order_by(created_date)
    )


def completed_task_count_query(view: str = None, duration: str = None):
    """
    Gap-filled completed-task counts.

    ``view`` picks the bucket width (week or month), ``duration`` the lookback
    window such as ``"3 months"``. Both are validated before being bound.
    """
    unit = require_bucket_view(view)
    lookback = require_lookback(duration)

    return (
        text(COMPLETED_COUNT_SQL)
        .bindparams(unit=unit, lookback=lookback, step=f"1 {unit}")
        .columns(date_start=DateTime(timezone=True), task_count=Integer)
    )


def task_summary_query():
    return select(
        func.count().label("total_tasks"),
        func.count().filter(WorkLog.task_type == "bug").label("total_bugs"),
        func.count().filter(WorkLog.task_status == "progress").label("total_progress_tasks"),
        func.count().filter(WorkLog.priority == HIGHEST_PRIORITY).label("highest_priority_tasks"),
    ).select_from(WorkLog)
