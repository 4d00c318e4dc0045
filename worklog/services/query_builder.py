# worklog/services/query_builder.py
"""
Listing and search query construction for work logs.

A single builder serves both the plain listing and the ranked search; sorting
and pagination are optional, defaulted parameters. Every caller supplied value
ends up as a bound parameter or is resolved through a whitelist.
"""

import logging
import math
import re
from typing import List, Optional, Tuple

from sqlalchemy import Float, func, or_, select
from sqlalchemy.sql import Select

from worklog.exceptions import ValidationFailed
from worklog.models import WorkLog
from worklog.utils.validation import is_blank

logger = logging.getLogger(__name__)

DEFAULT_SORT_BY = "updated_at"
DEFAULT_SORT_ORDER = "desc"
DEFAULT_PAGE_SIZE = 10
TEXT_SEARCH_CONFIG = "english"

WORK_LOG_COLUMNS = (
    WorkLog.log_id,
    WorkLog.task_name,
    WorkLog.task_type,
    WorkLog.task_status,
    WorkLog.notes,
    WorkLog.started_at,
    WorkLog.completed_at,
    WorkLog.created_at,
    WorkLog.updated_at,
    WorkLog.priority,
)

# Wire names and column names are both accepted for sortBy
SORTABLE_COLUMNS = {
    "taskName": WorkLog.task_name,
    "taskType": WorkLog.task_type,
    "taskStatus": WorkLog.task_status,
    "priority": WorkLog.priority,
    "startedAt": WorkLog.started_at,
    "completedAt": WorkLog.completed_at,
    "createdAt": WorkLog.created_at,
    "updatedAt": WorkLog.updated_at,
}
SORTABLE_COLUMNS.update({column.key: column for column in SORTABLE_COLUMNS.values()})

TOKEN_PATTERN = re.compile(r"\w+", re.UNICODE)

# LIMIT and OFFSET are bound as bigint
MAX_WINDOW_VALUE = 2**63 - 1


def resolve_page_window(limit: Optional[int] = None, page: Optional[int] = None) -> Tuple[int, int]:
    """Return (limit, offset). The page index is zero-based: offset = page * limit."""
    limit = limit if limit and limit > 0 else DEFAULT_PAGE_SIZE
    if limit > MAX_WINDOW_VALUE:
        raise ValidationFailed("Invalid limit value")

    offset = page * limit if page and page > 0 else 0
    if offset > MAX_WINDOW_VALUE:
        raise ValidationFailed("Invalid page value")
    return limit, offset


def resolve_sort(sort_by: Optional[str] = None, sort_order: Optional[str] = None):
    sort_by = sort_by or DEFAULT_SORT_BY
    sort_order = (sort_order or DEFAULT_SORT_ORDER).lower()

    column = SORTABLE_COLUMNS.get(sort_by)
    if column is None:
        raise ValidationFailed("Invalid sortBy value")

    if sort_order == "asc":
        return column.asc()
    if sort_order == "desc":
        return column.desc()
    raise ValidationFailed("Invalid sortOrder value")


def search_tokens(search: str) -> List[str]:
    return TOKEN_PATTERN.findall(search)


def to_tsquery_text(search: str) -> str:
    """'fix login bug' -> 'fix & login & bug'"""
    return " & ".join(search_tokens(search))


def count_pages(total_count: int, limit: int) -> int:
    return math.ceil(total_count / limit)


def searchable_text():
    return WorkLog.task_name + " " + func.coalesce(WorkLog.notes, "")


def build_list_query(
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
) -> Select:
    """
    Build the listing statement.

    Each row carries ``total_count``, the window count of every row matching
    the filter (the whole table for a plain listing), so total pages can be
    derived without another round trip.
    """
    limit, offset = resolve_page_window(limit, page)
    # A search ranks its own rows but still rejects bad sort options
    order_by = resolve_sort(sort_by, sort_order)
    total_count = func.count().over().label("total_count")

    if is_blank(search):
        stmt = (
            select(*WORK_LOG_COLUMNS, total_count)
            .order_by(order_by, WorkLog.log_id)
            .offset(offset)
            .limit(limit)
        )
        logger.debug(f"Plain listing: sort={sort_by or DEFAULT_SORT_BY} {sort_order or DEFAULT_SORT_ORDER} offset={offset} limit={limit}")
        return stmt

    search = search.strip()
    text = searchable_text()
    document = func.to_tsvector(TEXT_SEARCH_CONFIG, text)
    ts_query = func.to_tsquery(TEXT_SEARCH_CONFIG, to_tsquery_text(search))
    similarity = func.similarity(search, text, type_=Float)

    stmt = (
        select(*WORK_LOG_COLUMNS, total_count)
        .where(or_(document.bool_op("@@")(ts_query), similarity > 0))
        .order_by(
            func.ts_rank(document, ts_query).desc(),
            similarity.desc(),
            WorkLog.log_id,
        )
        .offset(offset)
        .limit(limit)
    )
    logger.debug(f"Ranked search: tokens={search_tokens(search)} offset={offset} limit={limit}")
    return stmt
