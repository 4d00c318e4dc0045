# worklog/routers/work_log.py
from fastapi import APIRouter, Depends, status
from typing import Optional
import uuid

from worklog.schemas.work_log import (
    BulkDeleteResponse,
    LogListResponse,
    LogResponse,
    MessageResponse,
    WorkLogCreate,
    WorkLogUpdate,
)
from worklog.services.work_log_service import WorkLogService, get_work_log_service
from worklog.utils.validation import parse_log_ids

router = APIRouter()

@router.get("/logs", response_model=LogListResponse)
def get_logs(
    s: Optional[str] = None,
    sortBy: Optional[str] = None,
    sortOrder: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
    service: WorkLogService = Depends(get_work_log_service)
):
    """List logs, or rank them against the search text in `s`.

    `page` is zero-based: page=0 returns the first `limit` rows.
    Every row carries `totalPages` for the pager.
    """
    logs = service.list_logs(search=s, sort_by=sortBy, sort_order=sortOrder, limit=limit, page=page)
    return {"logs": logs}

@router.get("/log/{log_id}", response_model=LogResponse)
def get_log(log_id: uuid.UUID, service: WorkLogService = Depends(get_work_log_service)):
    return {"message": "Ok", "log": service.get_log(log_id)}

@router.post("/log", response_model=LogResponse, status_code=status.HTTP_201_CREATED)
def create_log(payload: WorkLogCreate, service: WorkLogService = Depends(get_work_log_service)):
    """Create a log; task names are unique"""
    return {"message": "Log created successfully", "log": service.create_log(payload)}

@router.put("/log", response_model=LogResponse)
def update_log(payload: WorkLogUpdate, service: WorkLogService = Depends(get_work_log_service)):
    """Patch only the fields present in the body, identified by `logId`"""
    return {"message": "Log updated successfully", "log": service.update_log(payload)}

@router.delete("/log/{log_id}", response_model=MessageResponse)
def delete_log(log_id: uuid.UUID, service: WorkLogService = Depends(get_work_log_service)):
    service.delete_log(log_id)
    return {"message": "Successfully deleted the log"}

@router.delete("/logs", response_model=BulkDeleteResponse)
def delete_logs(logIds: Optional[str] = None, service: WorkLogService = Depends(get_work_log_service)):
    """Bulk delete. `logIds` is a JSON array, e.g. ?logIds=["<id>", "<id>"]"""
    row_count = service.delete_logs(parse_log_ids(logIds))
    return {"message": "Logs deleted successfully", "rowCount": row_count}
