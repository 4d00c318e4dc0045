# worklog/routers/analytics.py
from fastapi import APIRouter, Depends, Query
from typing import Optional

from worklog.schemas.summary import (
    CompletedCountResponse,
    DailyTaskCountResponse,
    StatusSummaryResponse,
    TaskSummaryResponse,
    TypeSummaryResponse,
)
from worklog.services.work_log_service import WorkLogService, get_work_log_service

router = APIRouter()

@router.get("/status-summary", response_model=StatusSummaryResponse)
def get_status_summary(service: WorkLogService = Depends(get_work_log_service)):
    """Count and share of logs per task status"""
    return {"statusSummary": service.status_summary()}

@router.get("/type-summary", response_model=TypeSummaryResponse)
def get_type_summary(service: WorkLogService = Depends(get_work_log_service)):
    """Count and share of logs per task type"""
    return {"typeSummary": service.type_summary()}

@router.get("/daily-task-count", response_model=DailyTaskCountResponse)
def get_daily_task_count(service: WorkLogService = Depends(get_work_log_service)):
    return {"dailyTasks": service.daily_task_count()}

@router.get("/completed-task-count", response_model=CompletedCountResponse)
def get_completed_task_count(
    v: Optional[str] = Query(None, description="Bucket width: week or month"),
    d: Optional[str] = Query(None, description="Lookback window, e.g. '1 months', '2 weeks'"),
    service: WorkLogService = Depends(get_work_log_service)
):
    """Completed tasks per bucket over the lookback window, empty buckets reported as 0"""
    return {"message": "ok", "completedCount": service.completed_task_count(view=v, duration=d)}

@router.get("/task-summary", response_model=TaskSummaryResponse)
def get_task_summary(service: WorkLogService = Depends(get_work_log_service)):
    return {"taskSummary": service.task_summary()}
