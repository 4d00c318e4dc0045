# worklog/schemas/work_log.py
from pydantic import BaseModel, StrictInt
from datetime import datetime
from typing import Optional, List
import uuid

# Enum fields stay plain strings; worklog.utils.validation checks them.

class WorkLogCreate(BaseModel):
    taskName: Optional[str] = None
    taskType: Optional[str] = None
    taskStatus: Optional[str] = None
    notes: Optional[str] = None
    startedAt: Optional[datetime] = None
    completedAt: Optional[datetime] = None
    priority: Optional[StrictInt] = None

class WorkLogUpdate(BaseModel):
    logId: Optional[uuid.UUID] = None
    taskName: Optional[str] = None
    taskType: Optional[str] = None
    taskStatus: Optional[str] = None
    notes: Optional[str] = None
    startedAt: Optional[datetime] = None
    completedAt: Optional[datetime] = None
    priority: Optional[StrictInt] = None

class WorkLogOut(BaseModel):
    logId: uuid.UUID
    taskName: str
    taskType: str
    taskStatus: str
    notes: str
    startedAt: Optional[datetime] = None
    completedAt: Optional[datetime] = None
    createdAt: datetime
    updatedAt: datetime
    priority: int

    model_config = {
        "from_attributes": True
    }

class WorkLogListItem(WorkLogOut):
    totalPages: int

# Response envelopes
class LogListResponse(BaseModel):
    logs: List[WorkLogListItem] = []

class LogResponse(BaseModel):
    message: str
    log: WorkLogOut

class MessageResponse(BaseModel):
    message: str

class BulkDeleteResponse(BaseModel):
    message: str
    rowCount: int
