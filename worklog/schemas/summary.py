from pydantic import BaseModel
from datetime import date, datetime
from typing import List

class StatusSummaryItem(BaseModel):
    taskStatus: str
    statusCount: int
    percentage: float

class TypeSummaryItem(BaseModel):
    taskType: str
    statusCount: int
    percentage: float

class DailyTaskCount(BaseModel):
    createdDate: date
    formattedDate: str
    taskCount: int

class CompletedCount(BaseModel):
    completedAt: datetime
    taskCount: int

class TaskSummary(BaseModel):
    totalTasks: int
    totalBugs: int
    totalProgressTasks: int
    highestPriorityTasks: int

class StatusSummaryResponse(BaseModel):
    statusSummary: List[StatusSummaryItem] = []

class TypeSummaryResponse(BaseModel):
    typeSummary: List[TypeSummaryItem] = []

class DailyTaskCountResponse(BaseModel):
    dailyTasks: List[DailyTaskCount] = []

class CompletedCountResponse(BaseModel):
    message: str = "ok"
    completedCount: List[CompletedCount] = []

class TaskSummaryResponse(BaseModel):
    taskSummary: TaskSummary
