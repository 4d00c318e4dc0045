from .work_log import WorkLogCreate, WorkLogUpdate, WorkLogOut, WorkLogListItem, LogListResponse, LogResponse, MessageResponse, BulkDeleteResponse
from .summary import StatusSummaryItem, TypeSummaryItem, DailyTaskCount, CompletedCount, TaskSummary, StatusSummaryResponse, TypeSummaryResponse, DailyTaskCountResponse, CompletedCountResponse, TaskSummaryResponse
