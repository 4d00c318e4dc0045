# worklog/exceptions.py
"""
Error taxonomy for the work-log service.

Services raise these, ``main.py`` renders them as ``{"message": ..., **extra}``
with the matching HTTP status.
"""

from typing import Any, Dict, Optional


class WorkLogError(Exception):
    """Base class for errors that map onto a client facing response"""

    status_code = 500

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, **self.extra}


class ValidationFailed(WorkLogError):
    """Missing or invalid field, rejected before the store is touched"""

    status_code = 422


class NoFieldsToUpdate(WorkLogError):
    status_code = 400

    def __init__(self, message: str = "No valid fields to update"):
        super().__init__(message)


class InvalidLogIds(WorkLogError):
    status_code = 400

    def __init__(self, message: str = "Invalid logIds format"):
        super().__init__(message)


class LogNotFound(WorkLogError):
    status_code = 404

    def __init__(self, log_id, message: str = "No records found with this log id"):
        super().__init__(message, {"logId": str(log_id)})
        self.log_id = log_id


class DuplicateTaskName(WorkLogError):
    status_code = 409

    def __init__(self, task_name: str, message: str = "Task name already exists"):
        super().__init__(message, {"taskName": task_name})
        self.task_name = task_name
