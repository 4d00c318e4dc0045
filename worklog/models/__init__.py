from .work_log import WorkLog, utcnow
