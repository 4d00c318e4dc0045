# worklog/models/work_log.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Uuid, Index
import uuid
from datetime import datetime, timezone

from worklog.database import Base


def utcnow():
    return datetime.now(timezone.utc)


class WorkLog(Base):
    __tablename__ = "logs"

    log_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    task_name = Column(String, nullable=False, unique=True)
    task_type = Column(String, nullable=False)
    task_status = Column(String, nullable=False)
    priority = Column(Integer, nullable=False, default=1)
    notes = Column(Text, nullable=True)

    # Work timing (always stored in UTC)
    started_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # System dates
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        Index("ix_logs_updated_at", "updated_at"),
        Index("ix_logs_completed_at", "completed_at"),
    )
