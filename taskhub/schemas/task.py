# taskhub/schemas/task.py
from pydantic import BaseModel, field_validator, model_validator
from datetime import date, datetime, timezone
from typing import Optional
from .user import UserBasic


def parse_due_date(value):
    """Accepts a bare YYYY-MM-DD date or a full ISO-8601 / RFC 3339 timestamp"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        try:
            d = date.fromisoformat(text)
            return datetime(d.year, d.month, d.day)
        except ValueError:
            pass
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError("due_date must be a YYYY-MM-DD date or an ISO-8601 timestamp")
    else:
        raise ValueError("due_date must be a YYYY-MM-DD date or an ISO-8601 timestamp")

    # stored as naive UTC
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


class TaskCreate(BaseModel):
    title: str = ""
    description: Optional[str] = ""
    priority: Optional[str] = "MEDIUM"
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _parse_due_date(cls, v):
        return parse_due_date(v)


class TaskUpdate(BaseModel):
    """Partial update: only fields present in the body are applied"""
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    assignee_id: Optional[str] = None
    due_date: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def _blank_due_date_means_absent(cls, data):
        if isinstance(data, dict) and data.get("due_date") == "":
            data = {k: v for k, v in data.items() if k != "due_date"}
        return data

    @field_validator("due_date", mode="before")
    @classmethod
    def _parse_due_date(cls, v):
        return parse_due_date(v)

    def present_fields(self) -> dict:
        return {name: getattr(self, name) for name in self.model_fields_set}


class TaskStatusUpdate(BaseModel):
    status: Optional[str] = None


class TaskPriorityUpdate(BaseModel):
    priority: Optional[str] = None


class TaskAssigneeUpdate(BaseModel):
    assignee_id: Optional[str] = None


class AssignTaskRequest(BaseModel):
    user_id: Optional[str] = None


class TaskOut(BaseModel):
    id: str
    project_id: str
    title: str
    description: str
    status: str
    priority: str
    due_date: Optional[datetime] = None

    assignee_id: Optional[str] = None
    assignee: Optional[UserBasic] = None
    assigned_by_id: Optional[str] = None
    assigned_by: Optional[UserBasic] = None
    created_by_id: Optional[str] = None
    created_by: Optional[UserBasic] = None

    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }
