from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class CommentCreate(BaseModel):
    content: str = ""


class CommentUpdate(BaseModel):
    content: str = ""


class CommentOut(BaseModel):
    id: str
    task_id: str
    user_id: str
    content: str
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }
