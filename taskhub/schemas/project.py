from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from .user import UserBasic


class ProjectCreate(BaseModel):
    name: str = ""
    description: Optional[str] = ""


class ProjectUpdate(BaseModel):
    """Fields left out of the request body keep their stored value"""
    name: Optional[str] = None
    description: Optional[str] = None


class ProjectOut(BaseModel):
    id: str
    user_id: str
    name: str
    description: str
    created_by_id: Optional[str] = None
    created_by: Optional[UserBasic] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }
