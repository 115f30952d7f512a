from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    # Empty defaults let the validators report invalid_email / weak_password
    email: str = ""
    password: str = ""
    name: Optional[str] = ""


class UserLogin(BaseModel):
    email: str = ""
    password: str = ""


class UserBasic(BaseModel):
    id: str
    email: str
    name: str

    model_config = {
        "from_attributes": True
    }


class UserOut(BaseModel):
    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }


class UserUpdate(BaseModel):
    name: Optional[str] = None
