from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar

DataT = TypeVar("DataT")


class SuccessResponse(BaseModel, Generic[DataT]):
    status: str = "success"
    message: str = ""
    data: Optional[DataT] = None


class PaginatedResponse(BaseModel, Generic[DataT]):
    status: str = "success"
    message: str = ""
    data: List[DataT]
    total: int
    page: int
    pages: int


class ErrorResponse(BaseModel):
    status: str = "error"
    error: str
    message: str
    code: str


class HealthResponse(BaseModel):
    status: str
