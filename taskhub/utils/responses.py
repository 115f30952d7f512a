# taskhub/utils/responses.py
# Uniform success / paginated / error envelopes shared by every router

from typing import Any, Sequence

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from taskhub.errors import AppError, ErrorCode
from taskhub.utils.pagination import PageResult


def success_response(data: Any = None, message: str = "") -> dict:
    return {"status": "success", "message": message, "data": data}


def paginated_response(result: PageResult, message: str = "", items: Sequence[Any] = None) -> dict:
    return {
        "status": "success",
        "message": message,
        "data": list(result.items if items is None else items),
        "total": result.total,
        "page": result.page,
        "pages": result.pages,
    }


def error_body(code: ErrorCode, message: str) -> dict:
    return {"status": "error", "error": code.value, "message": message, "code": code.value}


def error_response(err: AppError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content=jsonable_encoder(error_body(err.code, err.message)))


def error_response_for(code: ErrorCode, message: str, status_code: int, headers: dict = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(code, message), headers=headers)
