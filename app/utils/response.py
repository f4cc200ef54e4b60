from typing import Generic, TypeVar, List, Optional
from pydantic import BaseModel

T = TypeVar("T")

class ErrorDetail(BaseModel):
    code: str
    field: Optional[str] = None
    message: str

class ApiResponse(BaseModel, Generic[T]):
    success: bool
    statusCode: int
    message: str
    data: Optional[T]
    errors: Optional[List[ErrorDetail]] = None
    traceId: Optional[str] = None


def error_response(message, errors, status_code=400, trace_id=None):
    return ApiResponse(
        success=False,
        statusCode=status_code,
        message=message,
        data=None,
        errors=errors,
        traceId=trace_id
    )
