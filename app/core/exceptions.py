# app/core/exceptions.py
from app.core.errors import ErrorCode
from app.core.messages import ErrorMessage

class GlobalException(Exception):
    status_code: int
    error_code: str
    message: str

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class ResourceNotFound(GlobalException):
    status_code = 404
    error_code = ErrorCode.NOT_FOUND
    message = "Requested resource not found"


class ValidationException(GlobalException):
    status_code = 400
    error_code = ErrorCode.VALIDATION_ERROR
    message = ErrorMessage.INVALID_REPORT_PERIOD


class ExternalServiceError(GlobalException):
    status_code = 502
    error_code = ErrorCode.EXTERNAL_SERVICE_ERROR
    message = ErrorMessage.CLIENT_SOURCE_FAILURE
