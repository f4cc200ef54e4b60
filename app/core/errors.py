class ErrorCode:
    INTERNAL_SERVER_ERROR = "internal_server_error"
    EXTERNAL_SERVICE_ERROR = "external_service_error"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
