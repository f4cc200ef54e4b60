class ErrorMessage:
    # ---------- Generic ----------
    SERVER_ERROR = "Internal server error"
    CLIENT_SOURCE_FAILURE = "Client source request failed"

    # ---------- Client source ----------
    CLIENT_SOURCE_UNREACHABLE = "Unable to reach client source"
    CLIENT_SOURCE_ERROR = "Client source returned an error"
    CLIENT_SOURCE_INVALID = "Invalid client source response"
    CLIENT_SOURCE_FORMAT = "Unexpected client source response format"
    CLIENTS_NOT_FOUND = "Clients endpoint not found on client source"

    # ---------- Reports ----------
    INVALID_REPORT_PERIOD = "Invalid report period"
    INVALID_EXPORT_TYPE = "Invalid export type"
    NO_CLIENTS_FOR_PERIOD = "No clients found to export for the requested period"
