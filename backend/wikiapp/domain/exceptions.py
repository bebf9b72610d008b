from typing import Optional


class ApiError(Exception):
    """
    Base class for errors surfaced to API callers.

    `data` names the entity (NotFound) or the request field (InvalidParam)
    the error is about, so clients can react without parsing the message.
    """
    status_code = 500
    default_message = "Internal error."

    def __init__(self, data: Optional[str] = None, message: Optional[str] = None):
        self.data = data
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "data": self.data,
            "message": self.message,
        }


class NotFound(ApiError):
    status_code = 404

    def __init__(self, data: Optional[str] = None, message: Optional[str] = None):
        super().__init__(data, message or f"{data or 'Resource'} not found.")


class InvalidParam(ApiError):
    status_code = 400

    def __init__(self, data: Optional[str] = None, message: Optional[str] = None):
        super().__init__(data, message or f"Invalid parameter: {data}.")


class PermissionDenied(ApiError):
    status_code = 403
    default_message = "Permission denied."


class ResourceConflict(ApiError):
    status_code = 409
    default_message = "Resource conflict."


class RecursiveMoveError(ResourceConflict):
    default_message = "Will cause recursive."


class StorageError(ApiError):
    status_code = 500
    default_message = "Storage error."
