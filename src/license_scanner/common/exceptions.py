"""Custom exceptions for License Scanner."""


class LicenseScanError(Exception):
    """Base exception for license scanning errors."""

    def __init__(self, message: str, session_id: str | None = None, cause: Exception | None = None):
        self.message = message
        self.session_id = session_id
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "sessionId": self.session_id,
            "cause": str(self.cause) if self.cause else None,
        }


class DecodeError(LicenseScanError):
    """A decode attempt produced no usable fields."""

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        session_id: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, session_id, cause)
        self.reason = reason

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = super().to_dict()
        result["reason"] = self.reason
        return result


class StorageError(LicenseScanError):
    """Error during storage operations."""

    def __init__(
        self,
        message: str,
        session_id: str | None = None,
        storage_type: str | None = None,  # "dynamodb"
        cause: Exception | None = None,
    ):
        super().__init__(message, session_id, cause)
        self.storage_type = storage_type


class ValidationError(LicenseScanError):
    """Error during customer draft validation."""

    def __init__(
        self,
        message: str,
        session_id: str | None = None,
        field_name: str | None = None,
        expected_value: str | None = None,
        actual_value: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, session_id, cause)
        self.field_name = field_name
        self.expected_value = expected_value
        self.actual_value = actual_value


class InvalidRequestError(LicenseScanError):
    """The decode request is missing or carries an unusable payload."""
    pass
