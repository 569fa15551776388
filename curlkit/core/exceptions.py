"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Everything below RequestValidationError is detected before the transport
tool is started.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class RequestValidationError(ApplicationError):
    """Raised when command-line input fails validation."""

    def __init__(self, message: str = "Validation failed", code: str = "VAL_VALIDATION_ERROR") -> None:
        super().__init__(message, code=code)


class MissingRequiredParameterError(RequestValidationError):
    """Raised when a mandatory option (--url, --method) is absent."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"{option} parameter is required", code="VAL_MISSING_PARAMETER")


class InputFileNotFoundError(RequestValidationError):
    """Raised when a body, upload or cookie file is missing or unreadable."""

    def __init__(self, role: str, path: str) -> None:
        self.role = role
        self.path = path
        super().__init__(f"{role} file '{path}' not found", code="VAL_FILE_NOT_FOUND")


class InvalidContentTypeError(RequestValidationError):
    """Raised when --content-type is not one of the supported tags."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid content-type '{value}'. Use 'json', 'urlencoded', or 'multipart'",
            code="VAL_INVALID_CONTENT_TYPE",
        )


class ConfigurationError(ApplicationError):
    """Raised when a settings file cannot be parsed or validated."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class TransportNotFoundError(ApplicationError):
    """Raised when the transport binary cannot be executed."""

    def __init__(self, binary: str) -> None:
        self.binary = binary
        super().__init__(
            f"Transport tool '{binary}' not found. Install it or set 'binary' in transport.yaml.",
            code="SYS_TRANSPORT_NOT_FOUND",
        )
