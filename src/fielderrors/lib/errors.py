"""Custom exception hierarchy for fielderrors configuration and input handling."""


class FieldErrorsError(Exception):
    """Base exception for all fielderrors errors.

    The conversion core itself never raises for well-typed input; these
    exceptions cover converter construction, configuration files, and report
    documents read from disk.
    """

    pass


class ConfigError(FieldErrorsError):
    """Exception raised for configuration errors.

    Raised when a converter configuration value has an unsupported shape, or
    when a configuration file cannot be parsed or validated.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(FieldErrorsError):
    """Exception raised when a configuration or report file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class ReportError(FieldErrorsError):
    """Exception raised when a report document cannot be decoded."""

    def __init__(self, message: str) -> None:
        """Create a report decoding error."""
        self.message = message
        super().__init__(message)
