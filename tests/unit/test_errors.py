"""Tests for custom exception hierarchy in fielderrors.lib.errors."""

from fielderrors.lib.errors import (
    ConfigError,
    FieldErrorsError,
    FileNotFoundError,
    ReportError,
)


class TestFieldErrorsError:
    """Tests for base FieldErrorsError exception."""

    def test_creates_with_message(self) -> None:
        """Test that FieldErrorsError can be created with a message."""
        error = FieldErrorsError("Test error message")
        assert str(error) == "Test error message"

    def test_is_exception(self) -> None:
        """Test that FieldErrorsError is an Exception subclass."""
        assert isinstance(FieldErrorsError("Test"), Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_formats_message_with_field(self) -> None:
        """Test that ConfigError formats messages with field information."""
        error = ConfigError("patterns[0]", "Field 'template' is required")
        assert "patterns[0]" in str(error)
        assert "required" in str(error).lower()

    def test_keeps_attributes(self) -> None:
        """Test that ConfigError exposes field and message."""
        error = ConfigError("configuration", "Unsupported shape")
        assert error.field == "configuration"
        assert error.message == "Unsupported shape"

    def test_is_fielderrors_error(self) -> None:
        """Test that ConfigError is a FieldErrorsError subclass."""
        assert isinstance(ConfigError("f", "m"), FieldErrorsError)


class TestFileNotFoundError:
    """Tests for FileNotFoundError exception."""

    def test_includes_path(self) -> None:
        """Test FileNotFoundError includes file path."""
        path = "/path/to/converter.yaml"
        error = FileNotFoundError(path, "Converter configuration file not found")
        assert path in str(error)
        assert error.path == path

    def test_is_fielderrors_error(self) -> None:
        """Test that FileNotFoundError is a FieldErrorsError subclass."""
        assert isinstance(FileNotFoundError("missing.yaml", "Not found"), FieldErrorsError)


class TestReportError:
    """Tests for ReportError exception."""

    def test_preserves_message(self) -> None:
        """Test ReportError keeps its message."""
        error = ReportError("Report must be a mapping")
        assert error.message == "Report must be a mapping"
        assert str(error) == "Report must be a mapping"
        assert isinstance(error, FieldErrorsError)
