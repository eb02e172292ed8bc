"""Tests for converter configuration loading."""

import os
from pathlib import Path
from typing import Any

import pytest

from fielderrors.config.defaults import OUTPUT_FORMAT_ENV_VAR
from fielderrors.config.loader import ConfigLoader, load_converter
from fielderrors.lib.errors import ConfigError, FileNotFoundError, ReportError
from fielderrors.models.field_error import FieldError, OutputFormat


def _write(path: Path, content: str) -> str:
    path.write_text(content, encoding="utf-8")
    return str(path)


class TestParseYaml:
    """Tests for ConfigLoader.parse_yaml()."""

    def test_missing_file(self, temp_dir: Path) -> None:
        """Test missing files raise the package FileNotFoundError."""
        missing = str(temp_dir / "missing.yaml")
        with pytest.raises(FileNotFoundError) as exc_info:
            ConfigLoader().parse_yaml(missing)
        assert exc_info.value.path == missing

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Test malformed YAML raises ConfigError."""
        path = _write(temp_dir / "bad.yaml", "template: [unclosed\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().parse_yaml(path)
        assert exc_info.value.field == "yaml_parse"

    def test_empty_file(self, temp_dir: Path) -> None:
        """Test empty files parse to an empty mapping."""
        assert ConfigLoader().parse_yaml(_write(temp_dir / "e.yaml", "")) == {}


class TestLoad:
    """Tests for ConfigLoader.load()."""

    def test_template(self, temp_dir: Path) -> None:
        """Test a template configuration."""
        path = _write(
            temp_dir / "c.yaml", "template: '\"${key}\" is badly formed.'\n"
        )
        config = ConfigLoader().load(path, env_vars={})
        assert config.to_configuration() == '"${key}" is badly formed.'
        assert config.output_format is OutputFormat.PLAIN

    def test_patterns_and_format(self, temp_dir: Path) -> None:
        """Test pattern rules and output format are read."""
        path = _write(
            temp_dir / "c.yaml",
            "output_format: structured\n"
            "patterns:\n"
            "  - contains: 'length must be at least'\n"
            "    template: 'too short'\n"
            "  - search: 'required\\s+pattern'\n"
            "    template: 'badly formed'\n",
        )
        config = ConfigLoader().load(path, env_vars={})
        assert config.output_format is OutputFormat.STRUCTURED
        assert config.patterns is not None
        assert [rule.template for rule in config.patterns] == [
            "too short",
            "badly formed",
        ]

    def test_env_overrides_output_format(self, temp_dir: Path) -> None:
        """Test the environment variable overrides output_format."""
        path = _write(temp_dir / "c.yaml", "output_format: plain\n")
        config = ConfigLoader().load(
            path, env_vars={OUTPUT_FORMAT_ENV_VAR: "structured"}
        )
        assert config.output_format is OutputFormat.STRUCTURED

    def test_schema_errors_are_flattened(self, temp_dir: Path) -> None:
        """Test validation failures become ConfigError with field names."""
        path = _write(
            temp_dir / "c.yaml", "patterns:\n  - template: 'no matcher'\n"
        )
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load(path, env_vars={})
        assert exc_info.value.field == "converter_validation"
        assert "patterns.0" in str(exc_info.value)

    @pytest.mark.parametrize("content", ["1: foo\n", "true: x\n"])
    def test_non_string_keys_rejected(self, temp_dir: Path, content: str) -> None:
        """Test YAML keys that are not strings raise ConfigError."""
        path = _write(temp_dir / "c.yaml", content)
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load(path, env_vars={})
        assert exc_info.value.field == "converter_validation"

    def test_non_mapping_rejected(self, temp_dir: Path) -> None:
        """Test top-level lists are rejected."""
        path = _write(temp_dir / "c.yaml", "- template: x\n")
        with pytest.raises(ConfigError):
            ConfigLoader().load(path, env_vars={})


class TestLoadReport:
    """Tests for ConfigLoader.load_report()."""

    def test_json_report(self, temp_dir: Path) -> None:
        """Test JSON reports are read through the YAML parser."""
        path = _write(
            temp_dir / "r.json",
            '{"details": [{"path": "a", "message": "m", "type": "t"}]}',
        )
        report: Any = ConfigLoader().load_report(path)
        assert report["details"][0]["path"] == "a"

    def test_non_mapping_report(self, temp_dir: Path) -> None:
        """Test scalar documents raise ReportError."""
        path = _write(temp_dir / "r.json", "42")
        with pytest.raises(ReportError):
            ConfigLoader().load_report(path)

    def test_unparsable_report(self, temp_dir: Path) -> None:
        """Test parse failures raise ReportError."""
        path = _write(temp_dir / "r.json", '{"details": [')
        with pytest.raises(ReportError):
            ConfigLoader().load_report(path)


class TestLoadConverter:
    """Tests for load_converter()."""

    def test_types_file(
        self, temp_dir: Path, signup_report: dict[str, Any], isolated_env: dict
    ) -> None:
        """Test a types configuration drives conversion end to end."""
        os.environ.pop(OUTPUT_FORMAT_ENV_VAR, None)
        path = _write(
            temp_dir / "c.yaml",
            "output_format: structured\n"
            "types:\n"
            "  string.min: '\"${key}\" must be ${limit} or more chars.'\n",
        )
        result = load_converter(path)(signup_report)
        assert result is not None
        assert result["password"] == FieldError(
            message='"password" must be 2 or more chars.',
            path="password",
            type="string.min",
        )
        assert isinstance(result["name"], FieldError)
        assert result["name"].message == signup_report["details"][0]["message"]
