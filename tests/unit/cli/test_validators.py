# tests/unit/cli/test_validators.py

import pytest

from qiish_args.cli.validators import (
    _validate_environment_defaults,
    _validate_input_source,
    validate_parsed_args,
)
from qiish_args.exceptions import ConfigurationError, ValidationError


class TestValidateInputSource:
    """Test input source validation."""

    def test_no_source_is_valid(self, base_namespace):
        """Test that the interactive default passes."""
        _validate_input_source(base_namespace())

    def test_command_only_is_valid(self, base_namespace):
        """Test that an empty command line is still a command."""
        _validate_input_source(base_namespace(command=""))

    def test_valid_file(self, base_namespace, input_file):
        """Test that an existing file passes."""
        _validate_input_source(base_namespace(file=str(input_file)))

    def test_empty_file_path(self, base_namespace):
        """Test that an empty path is rejected."""
        with pytest.raises(ValidationError, match="--file requires a non-empty path."):
            _validate_input_source(base_namespace(file="  "))

    def test_directory_is_not_a_file(self, base_namespace, tmp_path):
        """Test that a directory is rejected."""
        with pytest.raises(ValidationError, match="Path is not a file"):
            _validate_input_source(base_namespace(file=str(tmp_path)))

    def test_nonexistent_path(self, base_namespace, mocker):
        """Test that a missing path is rejected."""
        mocker.patch("os.path.exists", return_value=False)
        with pytest.raises(ValidationError, match="Path does not exist: /no/such/file"):
            _validate_input_source(base_namespace(file="/no/such/file"))

    def test_command_and_file(self, base_namespace, input_file):
        """Test that both sources together are rejected."""
        with pytest.raises(ValidationError, match="--command and --file cannot be used together"):
            _validate_input_source(base_namespace(command="ls", file=str(input_file)))


class TestValidateEnvironmentDefaults:
    """Test validation of values that may come from the environment."""

    def test_defaults_pass(self, base_namespace):
        """Test that defaults are valid."""
        _validate_environment_defaults(base_namespace())

    def test_bad_log_level(self, base_namespace):
        """Test an invalid log level."""
        with pytest.raises(ConfigurationError, match="Invalid log level"):
            _validate_environment_defaults(base_namespace(log="TRACE"))

    def test_bad_format(self, base_namespace):
        """Test an invalid output format."""
        with pytest.raises(ConfigurationError, match="Invalid output format"):
            _validate_environment_defaults(base_namespace(format="yaml"))

    def test_full_validation(self, base_namespace):
        """Test the full validation flow with a valid namespace."""
        validate_parsed_args(base_namespace(command="ls -la"))
