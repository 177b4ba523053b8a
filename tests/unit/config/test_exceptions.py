"""Tests for settings resolution exceptions."""

import pytest

from openapi_fetch_core.config.exceptions import ConfigError, SettingFileError, SettingNotFoundError
from openapi_fetch_core.errors import OpenAPIFetchError


class TestConfigError:
    """Test ConfigError base exception."""

    def test_is_library_error(self):
        """Test that ConfigError is caught by the library base exception."""
        with pytest.raises(OpenAPIFetchError):
            raise ConfigError("Test error")


class TestSettingNotFoundError:
    """Test SettingNotFoundError exception."""

    def test_is_config_error(self):
        with pytest.raises(ConfigError):
            raise SettingNotFoundError("Test error")

    def test_env_var_name_attribute(self):
        error = SettingNotFoundError("Base URL not found", env_var_name="OPENAPI_FETCH_BASE_URL")

        assert str(error) == "Base URL not found"
        assert error.env_var_name == "OPENAPI_FETCH_BASE_URL"

    def test_env_var_name_optional(self):
        assert SettingNotFoundError("Test error").env_var_name is None


class TestSettingFileError:
    """Test SettingFileError exception."""

    def test_is_config_error(self):
        with pytest.raises(ConfigError):
            raise SettingFileError("File not found: /path/to/file")
