"""Exceptions raised while resolving client settings.

Example:
    ```python
    from openapi_fetch_core.config.exceptions import SettingNotFoundError

    if not base_url:
        raise SettingNotFoundError("Base URL not configured", env_var_name="OPENAPI_FETCH_BASE_URL")
    ```
"""

from openapi_fetch_core.errors.exceptions import OpenAPIFetchError


class ConfigError(OpenAPIFetchError):
    """Base exception for settings resolution errors."""

    pass


class SettingNotFoundError(ConfigError):
    """Raised when a required setting cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class SettingFileError(ConfigError):
    """Raised when a required setting file cannot be read."""

    pass
