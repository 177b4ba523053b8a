"""Client configuration from the environment.

This module provides:
- Typed setting resolution (explicit value, then environment and `.env`)
- File-based secrets
- `ClientSettings` holding the resolved base URL, token and timeout
- A client factory driven by ``<PREFIX>_*`` environment variables

Example:
    ```python
    from openapi_fetch_core.config import SettingsResolver

    settings = SettingsResolver().load("PETSTORE")
    print(settings.base_url, settings.timeout)
    ```
"""

from openapi_fetch_core.config.exceptions import ConfigError, SettingFileError, SettingNotFoundError
from openapi_fetch_core.config.settings import (
    DEFAULT_PREFIX,
    ClientSettings,
    SettingsResolver,
    create_client_from_env,
)

__all__ = [
    "DEFAULT_PREFIX",
    "ClientSettings",
    "ConfigError",
    "SettingFileError",
    "SettingNotFoundError",
    "SettingsResolver",
    "create_client_from_env",
]
