"""Client settings from explicit values, the environment and ``.env`` files.

:func:`create_client_from_env` reads these variables, ``OPENAPI_FETCH`` being
the default prefix:

| Variable | Meaning |
|----------|---------|
| `OPENAPI_FETCH_BASE_URL` | Base URL (required) |
| `OPENAPI_FETCH_TOKEN` | Bearer token sent as `Authorization` |
| `OPENAPI_FETCH_TOKEN_FILE` | File holding the token, used when `_TOKEN` is unset |
| `OPENAPI_FETCH_TIMEOUT` | Request timeout in seconds |

An explicit value always wins over the environment. ``.env`` values are
loaded into the environment once, without replacing variables already set.

Example:
    ```python
    from openapi_fetch_core.config import create_client_from_env

    async with create_client_from_env(prefix="PETSTORE") as client:
        result = await client.get("/pets")
    ```

Token values are never logged; only their source is.
"""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Any, TypeVar

from dotenv import load_dotenv

from openapi_fetch_core.client import Client
from openapi_fetch_core.config.exceptions import ConfigError, SettingFileError, SettingNotFoundError
from openapi_fetch_core.headers import merge_headers

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "OPENAPI_FETCH"

T = TypeVar("T")


@dataclass(frozen=True)
class ClientSettings:
    """Settings needed to build a :class:`~openapi_fetch_core.client.Client`."""

    base_url: str
    token: str | None = None
    timeout: float | None = None

    def client_options(self, headers: Any = None) -> dict[str, Any]:
        """Keyword arguments for ``Client``, with the token merged under ``headers``."""
        options: dict[str, Any] = {}
        if self.token:
            options["headers"] = merge_headers({"Authorization": f"Bearer {self.token}"}, headers)
        elif headers is not None:
            options["headers"] = headers
        if self.timeout is not None:
            options["timeout"] = self.timeout
        return options


class SettingsResolver:
    """Read typed client settings from the environment.

    Args:
        dotenv_path: Path to a ``.env`` file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load a ``.env`` file at all.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_path = dotenv_path
        self._dotenv_loaded = not load_dotenv
        self._dotenv_lock = Lock()
        self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return
        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for settings resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def get(
        self,
        env_var_name: str,
        *,
        value: Any = None,
        convert: Callable[[str], T] | None = None,
        required: bool = False,
        secret: bool = False,
    ) -> Any:
        """Return ``value`` if given, else the converted environment variable.

        Args:
            env_var_name: Environment variable to read
            value: Explicit value; returned as-is, without conversion
            convert: Turns the raw string into the setting's type
            required: Raise instead of returning None
            secret: Mask the value in log messages

        Raises:
            SettingNotFoundError: If required and neither source is set
            ConfigError: If ``convert`` rejects the environment value
        """
        if value is not None:
            logger.debug(f"Setting {env_var_name} given explicitly")
            return value

        raw = os.environ.get(env_var_name)
        if raw is None:
            if required:
                raise SettingNotFoundError(
                    f"Required setting not found (checked env var: {env_var_name})",
                    env_var_name=env_var_name,
                )
            return None

        logger.debug(f"Resolved {env_var_name} from environment: {'***' if secret else raw}")
        if convert is None:
            return raw
        try:
            return convert(raw)
        except ValueError:
            raise ConfigError(f"{env_var_name} has an invalid value: {raw!r}") from None

    def read_file(self, env_var_name: str, *, required: bool = False) -> str | None:
        """Read a secret from the file named by an environment variable.

        The path supports ``~`` and ``$VAR`` expansion; contents are stripped.

        Raises:
            SettingFileError: If required and the file cannot be read
        """
        path = self.get(env_var_name)
        if not path:
            if required:
                raise SettingFileError(f"No file path provided (env var '{env_var_name}' not set)")
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path)))
        try:
            content = path_obj.read_text().strip()
        except OSError as e:
            error_msg = f"Error reading setting file {path_obj}: {e}"
            if required:
                raise SettingFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved {env_var_name} from file: {path_obj} (***)")
        return content

    def load(
        self,
        prefix: str = DEFAULT_PREFIX,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> ClientSettings:
        """Resolve every ``{prefix}_*`` client setting.

        Raises:
            SettingNotFoundError: If no base URL is configured
            ConfigError: If the timeout is not a number
        """
        token = self.get(f"{prefix}_TOKEN", secret=True)
        if token is None:
            token = self.read_file(f"{prefix}_TOKEN_FILE")
        return ClientSettings(
            base_url=self.get(f"{prefix}_BASE_URL", value=base_url, required=True),
            token=token,
            timeout=self.get(f"{prefix}_TIMEOUT", value=timeout, convert=float),
        )


def create_client_from_env(
    prefix: str = DEFAULT_PREFIX,
    *,
    resolver: SettingsResolver | None = None,
    **overrides: Any,
) -> Client:
    """Create a :class:`~openapi_fetch_core.client.Client` from environment settings.

    Keyword overrides are passed to the client and win over the environment.
    A ``base_url`` override makes ``{prefix}_BASE_URL`` optional.

    Raises:
        SettingNotFoundError: If no base URL is configured
        ConfigError: If the timeout is not a number
    """
    resolver = resolver or SettingsResolver()
    settings = resolver.load(prefix, base_url=overrides.pop("base_url", None), timeout=overrides.pop("timeout", None))
    options = settings.client_options(overrides.pop("headers", None))
    return Client(settings.base_url, **options, **overrides)
