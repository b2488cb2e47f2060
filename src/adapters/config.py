import os
from dataclasses import dataclass

from dotenv import load_dotenv

from contracts.models import DEFAULT_SEARCH_INDEX
from utils.errors import ConfigMissingError


def load_env():
    """Load environment variables from env file.

    Defaults to config/local.env for local development.
    Set ENV_FILE environment variable to override.
    """
    env = os.getenv("ENV_FILE", "config/local.env")
    load_dotenv(env)


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _int_env(name: str) -> int | None:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def require_search_api_url(search_api_url: str | None) -> str:
    if not search_api_url:
        raise ConfigMissingError("API URL is missing")
    return search_api_url


def require_server(server_name: str | None, api_key: str | None) -> tuple[str, str]:
    """Return (server_name, api_key) or raise ConfigMissingError. The key is checked first."""
    if not api_key:
        raise ConfigMissingError("API key is missing")
    if not server_name:
        raise ConfigMissingError("Server name is missing")
    return server_name, api_key


def require_user_id(user_id: int | None) -> int:
    if user_id is None:
        raise ConfigMissingError("User id is missing")
    return user_id


@dataclass
class ClientSettings:
    """Endpoints and credentials the search core talks to."""

    search_api_url: str | None = None
    server_name: str | None = None
    api_key: str | None = None
    user_id: int | None = None
    search_index: str = DEFAULT_SEARCH_INDEX.value
    settle_seconds: float = 1.0
    request_timeout_seconds: float = 10

    @classmethod
    def from_env(cls, load_file: bool = True) -> "ClientSettings":
        """Read settings from the environment, after loading the env file unless load_file=False."""
        if load_file:
            load_env()
        return cls(
            search_api_url=os.getenv("SEARCH_API_URL") or None,
            server_name=os.getenv("SERVER_NAME") or None,
            api_key=os.getenv("API_KEY") or None,
            user_id=_int_env("USER_ID"),
            search_index=os.getenv("SEARCH_INDEX") or DEFAULT_SEARCH_INDEX.value,
            settle_seconds=_float_env("SEARCH_SETTLE_SECONDS", 1.0),
            request_timeout_seconds=_float_env("REQUEST_TIMEOUT_SECONDS", 10),
        )

    def require_search_api_url(self) -> str:
        return require_search_api_url(self.search_api_url)

    def require_server(self) -> tuple[str, str]:
        return require_server(self.server_name, self.api_key)

    def require_user_id(self) -> int:
        return require_user_id(self.user_id)
