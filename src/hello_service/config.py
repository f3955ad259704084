import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from hello_service.exceptions import ConfigurationError

load_dotenv()

DEFAULT_PORT = 8000


def read_port(raw: str | None, default: int = DEFAULT_PORT) -> int:
    """Parse a listener port, falling back to the default.

    Unset, empty and non-numeric values all resolve to ``default``.
    """
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Only the listener settings are validated on construction. Connection
    settings are kept as raw strings and parsed by the ``resolve_*`` methods
    when the connected variant builds its connections, so the plain variant
    never fails on a value it does not use.
    """

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Redis
    redis_url: str = "redis://localhost:6379"

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: str = "5431"
    postgres_db: str = "postgres"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"

    # Unset waits forever
    connect_timeout: str | None = None

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Raises:
            ConfigurationError: If PORT is outside 0..65535
        """
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("HOST", cls.host),
            port=read_port(env.get("PORT")),
            redis_url=env.get("REDIS_URL", cls.redis_url),
            postgres_host=env.get("POSTGRES_HOST", cls.postgres_host),
            postgres_port=env.get("POSTGRES_PORT", cls.postgres_port),
            postgres_db=env.get("POSTGRES_DB", cls.postgres_db),
            postgres_user=env.get("POSTGRES_USER", cls.postgres_user),
            postgres_password=env.get("POSTGRES_PASSWORD", cls.postgres_password),
            connect_timeout=env.get("CONNECT_TIMEOUT"),
        )

    def __post_init__(self) -> None:
        """Validate listener settings after initialization."""
        if not 0 <= self.port <= 65535:
            raise ConfigurationError("PORT", str(self.port), "must be between 0 and 65535")

    def resolve_postgres_port(self) -> int:
        """Parse POSTGRES_PORT.

        Raises:
            ConfigurationError: If the value is not an integer in 1..65535
        """
        try:
            port = int(self.postgres_port)
        except ValueError as e:
            raise ConfigurationError("POSTGRES_PORT", self.postgres_port, "must be an integer") from e
        if not 0 < port <= 65535:
            raise ConfigurationError("POSTGRES_PORT", self.postgres_port, "must be between 1 and 65535")
        return port

    def resolve_connect_timeout(self) -> float | None:
        """Parse CONNECT_TIMEOUT; None when unset or empty.

        Raises:
            ConfigurationError: If the value is not a positive number
        """
        raw = self.connect_timeout
        if raw is None or raw.strip() == "":
            return None
        try:
            timeout = float(raw)
        except ValueError as e:
            raise ConfigurationError("CONNECT_TIMEOUT", raw, "must be a number of seconds") from e
        if timeout <= 0:
            raise ConfigurationError("CONNECT_TIMEOUT", raw, "must be a positive number of seconds")
        return timeout

    @property
    def postgres_target(self) -> str:
        """Database address without credentials, for logs and errors."""
        return f"postgresql://{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
