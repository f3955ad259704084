import socket

import pytest

from hello_service.config import Settings, get_settings
from hello_service.entities import ConnectionState
from hello_service.exceptions import ConnectionBootstrapError


class FakeConnection:
    """ExternalConnection double that records calls into a shared log."""

    def __init__(self, name: str, log: list[str], fail: bool = False) -> None:
        self.name = name
        self._log = log
        self._fail = fail
        self._state = ConnectionState.IDLE

    @property
    def target(self) -> str:
        return f"fake://{self.name}"

    @property
    def state(self) -> ConnectionState:
        return self._state

    async def connect(self) -> None:
        self._log.append(f"connect:{self.name}")
        if self._fail:
            self._state = ConnectionState.FAILED
            raise ConnectionBootstrapError(self.name, self.target)
        self._state = ConnectionState.CONNECTED

    async def close(self) -> None:
        self._log.append(f"close:{self.name}")
        self._state = ConnectionState.CLOSED


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def port_is_open(port: int) -> bool:
    try:
        with socket.create_connection(("127.0.0.1", port), timeout=1):
            return True
    except OSError:
        return False


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so each test reads its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def local_settings():
    """Settings bound to loopback on a currently free port."""
    return Settings(host="127.0.0.1", port=free_port())
