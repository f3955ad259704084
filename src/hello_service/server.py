"""Process entrypoint.

Runs the startup sequence
``INIT -> (CONNECTING_CACHE -> CONNECTING_DB)? -> BINDING -> LISTENING``
inside a single error boundary. Any failure, including an unusable setting,
moves the entrypoint to the absorbing ``FAILED`` phase and is reported as a
StartupResult instead of being raised.
"""

import contextlib
import logging
import signal
import socket
from typing import Callable, Iterator

import uvicorn
from fastapi import FastAPI

from hello_service.api.app import create_app
from hello_service.config import Settings, get_settings
from hello_service.entities import StartupFailure, StartupPhase, StartupResult
from hello_service.exceptions import (
    ConfigurationError,
    ConnectionBootstrapError,
    ListenerBindError,
)
from hello_service.services import AppContext, ConnectionBootstrapper

logger = logging.getLogger(__name__)

AppFactory = Callable[[AppContext | None], FastAPI]

FAILURE_CODES = {
    StartupFailure.CONFIG: "STARTUP_CONFIG_FAILED",
    StartupFailure.CONNECTION: "STARTUP_CONNECTION_FAILED",
    StartupFailure.BIND: "STARTUP_BIND_FAILED",
}


def bind_listener(host: str, port: int) -> socket.socket:
    """Open a listening TCP socket.

    Raises:
        ListenerBindError: If the address is in use or not permitted
    """
    try:
        return socket.create_server((host, port))
    except OSError as e:
        raise ListenerBindError(host, port, e) from e


class GracefulServer(uvicorn.Server):
    """uvicorn server that treats SIGINT/SIGTERM as a clean stop.

    uvicorn re-raises a captured signal once it has shut down, which kills
    the process before held connections are released. The signals are
    recorded in ``received_signals`` instead.
    """

    def __init__(self, config: uvicorn.Config) -> None:
        super().__init__(config)
        self.received_signals: list[int] = []

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        with super().capture_signals():
            yield
            self.received_signals.extend(self._captured_signals)
            self._captured_signals.clear()


class Entrypoint:
    """Startup orchestrator for both server variants.

    Variant A runs without connections; variant B (``connect=True`` or an
    explicit bootstrapper) brings up Redis and PostgreSQL before binding.
    Settings are read inside the error boundary, so a bad environment value
    is a FAILED result, not a crash.

    Example:
        ```python
        entrypoint = Entrypoint(connect=True)
        result = await entrypoint.run()
        ```
    """

    def __init__(
        self,
        settings: Settings | None = None,
        bootstrapper: ConnectionBootstrapper | None = None,
        connect: bool = False,
        app_factory: AppFactory = create_app,
    ) -> None:
        self._settings = settings
        self._bootstrapper = bootstrapper
        self._connect = connect or bootstrapper is not None
        self._app_factory = app_factory
        self._phase = StartupPhase.INIT
        self._context: AppContext | None = None
        self._socket: socket.socket | None = None
        self._server: GracefulServer | None = None

    @property
    def phase(self) -> StartupPhase:
        return self._phase

    @property
    def context(self) -> AppContext | None:
        return self._context

    def _enter(self, phase: StartupPhase) -> None:
        if self._phase is StartupPhase.FAILED:
            return
        logger.debug("Startup phase %s -> %s", self._phase.value, phase.value)
        self._phase = phase

    async def start(self) -> StartupResult:
        """Read settings, bring up connections (variant B) and bind the listener.

        Returns:
            StartupResult in phase LISTENING, or FAILED with the failure kind

        Raises:
            RuntimeError: If called more than once
        """
        if self._phase is not StartupPhase.INIT:
            raise RuntimeError(f"start() called in phase {self._phase.value}")

        stage = StartupFailure.CONFIG
        try:
            settings = self._settings or get_settings()
            bootstrapper = self._bootstrapper
            if bootstrapper is None and self._connect:
                bootstrapper = ConnectionBootstrapper.create(settings)

            stage = StartupFailure.CONNECTION
            if bootstrapper is not None:
                self._context = await bootstrapper.bootstrap(on_phase=self._enter)

            stage = StartupFailure.BIND
            self._enter(StartupPhase.BINDING)
            self._socket = bind_listener(settings.host, settings.port)
        except ConfigurationError as e:
            return await self._fail(StartupFailure.CONFIG, e)
        except ConnectionBootstrapError as e:
            return await self._fail(StartupFailure.CONNECTION, e)
        except ListenerBindError as e:
            return await self._fail(StartupFailure.BIND, e)
        except Exception as e:
            return await self._fail(stage, e)

        port = self._socket.getsockname()[1]
        self._enter(StartupPhase.LISTENING)
        logger.info("Http server is listening on PORT %s", port)
        return StartupResult(phase=StartupPhase.LISTENING, port=port)

    async def serve(self) -> None:
        """Serve HTTP on the bound socket until shutdown or SIGINT/SIGTERM.

        Raises:
            RuntimeError: If the listener is not bound
        """
        if self._phase is not StartupPhase.LISTENING or self._socket is None:
            raise RuntimeError("serve() requires a successful start()")

        config = uvicorn.Config(self._app_factory(self._context), log_level="info")
        self._server = GracefulServer(config)
        try:
            await self._server.serve(sockets=[self._socket])
        finally:
            await self.close()

        for sig in self._server.received_signals:
            logger.info("Stopped on %s", signal.Signals(sig).name)

    async def run(self) -> StartupResult:
        """Start, then serve until shutdown if startup succeeded."""
        result = await self.start()
        if result.ok:
            await self.serve()
        return result

    def shutdown(self) -> None:
        """Ask a running server to exit."""
        if self._server is not None:
            self._server.should_exit = True

    async def close(self) -> None:
        """Release the listener socket and held connections."""
        sock, self._socket = self._socket, None
        if sock is not None:
            sock.close()

        context, self._context = self._context, None
        if context is not None:
            await context.close()

    async def _fail(self, failure: StartupFailure, error: Exception) -> StartupResult:
        self._phase = StartupPhase.FAILED
        code = getattr(error, "error_code", None) or FAILURE_CODES[failure]
        logger.error("Error Starting Server [%s]: %s", code, error, exc_info=error)
        await self.close()
        return StartupResult(phase=StartupPhase.FAILED, failure=failure, error=str(error))


async def init(settings: Settings | None = None, connect: bool = False) -> StartupResult:
    """Run a server variant to completion.

    Args:
        settings: Application settings. If None, read from the environment
            inside the startup error boundary.
        connect: Bring up Redis and PostgreSQL before binding (variant B).

    Returns:
        The StartupResult; on success, returned after the server has stopped
    """
    return await Entrypoint(settings, connect=connect).run()
