"""Startup result domain entity."""

from dataclasses import dataclass

from .connection_state import StartupFailure, StartupPhase

EXIT_OK = 0
EXIT_CONNECTION_FAILED = 3
EXIT_BIND_FAILED = 4
EXIT_CONFIG_FAILED = 5


@dataclass(frozen=True)
class StartupResult:
    """Outcome of the startup sequence.

    Attributes:
        phase: The phase the entrypoint ended in (LISTENING or FAILED)
        failure: The kind of failure, or None on success
        error: Human-readable error message, or None on success
        port: The port the listener bound, or None if it never bound
    """

    phase: StartupPhase
    failure: StartupFailure | None = None
    error: str | None = None
    port: int | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def exit_code(self) -> int:
        if self.failure is StartupFailure.CONFIG:
            return EXIT_CONFIG_FAILED
        if self.failure is StartupFailure.CONNECTION:
            return EXIT_CONNECTION_FAILED
        if self.failure is StartupFailure.BIND:
            return EXIT_BIND_FAILED
        return EXIT_OK
