"""Startup exceptions.

Startup failures are raised inside the entrypoint and converted into a
``StartupResult`` at its single error boundary.
"""

from typing import Any


class HelloServiceError(Exception):
    """Base exception for startup errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(HelloServiceError, ValueError):
    """Raised when an environment setting has an unusable value."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        self.variable = variable
        self.value = value
        super().__init__(
            f"{variable}={value!r} {reason}",
            error_code="STARTUP_CONFIG_FAILED",
            details={"variable": variable, "value": value},
        )


class ConnectionBootstrapError(HelloServiceError):
    """Raised when an external connection cannot be established."""

    def __init__(
        self,
        dependency: str,
        target: str,
        original_error: Exception | None = None,
    ) -> None:
        self.dependency = dependency
        self.target = target
        message = f"Failed to connect to {dependency} at {target}"
        details: dict[str, Any] = {"dependency": dependency, "target": target}
        if original_error is not None:
            message = f"{message}: {original_error!r}"
            details["original_error_type"] = type(original_error).__name__

        super().__init__(message, error_code="STARTUP_CONNECTION_FAILED", details=details)
        if original_error is not None:
            self.__cause__ = original_error


class ListenerBindError(HelloServiceError):
    """Raised when the HTTP listener cannot bind its port."""

    def __init__(self, host: str, port: int, original_error: OSError) -> None:
        self.host = host
        self.port = port
        super().__init__(
            f"Failed to bind {host}:{port}: {original_error.strerror or original_error}",
            error_code="STARTUP_BIND_FAILED",
            details={"host": host, "port": port, "errno": original_error.errno},
        )
        self.__cause__ = original_error
