"""Handler layer for HTTP endpoints."""

from .greeting_handler import HEALTH_MESSAGE, HELLO_MESSAGE, GreetingHandler

__all__ = [
    "GreetingHandler",
    "HELLO_MESSAGE",
    "HEALTH_MESSAGE",
]
