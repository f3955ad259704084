"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing startup-built instances.

Pattern:
    - Handler and context stored in app.state by create_app()
    - Dependency functions retrieve from request.app.state
    - No global mutable state
"""

from typing import Annotated

from fastapi import Depends, Request

from hello_service.handlers import GreetingHandler


def get_handler(request: Request) -> GreetingHandler:
    """Dependency injection for GreetingHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "greeting_handler", None)
    if handler is None:
        raise RuntimeError("GreetingHandler not initialized. Check create_app().")
    return handler


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[GreetingHandler, Depends(get_handler)]
