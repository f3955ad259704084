"""HTTP handlers for the greeting endpoints."""

from hello_service.dto import MessageResponse

HELLO_MESSAGE = "Hello World"
HEALTH_MESSAGE = "Server is running"


class GreetingHandler:
    """HTTP handlers returning constant messages.

    Handlers consult no request data and touch no connections.

    Example:
        ```python
        handler = GreetingHandler()

        @app.get("/", response_model=MessageResponse)
        async def root():
            return await handler.hello()
        ```
    """

    async def hello(self) -> MessageResponse:
        """Handle GET / requests."""
        return MessageResponse(message=HELLO_MESSAGE)

    async def health(self) -> MessageResponse:
        """Handle GET /health requests."""
        return MessageResponse(message=HEALTH_MESSAGE)
