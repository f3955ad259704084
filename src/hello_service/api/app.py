from fastapi import FastAPI

from hello_service.api.dependencies import HandlerDep
from hello_service.dto import MessageResponse
from hello_service.handlers import GreetingHandler
from hello_service.services import AppContext


def create_app(context: AppContext | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        context: Connection handles built at startup. Variant A passes None,
            which stores an empty context.

    Returns:
        FastAPI app with the greeting routes registered
    """
    app = FastAPI(
        title="Hello Service",
        description="Minimal greeting API",
        version="0.1.0",
    )
    app.state.context = context or AppContext()
    app.state.greeting_handler = GreetingHandler()

    @app.get("/", response_model=MessageResponse)
    async def root(handler: HandlerDep) -> MessageResponse:
        """Root greeting endpoint."""
        return await handler.hello()

    @app.get("/health", response_model=MessageResponse)
    async def health(handler: HandlerDep) -> MessageResponse:
        """Liveness endpoint."""
        return await handler.health()

    return app


app = create_app()

