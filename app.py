"""FastAPI application entry point."""
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
import logging
import config
from core.context import AppContext, build_default_context
from core.errors import InteractionError
from middleware.logging import log_rejection, generate_request_id
from routes import interactions

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(context: AppContext = None) -> FastAPI:
    """
    Build the application.

    Args:
        context: Stores, delivery client and public key. Defaults to the
            configured database and environment.
    """
    app = FastAPI(
        title="Deets",
        description="Discord follow/broadcast relay",
        version="1.0.0"
    )
    app.state.context = context or build_default_context()

    # Error handlers
    @app.exception_handler(InteractionError)
    async def interaction_error_handler(request: Request, exc: InteractionError):
        """Rejected interactions surface as 500 with the message as plain text."""
        log_rejection(getattr(request.state, "request_id", None) or generate_request_id(), exc)
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return PlainTextResponse(str(exc), status_code=500)

    # Include routers
    app.include_router(interactions.router, tags=["interactions"])

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=config.PORT)
