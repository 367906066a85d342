"""Litestar application exposing the matcher over HTTP."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from litestar import Litestar, Request, Response
from litestar.di import Provide
from litestar.status_codes import HTTP_400_BAD_REQUEST
from loguru import logger

from api.dependencies import provide_matcher_service
from api.routes import FeedbackController, HealthController, MatchController
from config import Settings, setup_logging
from domain.exceptions import ValidationError
from services import create_matcher_service
from services.matcher import MatcherService


def validation_error_handler(request: Request, exc: ValidationError) -> Response:
    logger.warning(f"Rejected request to {request.url.path}: {exc}")
    return Response(content={"error": str(exc)}, status_code=HTTP_400_BAD_REQUEST)


def create_app(matcher: MatcherService | None = None, settings: Settings | None = None) -> Litestar:
    """
    Build the application.

    Args:
        matcher: Prebuilt service (used as-is and not closed on shutdown)
        settings: Settings for the service built at startup when no matcher is given
    """

    @asynccontextmanager
    async def lifespan(app: Litestar) -> AsyncGenerator[None, None]:
        if matcher is not None:
            app.state.matcher = matcher
            yield
            return

        resolved = settings or Settings.from_env()
        setup_logging(resolved.log_level)
        service = await create_matcher_service(resolved)
        app.state.matcher = service
        logger.info("Matcher service started")
        try:
            yield
        finally:
            await service.close()
            logger.info("Matcher service stopped")

    return Litestar(
        route_handlers=[MatchController, FeedbackController, HealthController],
        dependencies={"matcher": Provide(provide_matcher_service, sync_to_thread=False)},
        exception_handlers={ValidationError: validation_error_handler},
        lifespan=[lifespan],
    )


app = create_app()
