"""FastAPI server entrypoint.

Registers routes for the webinar formatter service. The route bodies
stay thin and delegate to the tool functions so those can be unit-tested
without the runtime.

Example:
    Run with the console script:
        $ webinar-formatter

    Or programmatically:
        from webinar_formatter.server import create_app
        import uvicorn
        uvicorn.run(create_app(), host="0.0.0.0", port=3000)
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import AppConfig, configure_logging, load_config
from .crm import CustomValueClient
from .errors import AppError, BadRequestError, UnexpectedError, to_error_payload
from .schemas import FormatWebinarInput, FormatWebinarOutput, StatusOutput
from .tools import format_webinar, service_status

logger = logging.getLogger(__name__)


def _register_routes(app: FastAPI, config: AppConfig, client: Optional[CustomValueClient]) -> None:
    @app.get("/", response_model=StatusOutput)
    async def root() -> StatusOutput:
        """Root endpoint for load balancer health checks."""
        return service_status(config)

    @app.get("/healthz", response_model=StatusOutput)
    async def healthz() -> StatusOutput:
        return service_status(config)

    @app.post(
        "/format-webinar",
        response_model=FormatWebinarOutput,
        response_model_exclude_none=True,
    )
    async def format_webinar_route(
        params: Optional[FormatWebinarInput] = None,
    ) -> FormatWebinarOutput:
        try:
            return await format_webinar(config, client, params or FormatWebinarInput())
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Unexpected error while formatting webinar")
            return _error_response(exc)


def _error_response(error: Exception) -> JSONResponse:
    status_code = error.status_code if isinstance(error, AppError) else UnexpectedError.status_code
    return JSONResponse(status_code=status_code, content=to_error_payload(error))


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.to_payload())
        else:
            logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(
            BadRequestError("Invalid request body", {"errors": jsonable_encoder(exc.errors())})
        )


def create_app(
    config: Optional[AppConfig] = None, client: Optional[CustomValueClient] = None
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Explicit configuration; loaded from the environment when omitted.
        client: CRM client override. When omitted and the CRM is configured,
            one is created from ``config``.
    """

    config = config if config is not None else load_config()
    if client is None and config.crm_enabled:
        client = CustomValueClient(config)

    app = FastAPI(title="webinar-formatter")
    _register_routes(app, config, client)
    _register_error_handlers(app)
    return app


def main() -> None:
    """Load configuration, configure logging and serve until interrupted."""

    import uvicorn

    config = load_config()
    configure_logging(config.log_level)
    if not config.crm_enabled:
        logger.warning("CRM credentials not set; running in dry-run mode")
    app = create_app(config)
    logger.info("Webinar formatter API listening on %s:%s", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":  # pragma: no cover
    main()
