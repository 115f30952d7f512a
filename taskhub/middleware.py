# taskhub/middleware.py
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.routing import Match

from taskhub.config import Settings
from taskhub.errors import AppError, ErrorCode
from taskhub.utils.auth import claims_from_header, get_current_claims
from taskhub.utils.responses import error_response, error_response_for

logger = logging.getLogger(__name__)


def _requires_token(dependant) -> bool:
    return any(dep.call is get_current_claims or _requires_token(dep) for dep in dependant.dependencies)


def route_requires_token(request: Request) -> bool:
    """True when the route this request resolves to depends on get_current_claims"""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            dependant = getattr(route, "dependant", None)
            return dependant is not None and _requires_token(dependant)
    return False


def register_middleware(app: FastAPI, settings: Settings) -> None:
    # Rejects missing or bad tokens before the request body is parsed
    @app.middleware("http")
    async def require_bearer_token(request: Request, call_next):
        if route_requires_token(request):
            try:
                claims_from_header(request.headers.get("Authorization"), request.app.state.token_manager)
            except AppError as err:
                logger.info(f"[AUTH] {request.method} {request.url.path} rejected: {err.code.value}")
                return error_response(err)
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=3600,
    )

    # Added last so it is outermost
    @app.middleware("http")
    async def log_and_recover(request: Request, call_next):
        start = time.perf_counter()
        logger.info(f"[REQUEST] {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"[PANIC] unhandled error on {request.method} {request.url.path}")
            response = error_response_for(ErrorCode.INTERNAL, "internal server error", 500)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"[RESPONSE] {request.method} {request.url.path} {response.status_code} - {elapsed_ms:.0f}ms")
        return response
