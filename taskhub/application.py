# taskhub/application.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskhub.config import Settings
from taskhub.database import Database, run_migrations
from taskhub.errors import AppError, ErrorCode, code_for_status
from taskhub.middleware import register_middleware
from taskhub.routers import auth, comment, project, task, user
from taskhub.schemas import ErrorResponse, HealthResponse
from taskhub.utils.responses import error_response, error_response_for
from taskhub.utils.security import TokenManager

logger = logging.getLogger(__name__)

# Documented error envelopes per router group
PUBLIC_ERRORS = {code: {"model": ErrorResponse} for code in (400, 401, 404, 409)}
PROTECTED_ERRORS = {code: {"model": ErrorResponse} for code in (400, 401, 403, 404, 409)}


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    location = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response_for(ErrorCode.INVALID_INPUT, _first_validation_message(exc), 400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response_for(
            code_for_status(exc.status_code),
            str(exc.detail),
            exc.status_code,
            headers=getattr(exc, "headers", None),
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if settings.uses_default_secret:
        logger.warning("JWT_SECRET is not set; using the insecure default signing secret")

    app = FastAPI(title="Team Task Hub API")
    app.state.settings = settings
    app.state.database = Database(settings.database_url, settings.db_statement_timeout_ms)
    app.state.token_manager = TokenManager(settings.jwt_secret, settings.jwt_algorithm, settings.token_ttl)
    app.state.status_transitions = settings.status_transitions

    register_middleware(app, settings)
    register_exception_handlers(app)

    # Route registration
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"], responses=PUBLIC_ERRORS)
    app.include_router(user.router, prefix="/api/users", tags=["Users"], responses=PROTECTED_ERRORS)
    app.include_router(project.router, prefix="/api/projects", tags=["Projects"], responses=PROTECTED_ERRORS)
    app.include_router(
        task.project_tasks_router,
        prefix="/api/projects/{project_id}/tasks",
        tags=["Tasks"],
        responses=PROTECTED_ERRORS,
    )
    app.include_router(task.router, prefix="/api/tasks", tags=["Tasks"], responses=PROTECTED_ERRORS)
    app.include_router(
        comment.project_task_comments_router,
        prefix="/api/projects/{project_id}/tasks/{task_id}/comments",
        tags=["Comments"],
        responses=PROTECTED_ERRORS,
    )
    app.include_router(
        comment.task_comments_router,
        prefix="/api/tasks/{task_id}/comments",
        tags=["Comments"],
        responses=PROTECTED_ERRORS,
    )
    app.include_router(comment.router, prefix="/api/comments", tags=["Comments"], responses=PROTECTED_ERRORS)

    @app.on_event("startup")
    def startup_event():
        logger.info(f"Starting Team Task Hub API (database dialect: {app.state.database.engine.dialect.name})")
        if settings.run_migrations:
            run_migrations(app.state.database)

    @app.on_event("shutdown")
    def shutdown_event():
        logger.info("Shutting down Team Task Hub API...")
        app.state.database.dispose()

    @app.get("/")
    def read_root():
        return {"message": "Team Task Hub API"}

    @app.get("/health", response_model=HealthResponse)
    def health():
        return {"status": "ok"}

    return app
