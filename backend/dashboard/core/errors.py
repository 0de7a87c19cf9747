from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dashboard.core.i18n import resolve_locale, translate
from dashboard.core.logging import logger


class AppError(Exception):
    status_code = 500
    default_key = "internal_error"

    def __init__(self, key: str | None = None):
        self.key = key or self.default_key
        super().__init__(self.key)


class BadRequest(AppError):
    status_code = 400
    default_key = "validation_error"


class NotAuthenticated(AppError):
    status_code = 401
    default_key = "not_authenticated"


class PermissionDenied(AppError):
    status_code = 403
    default_key = "insufficient_permissions"


class NotFound(AppError):
    status_code = 404


class Conflict(AppError):
    status_code = 409


def _error_response(request: Request, status_code: int, key: str, **extra) -> JSONResponse:
    locale = resolve_locale(request.headers.get("accept-language"))
    return JSONResponse(status_code=status_code, content={"detail": translate(key, locale), **extra})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error(request: Request, exc: AppError):
        return _error_response(request, exc.status_code, exc.key)

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        fields = [".".join(str(p) for p in e["loc"] if p != "body") for e in exc.errors()]
        return _error_response(request, 400, "validation_error", fields=[f for f in fields if f])

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.exception("unhandled_error", path=request.url.path, method=request.method)
        return _error_response(request, 500, "internal_error")
