from typing import Callable
from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException
from todo_api.config.errors import AppError, InternalError
import logging

logger = logging.getLogger(__name__)

class AppRoute(APIRoute):
    """
    Route class that turns unexpected handler errors into InternalError.

    Errors raised here are answered by the app's exception handlers inside
    the middleware stack, so the 500 response still carries CORS headers.
    """

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except (AppError, StarletteHTTPException, RequestValidationError):
                raise
            except Exception:
                logger.exception(f"Unhandled error on {request.method} {request.url.path}")
                raise InternalError()

        return route_handler
