from contextlib import asynccontextmanager
from datetime import timedelta
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from todo_api.database.connection import init_db
from todo_api.api.routes import todos, user
from todo_api.auth.session import SessionStore
from todo_api.config.errors import AppError, Unauthorized
from todo_api.config.scheduler import start_scheduler
from todo_api.config.settings import settings
import logging

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A store outage at startup is logged by init_db and does not stop the app
    init_db()

    scheduler = None
    if settings.SCHEDULER_ENABLED:
        scheduler = start_scheduler(app.state.session_store)

    yield

    if scheduler is not None:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")


# FastAPI application
app = FastAPI(
    title="Todo API",
    lifespan=lifespan,
)
app.state.session_store = SessionStore(ttl=timedelta(minutes=settings.SESSION_TTL_MINUTES))

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body.", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error."},
    )


# Include routers
app.include_router(todos.router)
app.include_router(user.router)


@app.get("/api/health")
def health():
    """
    Liveness check
    """
    return {"ok": True}


# Run the application
if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Todo API server on port {settings.PORT}")
    uvicorn.run("todo_api.main:app", host=settings.HOST, port=settings.PORT)
