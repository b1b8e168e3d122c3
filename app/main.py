# app/main.py

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.api.middleware import (
    AuditTriggerMiddleware,
    CorrelationIdMiddleware,
    UserContextMiddleware,
)
from app.api.routers import events, health
from app.application.exceptions import ApplicationError, RepositoryUnavailableError
from app.config.logging import configure_logging
from app.config.settings import get_settings

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> UserContext -> AuditTrigger.
app.add_middleware(AuditTriggerMiddleware)
app.add_middleware(UserContextMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(RepositoryUnavailableError)
async def repository_unavailable_handler(request, exc: RepositoryUnavailableError):
    return JSONResponse(status_code=503, content={"detail": "Event storage unavailable"})


@app.exception_handler(ApplicationError)
async def application_error_handler(request, exc: ApplicationError):
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /events
app.include_router(health.router)
app.include_router(events.router, prefix="/events")
