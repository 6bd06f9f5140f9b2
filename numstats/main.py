import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from numstats.api import health, summary
from numstats.errors import StatsError
from numstats.observability.metrics import MetricsMiddleware, metrics_router, record_stats_error
from numstats.observability.logging import setup_logging
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

# READY_FLAG is used to indicate if the app is fully initialized and ready to serve traffic
READY_FLAG = False

# Lifespan handler for FastAPI: sets READY_FLAG True after startup, False on shutdown
@asynccontextmanager
async def app_lifespan(app: FastAPI):
    global READY_FLAG
    READY_FLAG = True
    yield
    READY_FLAG = False

# Factory function to create the FastAPI app
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title="numstats",
        version="1.0.0",
        lifespan=app_lifespan,  # Use custom lifespan for readiness
    )
    app.add_middleware(MetricsMiddleware)  # Add Prometheus metrics middleware
    app.include_router(metrics_router)     # Expose /metrics endpoint
    app.include_router(health.router)      # Expose /health and /ready endpoints
    app.include_router(summary.router)     # Expose /stats and /frequency endpoints
    # Expose a callable to check readiness from endpoints
    app.state.ready_flag = lambda: READY_FLAG

    # Empty input and failed conversions are caller problems: 400 with the variant name
    @app.exception_handler(StatsError)
    async def stats_exception_handler(request: Request, exc: StatsError):
        record_stats_error(exc.kind)
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "kind": exc.kind},
        )

    # Custom exception handler for validation errors: always return 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Ensure all error details are serializable
        def serialize_error(err):
            if isinstance(err, Exception):
                return str(err)
            if isinstance(err, dict):
                return {k: serialize_error(v) for k, v in err.items()}
            if isinstance(err, (list, tuple)):
                return [serialize_error(e) for e in err]
            return err
        return JSONResponse(
            status_code=400,
            content={"detail": serialize_error(exc.errors())},
        )

    return app

# Create the FastAPI app instance
app = create_app()
