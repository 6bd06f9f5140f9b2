from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

router = APIRouter()

@router.get("/health")
async def health() -> dict[str, str]:
    """
    Liveness probe.
    The aggregates are computed per request from the body alone, so there is no
    dependency to check: a running process is a healthy one.
    """
    return {"status": "ok"}

@router.get("/ready")
async def ready(request: Request):
    """
    Readiness probe.
    200 once the lifespan has started, 503 before startup and after shutdown.
    """
    is_ready = getattr(request.app.state, "ready_flag", None)
    if is_ready is not None and is_ready():
        return {"status": "ready"}
    return JSONResponse({"status": "not ready"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
