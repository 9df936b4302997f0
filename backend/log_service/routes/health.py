"""
log-service — Health Check Route
================================

What:  Liveness probe for load balancers and container health checks.
How:   Always 200 "healthy\\n". No dependency checks and no handler logging;
       the middleware still writes its completion record.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from log_service.routes import ALL_METHODS

router = APIRouter(tags=["Health"])


@router.api_route("/healthz", methods=ALL_METHODS, response_class=PlainTextResponse)
async def health_check() -> PlainTextResponse:
    return PlainTextResponse("healthy\n")
