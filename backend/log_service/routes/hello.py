"""
log-service — Greeting Route
============================

What:  Answers `/` and every path no other route claims with a fixed greeting.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from log_service.context import RequestContext, get_logger, get_request_context
from log_service.routes import ALL_METHODS

GREETING = "hello from go-log-service\n"

router = APIRouter(tags=["Greeting"])


@router.api_route(
    "/{path:path}",
    methods=ALL_METHODS,
    response_class=PlainTextResponse,
    include_in_schema=False,
)
async def hello(
    context: RequestContext = Depends(get_request_context),
    logger: logging.Logger = Depends(get_logger),
) -> PlainTextResponse:
    logger.debug(
        "handling hello",
        extra={"component": "app", "request_id": context.request_id},
    )
    return PlainTextResponse(GREETING)
