"""
log-service — Simulated Work Route
==================================

What:  `/work?task=<name>` runs a simulated task through WorkService.
How:   The first `task` value wins when the parameter repeats; a missing or
       empty `task` becomes "simulate". A failing task raises
       TaskFailedError, which the handler in main.py turns into a 500.

Responses:
    200  "ok\\n"
    500  "failed\\n"   task name contains "fail"
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from log_service.context import RequestContext, get_logger, get_request_context
from log_service.routes import ALL_METHODS
from log_service.services.work_service import DEFAULT_TASK, work_service

router = APIRouter(tags=["Work"])


def first_query_value(request: Request, name: str) -> str:
    values = request.query_params.getlist(name)
    return values[0] if values else ""


@router.api_route("/work", methods=ALL_METHODS, response_class=PlainTextResponse)
async def work(
    request: Request,
    context: RequestContext = Depends(get_request_context),
    logger: logging.Logger = Depends(get_logger),
) -> PlainTextResponse:
    """Simulate a unit of work, blocking only this request for the work delay."""
    task = first_query_value(request, "task") or DEFAULT_TASK
    await work_service.run(task, context, logger)
    return PlainTextResponse("ok\n")
