from __future__ import annotations

import json
import logging
import traceback
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from careercoach.api.deps import get_app_settings, get_db, get_generator
from careercoach.config import Settings
from careercoach.core.endpoints import ENDPOINTS
from careercoach.core.pipeline import INVALID_BODY_MESSAGE, Endpoint, GenerationPipeline
from careercoach.errors import CoachError, ValidationError
from careercoach.llm.gemini import GeminiClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


async def read_payload(request: Request, endpoint: Endpoint) -> Any:
    if endpoint.method == "GET":
        return dict(request.query_params)

    body = await request.body()
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValidationError(INVALID_BODY_MESSAGE) from exc


def error_response(exc: Exception, settings: Settings) -> JSONResponse:
    status_code = exc.status_code if isinstance(exc, CoachError) else 500
    if status_code < 500:
        return JSONResponse({"error": exc.client_message}, status_code=status_code)

    if settings.expose_error_detail:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return JSONResponse({"error": str(exc), "stack": stack}, status_code=status_code)

    message = exc.client_message if isinstance(exc, CoachError) else CoachError.public_message
    return JSONResponse({"error": message}, status_code=status_code)


def build_handler(endpoint: Endpoint) -> Callable[..., Awaitable[JSONResponse]]:
    async def handler(
        request: Request,
        db: Session = Depends(get_db),
        generator: GeminiClient = Depends(get_generator),
        settings: Settings = Depends(get_app_settings),
    ) -> JSONResponse:
        try:
            payload = await read_payload(request, endpoint)
            pipeline = GenerationPipeline(db, generator)
            body = await run_in_threadpool(pipeline.run, endpoint, payload)
            return JSONResponse(body)
        except CoachError as exc:
            if exc.status_code >= 500:
                logger.error("%s failed: %s", endpoint.name, exc)
            return error_response(exc, settings)
        except Exception as exc:
            logger.exception("Unhandled error in %s", endpoint.name)
            return error_response(exc, settings)

    handler.__name__ = endpoint.name.replace("-", "_")
    return handler


for _endpoint in ENDPOINTS:
    router.add_api_route(
        _endpoint.path,
        build_handler(_endpoint),
        methods=[_endpoint.method],
        name=_endpoint.name,
        summary=_endpoint.summary,
    )
