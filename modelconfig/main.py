"""FastAPI entrypoint exposing GET /limits and POST /resolve."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from modelconfig import config
from modelconfig.limits import matching_patterns
from modelconfig.models import (
    AppError,
    ModelLimitConfig,
    ResolveRequest,
    ResolveResponse,
)
from modelconfig.resolver import list_all_known_limits, resolve_model_config


logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.API_TITLE, version="1.0.0")


def _error_response(err: AppError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content=err.to_payload().model_dump())


@app.exception_handler(RequestValidationError)
def request_validation_exception_handler(_request, exc: RequestValidationError):
    # Keep validation failures in the same error envelope as runtime errors.
    return _error_response(
        AppError(
            code="INVALID_REQUEST",
            message="Invalid request payload.",
            status_code=422,
            details={"errors": exc.errors()},
        )
    )


@app.get("/limits", response_model=list[ModelLimitConfig])
def limits():
    return list_all_known_limits()


@app.post("/resolve", response_model=ResolveResponse)
def resolve(request: ResolveRequest):
    try:
        model_config = resolve_model_config(request.model_name, request.context_env_var)
        model_config = model_config.with_context_limit(request.context_limit)
        # Only overlay generation settings the caller actually sent.
        if "temperature" in request.model_fields_set:
            model_config = model_config.with_temperature(request.temperature)
        if "max_tokens" in request.model_fields_set:
            model_config = model_config.with_max_tokens(request.max_tokens)
        return ResolveResponse(
            config=model_config,
            effective_context_limit=model_config.get_context_limit(),
            matched_patterns=matching_patterns(request.model_name),
        )
    except Exception as exc:  # Safety net preserving error contract.
        logger.exception("Failed to resolve config for %s", request.model_name)
        return _error_response(
            AppError(
                code="INTERNAL_ERROR",
                message="Unhandled server error.",
                status_code=500,
                details={"error": str(exc)},
            )
        )
