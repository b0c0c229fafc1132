"""FastAPI proxy for an OpenAI-compatible chat-completion API.

Endpoints:
- GET /health
- GET /api/hello   -> { "completion": "..." }
"""
from __future__ import annotations
import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from greeting_demo.common.config import Settings, get_settings
from greeting_demo.common.logging_setup import setup_logging
from greeting_demo.common.schema import CompletionOut, CompletionResult, ErrorOut, UpstreamError
from greeting_demo.common.templates import build_messages, load_template

LOGGER = logging.getLogger("greeting.server.app")
setup_logging()

# Greetings must never be served from a cache.
NO_STORE_HEADERS = {"Cache-Control": "no-store, max-age=0"}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate the prompt and credential on startup and warn if unusable."""
    settings = get_settings()
    try:
        if not load_template(settings.prompt_path):
            LOGGER.warning("Prompt is empty; upstream will likely reject the request")
    except Exception as e:
        LOGGER.warning("Failed to read prompt template: %s", e)
    if not settings.api_key:
        LOGGER.warning("OPENAI_API_KEY is not set; completion requests will be rejected upstream")
    LOGGER.info("Greeting proxy ready: model=%s upstream=%s", settings.model, settings.base_url)
    yield


app = FastAPI(title="Hello greetings", lifespan=lifespan)


@app.get("/health")
def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "ok", "model": settings.model}


def _raw_body(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError:
        return r.text


async def request_completion(settings: Settings, prompt: str) -> CompletionResult:
    """
    Send one chat-completion request and extract the generated text.

    Args:
        settings: Upstream location, model and credential.
        prompt: Content of the single user message.

    Raises:
        UpstreamError: on transport failure, a non-200 status or an unusable body.
    """
    headers = {"Content-Type": "application/json"}
    # Without a key the upstream answers 401, which flows through like any rejection.
    if settings.api_key:
        headers["Authorization"] = f"Bearer {settings.api_key}"
    payload = {"model": settings.model, "messages": build_messages(prompt)}

    try:
        async with httpx.AsyncClient(timeout=settings.timeout) as client:
            r = await client.post(settings.completions_url, headers=headers, json=payload)
    except httpx.HTTPError as e:
        raise UpstreamError(f"Create chat completion request failed: {e}") from e

    if r.status_code != 200:
        raise UpstreamError(
            "Create chat completion request was unsuccessful.",
            status_code=r.status_code,
            body=_raw_body(r),
        )

    try:
        data = r.json()
        text = data["choices"][0]["message"]["content"].strip()
        usage = data.get("usage") or {}
    except (ValueError, LookupError, TypeError, AttributeError) as e:
        raise UpstreamError(f"Malformed chat completion response: {e!r}", body=r.text) from e

    return CompletionResult(
        text=text,
        prompt_tokens=usage.get("prompt_tokens"),
        completion_tokens=usage.get("completion_tokens"),
        total_tokens=usage.get("total_tokens"),
    )


def _error_response(status_code: int | None) -> JSONResponse:
    # Only error statuses may carry the error body; anything else becomes 500.
    if status_code is None or status_code < 400:
        status_code = 500
    return JSONResponse(ErrorOut().model_dump(), status_code=status_code, headers=NO_STORE_HEADERS)


@app.get("/api/hello", response_model=CompletionOut, responses={500: {"model": ErrorOut}})
async def hello(settings: Settings = Depends(get_settings)) -> JSONResponse:
    try:
        prompt = load_template(settings.prompt_path)
        result = await request_completion(settings, prompt)
    except UpstreamError as e:
        LOGGER.error(
            "Thrown error: %s | status code: %s | error: %s",
            e,
            e.status_code,
            json.dumps(e.body, default=str),
        )
        return _error_response(e.status_code)
    except Exception as e:
        LOGGER.error("Thrown error: %s | status code: None", e, exc_info=True)
        return _error_response(500)

    LOGGER.info(
        "Create chat completion request was successful.\nCompletion:\n\n%s\n\n"
        "Token usage: prompt=%s completion=%s total=%s",
        result.text,
        result.prompt_tokens,
        result.completion_tokens,
        result.total_tokens,
    )
    body = CompletionOut(completion=result.text)
    return JSONResponse(body.model_dump(), status_code=200, headers=NO_STORE_HEADERS)
