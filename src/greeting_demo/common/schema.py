"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

GENERIC_ERROR_MESSAGE = "An error has occurred"


class CompletionOut(BaseModel):
    completion: str


class ErrorDetail(BaseModel):
    message: str = GENERIC_ERROR_MESSAGE


class ErrorOut(BaseModel):
    error: ErrorDetail = ErrorDetail()


@dataclass
class CompletionResult:
    """Generated text plus the token usage reported by the upstream."""
    text: str
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


class UpstreamError(Exception):
    """Raised when the completion call fails or its body cannot be used.

    `status_code` is None when no upstream status was received.
    """

    def __init__(self, message: str, status_code: int | None = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
