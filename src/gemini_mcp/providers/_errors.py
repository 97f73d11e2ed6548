"""Mapping of provider SDK exceptions into GenerationError."""

from __future__ import annotations

import asyncio

import httpx

from gemini_mcp.config import API_KEY_ENV_VAR
from gemini_mcp.errors import GenerationError, _walk_exception_chain


def extract_status_code(exc: BaseException) -> int | None:
    """Walk the exception chain to find an HTTP status code."""
    for e in _walk_exception_chain(exc):
        for attr in ("status_code", "code", "status"):
            value = getattr(e, attr, None)
            if isinstance(value, bool) or not isinstance(value, int):
                continue
            if 100 <= value <= 599:
                return value
        response = getattr(e, "response", None)
        value = getattr(response, "status_code", None)
        if isinstance(value, int) and 100 <= value <= 599:
            return value
    return None


def _is_network_error(exc: BaseException) -> bool:
    return any(
        isinstance(e, (httpx.TimeoutException, httpx.RequestError))
        for e in _walk_exception_chain(exc)
    )


def _derive_hint(exc: BaseException, status_code: int | None) -> str | None:
    cause_lower = str(exc).lower()
    if status_code in {401, 403} or (
        status_code == 400 and ("api key" in cause_lower or "api_key" in cause_lower)
    ):
        return f"Check credentials/permissions (try setting {API_KEY_ENV_VAR})."
    if status_code == 429:
        return "Gemini quota or rate limit exceeded; try again later."
    if _is_network_error(exc):
        return "Network error while contacting Gemini; check connectivity."
    return None


def wrap_generation_error(
    exc: BaseException,
    *,
    message: str = "Gemini generation failed",
) -> GenerationError:
    """Map an SDK or transport exception into a GenerationError.

    The original message is preserved in the wrapped error's text.
    """
    if isinstance(exc, asyncio.CancelledError):
        raise exc

    if isinstance(exc, GenerationError):
        return exc

    status_code = extract_status_code(exc)
    status_note = f" (status={status_code})" if isinstance(status_code, int) else ""
    cause = str(exc) or type(exc).__name__
    return GenerationError(
        f"{message}{status_note}: {cause}",
        hint=_derive_hint(exc, status_code),
        status_code=status_code,
    )
