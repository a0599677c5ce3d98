from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx


class ErrorKind(Enum):
    """Closed set of failure kinds surfaced by the Slack client."""
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    GENERIC = "generic"  # Remote error without a dedicated family
    TRANSPORT = "transport"  # Network / timeout, not an application error


DEFAULT_RETRY_AFTER_SECONDS = 60


@dataclass(slots=True, eq=False)
class ClassifiedError(Exception):
    """Normalized failure for every Slack operation.

    Built once at the point of failure. `kind` carries the classification;
    there is no per-kind subclass.
    """

    kind: ErrorKind
    message: str
    retryable: bool = False
    retry_after_seconds: int | None = None
    remote_code: str | None = None
    http_status: int | None = None

    def __str__(self) -> str:
        return self.message


_KIND_BY_CODE: dict[str, ErrorKind] = {
    "invalid_auth": ErrorKind.AUTHENTICATION,
    "not_authed": ErrorKind.AUTHENTICATION,
    "account_inactive": ErrorKind.AUTHENTICATION,
    "token_revoked": ErrorKind.AUTHENTICATION,
    "token_expired": ErrorKind.AUTHENTICATION,
    "missing_scope": ErrorKind.PERMISSION,
    "not_allowed_token_type": ErrorKind.PERMISSION,
    "ekm_access_denied": ErrorKind.PERMISSION,
    "restricted_action": ErrorKind.PERMISSION,
    "channel_not_found": ErrorKind.NOT_FOUND,
    "user_not_found": ErrorKind.NOT_FOUND,
    "file_not_found": ErrorKind.NOT_FOUND,
    "message_not_found": ErrorKind.NOT_FOUND,
    "ratelimited": ErrorKind.RATE_LIMIT,
}

_HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.PERMISSION: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.RATE_LIMIT: 429,
}

_RETRYABLE_HINTS = ("network", "timeout", "econnreset", "connection reset")


def classify(remote_code: str | None, message: str | None = None) -> ClassifiedError:
    """
    Map a Slack `error` code onto the fixed taxonomy.

    Total over all inputs: unknown (or empty) codes fall through to GENERIC.
    """
    code = str(remote_code or "").strip() or "unknown_error"
    msg = str(message or "").strip() or f"Slack API error: {code}"
    kind = _KIND_BY_CODE.get(code, ErrorKind.GENERIC)

    if kind is ErrorKind.RATE_LIMIT:
        return rate_limited(DEFAULT_RETRY_AFTER_SECONDS, message=msg, remote_code=code)

    return ClassifiedError(
        kind=kind,
        message=msg,
        retryable=False,
        remote_code=code,
        http_status=_HTTP_STATUS_BY_KIND.get(kind),
    )


def rate_limited(
    retry_after_seconds: int | None,
    *,
    message: str = "Rate limit exceeded",
    remote_code: str | None = None,
) -> ClassifiedError:
    wait = DEFAULT_RETRY_AFTER_SECONDS if retry_after_seconds is None else int(retry_after_seconds)
    return ClassifiedError(
        kind=ErrorKind.RATE_LIMIT,
        message=message,
        retryable=True,
        retry_after_seconds=wait,
        remote_code=remote_code,
        http_status=429,
    )


def classify_transport(exc: BaseException) -> ClassifiedError:
    """
    httpx failures (connect errors, resets, timeouts, undecodable bodies)
    are always retryable, whatever the message says.
    """
    if isinstance(exc, ClassifiedError):
        return exc
    detail = str(exc) or type(exc).__name__
    return ClassifiedError(
        kind=ErrorKind.TRANSPORT,
        message=f"Transport failure: {detail}",
        retryable=True,
    )


def is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, ClassifiedError):
        return exc.retryable
    if isinstance(exc, httpx.HTTPError):
        return True
    text = str(exc).lower()
    return any(h in text for h in _RETRYABLE_HINTS)


def error_details(exc: BaseException) -> dict[str, Any]:
    """
    Structured view of a failure for logs and the tool boundary.
    """
    if isinstance(exc, ClassifiedError):
        out: dict[str, Any] = {
            "kind": exc.kind.value,
            "message": exc.message,
            "retryable": exc.retryable,
        }
        if exc.remote_code:
            out["remoteCode"] = exc.remote_code
        if exc.http_status is not None:
            out["httpStatus"] = exc.http_status
        if exc.retry_after_seconds is not None:
            out["retryAfterSeconds"] = exc.retry_after_seconds
        return out
    return {
        "name": type(exc).__name__,
        "message": str(exc),
        "retryable": is_retryable(exc),
    }


def render_error(exc: BaseException) -> str:
    msg = f"Error: {exc}"
    if is_retryable(exc):
        msg += " (retryable)"
    return msg
