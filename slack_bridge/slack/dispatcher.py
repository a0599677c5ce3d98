from __future__ import annotations

from typing import Any

import httpx

from ..observability.logging import get_logger
from ..settings import settings
from .credentials import ResolvedAuth
from .errors import (
    DEFAULT_RETRY_AFTER_SECONDS,
    ClassifiedError,
    ErrorKind,
    classify,
    classify_transport,
    rate_limited,
)
from .params import compact


log = get_logger("slack")


def _retry_after(resp: httpx.Response) -> int:
    raw = str(resp.headers.get("Retry-After") or "").strip()
    try:
        return max(0, int(raw))
    except ValueError:
        return DEFAULT_RETRY_AFTER_SECONDS


class RequestDispatcher:
    """
    Authenticated Slack Web API caller.

    Success is decided in two phases: transport status first (only rate
    limiting is signaled there), then the JSON envelope's `ok` flag, since
    Slack answers most application errors with HTTP 200.

    Holds configuration only; every call opens its own httpx.Client.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout_s: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = str(base_url or settings.slack_api_base_url).rstrip("/")
        self.timeout_s = float(timeout_s or settings.slack_http_timeout_seconds)
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout_s, transport=self._transport)

    def call(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        *,
        auth: ResolvedAuth,
    ) -> dict[str, Any]:
        """
        POST one Web API method and return its decoded envelope (ok=true).

        Raises ClassifiedError on any failure; nothing is retried here.
        """
        m = str(method or "").strip().lstrip("/")
        body = compact(params)

        try:
            with self._client() as client:
                resp = client.post(f"{self.base_url}/{m}", headers=auth.headers(), json=body)
        except httpx.InvalidURL as e:
            log.warning("slack_api_invalid_url", method=m, token_kind=auth.token_kind)
            raise _invalid_url(e) from e
        except httpx.HTTPError as e:
            # Connect/read failures, timeouts, undecodable bodies, redirect loops.
            err = classify_transport(e)
            log.warning(
                "slack_api_transport_failed",
                method=m,
                kind=err.kind.value,
                error_type=type(e).__name__,
                token_kind=auth.token_kind,
            )
            raise err from e

        if resp.status_code == 429:
            err = rate_limited(_retry_after(resp))
            log.warning(
                "slack_api_rate_limited",
                method=m,
                retry_after_seconds=err.retry_after_seconds,
                token_kind=auth.token_kind,
            )
            raise err

        try:
            data = resp.json() if resp.content else None
        except ValueError:
            data = None
        if not isinstance(data, dict):
            err = ClassifiedError(
                kind=ErrorKind.GENERIC,
                message=f"Invalid response from Slack (HTTP {resp.status_code})",
                remote_code="invalid_response",
                http_status=resp.status_code,
            )
            log.warning("slack_api_invalid_response", method=m, status_code=resp.status_code)
            raise err

        if not bool(data.get("ok")):
            err = classify(data.get("error"))
            log.warning(
                "slack_api_call_failed",
                method=m,
                kind=err.kind.value,
                remote_code=err.remote_code,
                http_status=err.http_status,
                token_kind=auth.token_kind,
            )
            raise err

        warnings = _warnings(data)
        if warnings:
            log.debug("slack_api_warnings", method=m, warnings=warnings)
        return data

    def upload(self, url: str, content: bytes) -> int:
        """
        Push raw bytes to a one-time upload URL (no auth, no envelope).

        The status is returned for diagnostics only; a failed push shows up as
        a failed or inconsistent completion call.
        """
        try:
            with self._client() as client:
                resp = client.post(str(url), content=content)
        except httpx.InvalidURL as e:
            log.warning("slack_upload_invalid_url", size=len(content))
            raise _invalid_url(e, remote_code="invalid_upload_url") from e
        except httpx.HTTPError as e:
            log.warning("slack_upload_transport_failed", error_type=type(e).__name__)
            raise classify_transport(e) from e

        if resp.status_code >= 400:
            log.warning("slack_upload_push_rejected", status_code=resp.status_code, size=len(content))
        return int(resp.status_code)


def _warnings(data: dict[str, Any]) -> list[str]:
    out: list[str] = []
    w = str(data.get("warning") or "").strip()
    if w:
        out.append(w)
    meta = data.get("response_metadata")
    if isinstance(meta, dict):
        for item in meta.get("warnings") or []:
            s = str(item or "").strip()
            if s and s not in out:
                out.append(s)
    return out


def _invalid_url(exc: Exception, *, remote_code: str = "invalid_url") -> ClassifiedError:
    return ClassifiedError(
        kind=ErrorKind.GENERIC,
        message=f"Invalid request URL: {exc}",
        remote_code=remote_code,
    )
