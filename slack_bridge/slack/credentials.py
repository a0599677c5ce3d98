from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping

from .errors import ClassifiedError, ErrorKind


BOT_TOKEN_HEADER = "X-Slack-Bot-Token"
USER_TOKEN_HEADER = "X-Slack-User-Token"

_MISSING_MESSAGE = (
    "No credentials provided. Include X-Slack-Bot-Token or X-Slack-User-Token header."
)


class MissingCredentials(ClassifiedError):
    """Neither token was supplied for the call."""

    def __init__(self, message: str = _MISSING_MESSAGE):
        ClassifiedError.__init__(
            self,
            kind=ErrorKind.AUTHENTICATION,
            message=message,
            retryable=False,
            http_status=401,
        )


def _mask(token: str | None) -> str | None:
    t = str(token or "").strip()
    if not t:
        return None
    return f"{t[:5]}…" if len(t) > 8 else "…"


@dataclass(frozen=True, slots=True)
class Credentials:
    """
    Tenant token pair for one call.

    primary_token: bot token (xoxb-…), preferred when both are present.
    secondary_token: user token (xoxp-…).
    """

    primary_token: str | None = field(default=None, repr=False)
    secondary_token: str | None = field(default=None, repr=False)

    def __repr__(self) -> str:
        return (
            f"Credentials(primary_token={_mask(self.primary_token)!r}, "
            f"secondary_token={_mask(self.secondary_token)!r})"
        )


@dataclass(frozen=True, slots=True)
class ResolvedAuth:
    token: str = field(repr=False)
    token_kind: Literal["primary", "secondary"]

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json; charset=utf-8",
        }


def resolve(credentials: Credentials | None) -> ResolvedAuth:
    """
    Pick exactly one token for the call (primary first).

    No remote validation happens here; an invalid token is only discovered by
    the first dispatched request.
    """
    if credentials is None:
        raise MissingCredentials()

    primary = str(credentials.primary_token or "").strip()
    if primary:
        return ResolvedAuth(token=primary, token_kind="primary")

    secondary = str(credentials.secondary_token or "").strip()
    if secondary:
        return ResolvedAuth(token=secondary, token_kind="secondary")

    raise MissingCredentials()


def credentials_from_headers(headers: Mapping[str, str] | None) -> Credentials:
    """
    Parse the tenant token headers of an inbound request (case-insensitive).
    """
    lowered = {str(k).lower(): v for k, v in (headers or {}).items()}
    bot = str(lowered.get(BOT_TOKEN_HEADER.lower()) or "").strip() or None
    user = str(lowered.get(USER_TOKEN_HEADER.lower()) or "").strip() or None
    return Credentials(primary_token=bot, secondary_token=user)
