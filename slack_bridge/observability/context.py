from __future__ import annotations

import uuid
from contextvars import ContextVar, Token


request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    return request_id_var.get()


def bind_request_id(request_id: str | None = None) -> Token:
    """Bind a request id for the current task/thread and return the reset token."""
    rid = (str(request_id).strip() if request_id else "") or str(uuid.uuid4())
    return request_id_var.set(rid)


def reset_request_id(token: Token) -> None:
    request_id_var.reset(token)
