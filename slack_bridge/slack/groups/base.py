from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ValidationError

from ..credentials import Credentials, resolve
from ..dispatcher import RequestDispatcher
from ..errors import ClassifiedError, ErrorKind

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class Api:
    """
    Immutable call context shared by the operation groups of one client.

    Credentials are resolved on every call; nothing is cached between calls.
    """

    dispatcher: RequestDispatcher
    credentials: Credentials

    def call(self, method: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        auth = resolve(self.credentials)
        return self.dispatcher.call(method, params, auth=auth)


def decode(model: type[M], obj: Any, *, method: str) -> M:
    """Project one envelope field into its typed entity."""
    try:
        return model.model_validate(obj)
    except ValidationError as e:
        raise ClassifiedError(
            kind=ErrorKind.GENERIC,
            message=f"Unexpected {model.__name__} shape in {method} response",
            remote_code="invalid_response",
        ) from e


def decode_list(model: type[M], rows: Iterable[Any] | None, *, method: str) -> list[M]:
    return [decode(model, r, method=method) for r in (rows or [])]


class OperationGroup:
    def __init__(self, api: Api):
        self._api = api
