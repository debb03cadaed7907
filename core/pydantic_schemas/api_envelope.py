"""``{code, success, message, data, meta}`` envelope returned by JSON routes.

Routes declare ``response_model=ApiResponse[<payload model>]`` so the payload
is validated and serialised (camelCase aliases included) by FastAPI.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    code: int
    success: bool
    message: str
    data: Optional[T] = None
    meta: Optional[Dict[str, Any]] = None


def ok(message: str, data: Any = None, meta: Dict[str, Any] | None = None) -> ApiResponse[Any]:
    """Successful (200) envelope around ``data``."""

    return ApiResponse[Any](code=200, success=True, message=message, data=data, meta=meta)


def error(code: int, message: str, data: Any = None) -> ApiResponse[Any]:
    if code < 400:
        raise ValueError("Error responses must use an error HTTP status code (>= 400)")
    return ApiResponse[Any](code=code, success=False, message=message, data=data)


__all__ = ["ApiResponse", "error", "ok"]
