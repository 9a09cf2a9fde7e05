"""Path and request-body helpers shared by the tool modules."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..models import UpstreamRequest


def service_path(order_no: str, action: str) -> str:
    """Path of a per-service endpoint, e.g. `/account/services/VP1/start`."""
    return f"/account/services/{order_no}/{action}"


def with_page(path: str, page: Optional[int]) -> str:
    if page is None:
        return path
    return f"{path}?page={page}"


def body_of(args: BaseModel, *fields: str) -> Dict[str, Any]:
    """
    Collect the named fields of `args` into a request body.

    Fields left unset (None) are omitted; everything else is copied as given.
    """
    body: Dict[str, Any] = {}
    for name in fields:
        value = getattr(args, name)
        if value is None:
            continue
        if isinstance(value, BaseModel):
            value = value.model_dump()
        body[name] = value
    return body


def get(path: str) -> UpstreamRequest:
    return UpstreamRequest("GET", path)


def post(path: str, body: Optional[Dict[str, Any]] = None) -> UpstreamRequest:
    return UpstreamRequest("POST", path, body)


def delete(path: str) -> UpstreamRequest:
    return UpstreamRequest("DELETE", path)
