from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import Any, List, Optional, Tuple, get_origin

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from .errors import DecodeError, ResponseError, SDKError
from .models import WireModel
from .times import Time


@dataclass
class Response:
    """Envelope metadata returned alongside every decoded result.

    ``code`` and ``message`` are the ``response_code`` and ``response_message``
    of the payload, not the HTTP status. 200 or 0 means the request was
    accepted.
    """

    http: httpx.Response
    code: int = 0
    message: str = ""
    time: Optional[Time] = None

    @property
    def status_code(self) -> int:
        return self.http.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http.headers


class Envelope(WireModel):
    response_code: int = 0
    response_message: str = ""
    response_content: Any = None
    response_timestamp: Optional[Time] = None
    errors: Optional[List[str]] = None

    @field_validator("response_timestamp", mode="before")
    @classmethod
    def empty_timestamp(cls, value: Any) -> Any:
        if value == "":
            return None
        return value


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def zero_value(result_type: Any) -> Any:
    origin = get_origin(result_type) or result_type
    if isinstance(origin, type):
        if issubclass(origin, BaseModel):
            return result_type.model_construct()
        if origin in (list, tuple, dict, set, str, int, float, bool, Decimal):
            return origin()
    return None


def _load_json(resp: httpx.Response, meta: Response) -> Any:
    try:
        return json.loads(resp.content, parse_float=Decimal)
    except ValueError as exc:
        if resp.is_error:
            raise SDKError(resp.status_code, resp.text or f"HTTP {resp.status_code}", meta) from exc
        raise DecodeError(f"invalid JSON response: {exc}", meta) from exc


def _validate(result_type: Any, data: Any, meta: Response) -> Any:
    try:
        return _adapter(result_type).validate_python(data)
    except ValidationError as exc:
        raise DecodeError(f"cannot decode response into {getattr(result_type, '__name__', result_type)}: {exc}", meta) from exc


def decode_response(resp: httpx.Response, result_type: Any) -> Tuple[Any, Response]:
    meta = Response(http=resp)
    if result_type is None:
        return None, meta

    # The token endpoint answers with a bare object instead of the envelope.
    if not getattr(result_type, "enveloped", True):
        if resp.is_error:
            raise SDKError(resp.status_code, resp.text or f"HTTP {resp.status_code}", meta)
        return _validate(result_type, _load_json(resp, meta), meta), meta

    body = _load_json(resp, meta)
    try:
        env = Envelope.model_validate(body)
    except ValidationError as exc:
        raise DecodeError(f"invalid response envelope: {exc}", meta) from exc

    meta.code = env.response_code
    meta.message = env.response_message
    meta.time = env.response_timestamp

    if env.errors:
        raise ResponseError(env.errors, response=meta)
    if resp.is_error:
        raise SDKError(resp.status_code, env.response_message or f"HTTP {resp.status_code}", meta)

    content = env.response_content
    if content is None or (isinstance(content, str) and content == ""):
        return zero_value(result_type), meta
    return _validate(result_type, content, meta), meta
