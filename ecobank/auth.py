from __future__ import annotations

import base64
import json
import threading
from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from pydantic import Field

from .models import WireModel
from .response import Response

if TYPE_CHECKING:
    from .client import Client


class AccessTokenOptions(WireModel):
    user_id: str = Field("", alias="userId")
    password: str = Field("", alias="password")


class BearerToken(WireModel):
    # user/token answers with this object directly, without the envelope
    enveloped: ClassVar[bool] = False

    username: str = Field("", alias="username")
    token: str = Field("", alias="token")


def token_expiry(token: str) -> datetime:
    """Return the ``exp`` claim of a JWT as an aware UTC datetime.

    The signature is not verified.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise ValueError("invalid JWT format")
    payload = parts[1]
    try:
        raw = base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4))
        claims = json.loads(raw)
    except ValueError as exc:
        raise ValueError(f"invalid JWT payload: {exc}") from exc
    exp = claims.get("exp") if isinstance(claims, dict) else None
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        raise ValueError("JWT payload has no exp claim")
    return datetime.fromtimestamp(exp, tz=timezone.utc)


class AuthService:
    def __init__(self, client: "Client"):
        self._client = client

    def get_access_token(
        self, opts: AccessTokenOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[BearerToken, Response]:
        return self._client.execute("POST", "user/token", opts, BearerToken, cancel, authenticate=False)
