from __future__ import annotations

import json
import logging
import random
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

import httpx
from pydantic import BaseModel

from .account import AccountService
from .auth import AccessTokenOptions, AuthService, token_expiry
from .config import EcobankSettings
from .errors import (
    AuthenticationError,
    AuthenticationUnavailableError,
    DecodeError,
    RequestCancelledError,
    SDKError,
)
from .payment import PaymentService
from .remittance import RemittanceService
from .response import Response, decode_response
from .securehash import ensure_secure_hash
from .status import StatusService

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://developer.ecobank.com/corporateapi/"
USER_AGENT = "ecobank-python/0.1.0"
ORIGIN = "developer.ecobank.com"
CONTENT_TYPE = "application/json"

# tokens issued by the API are valid for two hours
DEFAULT_TOKEN_EXPIRY = timedelta(hours=2)

CheckRetry = Callable[[httpx.Response], bool]
Backoff = Callable[[float, float, int, Optional[httpx.Response]], float]


@dataclass
class RetryConfig:
    max_attempts: int = 6
    base_delay_ms: int = 100
    max_delay_ms: int = 400


@dataclass(frozen=True)
class Session:
    token: str = ""
    expires_at: Optional[datetime] = None

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        if not self.token:
            return False
        if self.expires_at is None:
            return True
        return (now or datetime.now(timezone.utc)) < self.expires_at


class _RWLock:
    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._readers:
                self._cond.wait()
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


def default_check_retry(resp: httpx.Response) -> bool:
    return resp.status_code == 429 or resp.status_code >= 500


def default_backoff(min_delay: float, max_delay: float, attempt: int, resp: Optional[httpx.Response]) -> float:
    if resp is not None and resp.status_code in (429, 503):
        retry_after = resp.headers.get("Retry-After")
        if retry_after:
            try:
                return min(float(int(retry_after.strip())), max_delay)
            except ValueError:
                pass
    cap = min(min_delay * (2 ** (attempt - 1)), max_delay)
    return random.uniform(min_delay, max(min_delay, cap))


def _utc(dt: Optional[datetime]) -> Optional[datetime]:
    if dt is not None and dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def _raise_if_cancelled(cancel: Optional[threading.Event]) -> None:
    if cancel is not None and cancel.is_set():
        raise RequestCancelledError()


class Client:
    def __init__(
        self,
        username: str = "",
        password: str = "",
        lab_key: str = "",
        *,
        base_url: str = DEFAULT_BASE_URL,
        token: Optional[str] = None,
        token_expires_at: Optional[datetime] = None,
        http: Optional[httpx.Client] = None,
        timeout_seconds: float = 30.0,
        retry: Optional[RetryConfig] = None,
        disable_retries: bool = False,
        check_retry: Optional[CheckRetry] = None,
        backoff: Optional[Backoff] = None,
        user_agent: str = USER_AGENT,
        strict_hash_values: bool = False,
    ):
        self.username = username
        self.password = password
        self._lab_key = lab_key
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.retry = retry or RetryConfig()
        self.disable_retries = disable_retries
        self.check_retry = check_retry or default_check_retry
        self.backoff = backoff or default_backoff
        self.user_agent = user_agent
        self.strict_hash_values = strict_hash_values
        self.http = http or httpx.Client(timeout=timeout_seconds)

        self._session = Session()
        self._session_lock = _RWLock()
        self._login_lock = threading.Lock()
        if token:
            self.set_token(token, token_expires_at)

        self.auth = AuthService(self)
        self.account = AccountService(self)
        self.payment = PaymentService(self)
        self.remittance = RemittanceService(self)
        self.status = StatusService(self)

    @classmethod
    def from_settings(cls, settings: Optional[EcobankSettings] = None, **kwargs: Any) -> "Client":
        """Build a client from settings; keyword arguments override them."""
        s = settings or EcobankSettings()
        options: Dict[str, Any] = {
            "base_url": s.base_url,
            "token": s.token,
            "timeout_seconds": s.timeout_seconds,
            "retry": RetryConfig(max_attempts=s.max_attempts, base_delay_ms=s.base_delay_ms, max_delay_ms=s.max_delay_ms),
            "disable_retries": s.disable_retries,
            "user_agent": s.user_agent,
            "strict_hash_values": s.strict_hash_values,
        }
        options.update(kwargs)
        return cls(s.username, s.password, s.lab_key, **options)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> Session:
        with self._session_lock.read():
            return self._session

    def _set_session(self, session: Session) -> None:
        with self._session_lock.write():
            self._session = session

    def set_token(self, token: str, expires_at: Optional[datetime] = None) -> None:
        """Install a token obtained elsewhere.

        Without ``expires_at`` the expiry is read from the token's JWT ``exp``
        claim; a token that is not a JWT is used until the API rejects it.
        """
        if expires_at is None:
            try:
                expires_at = token_expiry(token)
            except ValueError:
                expires_at = None
        self._set_session(Session(token=token, expires_at=_utc(expires_at)))

    def _has_credentials(self) -> bool:
        return bool(self.username or self.password)

    def login(self, cancel: Optional[threading.Event] = None) -> None:
        if not self._has_credentials():
            raise AuthenticationUnavailableError("no credentials configured")
        opts = AccessTokenOptions(user_id=self.username, password=self.password)
        try:
            token, resp = self.auth.get_access_token(opts, cancel)
        except (SDKError, DecodeError) as exc:
            raise AuthenticationError(f"login failed: {exc}") from exc
        if resp.status_code != 200:
            raise AuthenticationError(f"login failed: HTTP {resp.status_code}")
        if not token.token:
            raise AuthenticationError("login failed: empty token")

        try:
            expires_at = token_expiry(token.token)
        except ValueError:
            expires_at = datetime.now(timezone.utc) + DEFAULT_TOKEN_EXPIRY
        self._set_session(Session(token=token.token, expires_at=expires_at))
        logger.debug("authenticated, token expires at %s", expires_at.isoformat())

    def _authorize(self, cancel: Optional[threading.Event]) -> str:
        session = self.session
        if session.is_valid():
            return session.token
        if not self._has_credentials():
            raise AuthenticationUnavailableError()
        with self._login_lock:
            # another caller may have logged in while we waited
            session = self.session
            if not session.is_valid():
                logger.debug("token missing or expired, re-authenticating")
                self.login(cancel)
                session = self.session
        return session.token

    def new_request(self, method: str, path: str, opts: Any = None) -> httpx.Request:
        headers = {
            "Content-Type": CONTENT_TYPE,
            "Accept": CONTENT_TYPE,
            "Origin": ORIGIN,
        }
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        content: Optional[bytes] = None
        if opts is not None:
            ensure_secure_hash(opts, self._lab_key, self.strict_hash_values)
            if isinstance(opts, BaseModel):
                content = opts.model_dump_json(by_alias=True).encode("utf-8")
            else:
                content = json.dumps(opts, ensure_ascii=False).encode("utf-8")
        return self.http.build_request(method, self._base_url + path.lstrip("/"), content=content, headers=headers)

    def do(self, request: httpx.Request, result_type: Any, cancel: Optional[threading.Event] = None) -> Tuple[Any, Response]:
        """Send an authenticated request and decode the response envelope.

        Raises ResponseError when the envelope carries an ``errors`` list.
        """
        token = self._authorize(cancel)
        request.headers["Authorization"] = f"Bearer {token}"
        resp = self._send(request, cancel)
        return decode_response(resp, result_type)

    def execute(
        self,
        method: str,
        path: str,
        opts: Any,
        result_type: Any,
        cancel: Optional[threading.Event] = None,
        authenticate: bool = True,
    ) -> Tuple[Any, Response]:
        req = self.new_request(method, path, opts)
        if not authenticate:
            return decode_response(self._send(req, cancel), result_type)
        return self.do(req, result_type, cancel)

    def _send(self, request: httpx.Request, cancel: Optional[threading.Event]) -> httpx.Response:
        attempts = 1 if self.disable_retries else max(1, self.retry.max_attempts)
        for attempt in range(1, attempts + 1):
            _raise_if_cancelled(cancel)
            logger.debug("%s %s (attempt %d/%d)", request.method, request.url, attempt, attempts)
            resp = self.http.send(request)
            if attempt < attempts and self.check_retry(resp):
                delay = self.backoff(self.retry.base_delay_ms / 1000, self.retry.max_delay_ms / 1000, attempt, resp)
                logger.debug("HTTP %d from %s, retrying in %.3fs", resp.status_code, request.url, delay)
                resp.close()
                self._sleep(delay, cancel)
                continue
            return resp
        raise RuntimeError("unreachable")

    def _sleep(self, delay: float, cancel: Optional[threading.Event]) -> None:
        if cancel is None:
            time.sleep(delay)
        elif cancel.wait(delay):
            raise RequestCancelledError()

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def do_request(
    client: Client,
    method: str,
    path: str,
    opts: Any,
    result_type: Any,
    cancel: Optional[threading.Event] = None,
) -> Tuple[Any, Response]:
    """Build, sign, send and decode one API call.

    ``result_type`` is anything pydantic can validate into: a model,
    ``List[Model]``, ``str``, ``dict``. Returns the decoded result and the
    envelope metadata.
    """
    return client.execute(method, path, opts, result_type, cancel)
