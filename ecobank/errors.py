from __future__ import annotations

import json
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

if TYPE_CHECKING:
    from .response import Response


class EcobankError(Exception):
    """Base class for errors raised by the client."""


class SDKError(EcobankError):
    def __init__(self, status_code: int, message: str, response: Optional["Response"] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.response = response


class AuthenticationError(EcobankError):
    pass


class AuthenticationUnavailableError(AuthenticationError):
    def __init__(self, message: str = "token expired and no credentials are configured"):
        super().__init__(message)


class DecodeError(EcobankError):
    def __init__(self, message: str, response: Optional["Response"] = None):
        super().__init__(message)
        self.response = response


class RequestCancelledError(EcobankError):
    def __init__(self, message: str = "request cancelled"):
        super().__init__(message)


class SchemaError(TypeError):
    pass


class TimeFormatError(ValueError):
    def __init__(self, value: str, errors: List[str]):
        self.value = value
        self.errors = errors
        msg = f"cannot parse {value!r} as a timestamp"
        if errors:
            msg += ":\n" + "\n".join(errors)
        super().__init__(msg)


class ResponseError(EcobankError):
    """Error messages returned by the API inside the response envelope.

    Behaves like a read-only list of strings. ``str(err)`` joins the
    messages with newlines and is empty when there are none.
    """

    def __init__(self, messages: Optional[Iterable[str]] = None, response: Optional["Response"] = None):
        self._messages: List[str] = list(messages or [])
        self.response = response
        super().__init__(*self._messages)

    def add(self, message: str) -> None:
        self._messages.append(message)
        self.args = tuple(self._messages)

    def all(self) -> Optional[List[str]]:
        if not self._messages:
            return None
        return list(self._messages)

    def to_json(self) -> str:
        return json.dumps(self._messages, ensure_ascii=False, separators=(",", ":"))

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __getitem__(self, index: int) -> str:
        return self._messages[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResponseError):
            return self._messages == other._messages
        if isinstance(other, list):
            return self._messages == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(self._messages)

    def __repr__(self) -> str:
        return f"ResponseError({self._messages!r})"
