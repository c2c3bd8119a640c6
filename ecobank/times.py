from __future__ import annotations

import re
from datetime import datetime
from typing import Any, List, Optional, Sequence

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import TimeFormatError

DEFAULT_LAYOUT = "%Y-%m-%d %H:%M:%S"
DATE_LAYOUT = "%Y%m%d"

# strptime %f takes at most six digits
_LONG_FRACTION = re.compile(r"(\.\d{6})\d+")

# Tried in order; the API is not consistent about the timestamps it returns.
TIME_FORMATS: List[str] = [
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d",
]


def add_time_format(*layouts: str) -> None:
    """Append strptime layouts to the formats tried by :func:`parse_timestamp`.

    Not thread-safe. Call it at start-up, before any request is made.
    """
    TIME_FORMATS.extend(layouts)


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def _parse(text: str, layouts: Sequence[str]) -> datetime:
    errors: List[str] = []
    trimmed = _LONG_FRACTION.sub(r"\1", text)
    for layout in layouts:
        try:
            return datetime.strptime(trimmed, layout)
        except ValueError as exc:
            errors.append(f"{layout}: {exc}")
    raise TimeFormatError(text, errors)


def parse_timestamp(text: str, formats: Optional[Sequence[str]] = None) -> "Time":
    s = _unquote(text)
    return Time(_parse(s, TIME_FORMATS if formats is None else formats))


def parse_date(text: str) -> "Date":
    return Date(_parse(_unquote(text), [DATE_LAYOUT]))


class Time:
    """A point in time as exchanged with the API.

    ``str()`` renders it with ``layout`` when one was given, otherwise with
    ``%Y-%m-%d %H:%M:%S`` which is what most endpoints expect.
    """

    def __init__(self, value: datetime, layout: Optional[str] = None):
        self._value = value
        self.layout = layout

    @property
    def value(self) -> datetime:
        return self._value

    @classmethod
    def from_json(cls, data: Any, layout: Optional[str] = None) -> "Time":
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        s = _unquote(data)
        layouts = ([layout] if layout else []) + TIME_FORMATS
        return cls(_parse(s, layouts), layout)

    def to_json(self) -> str:
        return f'"{self}"'

    def __str__(self) -> str:
        return self._value.strftime(self.layout or DEFAULT_LAYOUT)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Time):
            return self._value == other._value
        if isinstance(other, datetime):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    @classmethod
    def _validate(cls, value: Any) -> "Time":
        if isinstance(value, cls):
            return value
        if isinstance(value, Time):
            return cls(value.value, value.layout)
        if isinstance(value, datetime):
            return cls(value)
        if isinstance(value, str):
            return cls._from_text(value)
        raise ValueError(f"cannot convert {type(value).__name__} to {cls.__name__}")

    @classmethod
    def _from_text(cls, text: str) -> "Time":
        return parse_timestamp(text)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


class Date(Time):
    """A calendar date, rendered as ``YYYYMMDD``."""

    def __init__(self, value: datetime, layout: Optional[str] = None):
        super().__init__(value, layout or DATE_LAYOUT)

    @classmethod
    def from_json(cls, data: Any, layout: Optional[str] = None) -> "Date":
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        return parse_date(data)

    @classmethod
    def _from_text(cls, text: str) -> "Date":
        return parse_date(text)
