from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple, Type, Union

from pydantic import BaseModel

from .errors import SchemaError

logger = logging.getLogger(__name__)

SECURE_HASH_WIRE_NAME = "secureHash"


@dataclass(frozen=True)
class HashTag:
    kind: str


# Annotated markers, e.g. ``Annotated[str, HASH_IGNORE]``.
HASH_IGNORE = HashTag("ignore")
NESTED_HEADER = HashTag("header")


@dataclass(frozen=True)
class HashField:
    name: str
    wire_name: str
    hashed: bool
    nested_header: bool


@dataclass(frozen=True)
class HashSchema:
    fields: Tuple[HashField, ...]
    header: Optional[HashField] = None


_schemas: Dict[type, HashSchema] = {}


def build_hash_schema(cls: Type[BaseModel]) -> HashSchema:
    """Describe which fields of ``cls`` feed the secure hash, in declaration order."""
    fields = []
    header: Optional[HashField] = None
    for name, info in cls.model_fields.items():
        wire_name = info.alias or name
        ignored = HASH_IGNORE in info.metadata
        is_header = NESTED_HEADER in info.metadata
        hashed = not (
            name.startswith("_")
            or ignored
            or info.exclude is True
            or not wire_name
            or wire_name == SECURE_HASH_WIRE_NAME
        )
        field = HashField(name=name, wire_name=wire_name, hashed=hashed, nested_header=is_header)
        if is_header:
            if header is not None:
                raise SchemaError(
                    f"{cls.__name__} marks both {header.name!r} and {name!r} as the nested hash header"
                )
            header = field
        fields.append(field)
    return HashSchema(fields=tuple(fields), header=header)


def hash_schema(cls: Type[BaseModel]) -> HashSchema:
    schema = _schemas.get(cls)
    if schema is None:
        schema = build_hash_schema(cls)
        _schemas[cls] = schema
    return schema


def register_hash_schema(cls: Type[BaseModel]) -> None:
    _schemas[cls] = build_hash_schema(cls)


def format_decimal(d: Decimal) -> str:
    if d == 0:
        return "0"
    return format(d.normalize(), "f")


def to_canonical_string(value: Any, strict: bool = False) -> str:
    """Render a field value the way the API expects it in the hash input.

    Unsupported types render as the empty string unless ``strict`` is set,
    in which case a TypeError is raised.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        return format_decimal(value)
    if isinstance(value, float):
        return format_decimal(Decimal(repr(value)))
    if isinstance(value, (bytes, bytearray)):
        # undecodable bytes round-trip through surrogates
        return bytes(value).decode("utf-8", "surrogateescape")
    if type(value).__str__ is not object.__str__ and not isinstance(value, (list, tuple, dict, set, BaseModel)):
        return str(value)
    if strict:
        raise TypeError(f"cannot render {type(value).__name__} for the secure hash")
    return ""


def _hash_bytes(value: Any, strict: bool) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return to_canonical_string(value, strict).encode("utf-8")


def generate_secure_hash(data: Union[str, bytes], key: str) -> str:
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha512(data + key.encode("utf-8")).hexdigest()


def compute_secure_hash(model: BaseModel, key: str, strict: bool = False) -> str:
    schema = hash_schema(type(model))
    if schema.header is not None:
        nested = getattr(model, schema.header.name)
        if not isinstance(nested, BaseModel):
            raise SchemaError(f"{type(model).__name__}.{schema.header.name} is not a model")
        return compute_secure_hash(nested, key, strict)

    parts = []
    for field in schema.fields:
        if field.hashed:
            parts.append(_hash_bytes(getattr(model, field.name), strict))
    return generate_secure_hash(b"".join(parts), key)


def ensure_secure_hash(opts: Any, key: str, strict: bool = False) -> None:
    """Fill in the secure hash of ``opts`` unless the caller already set one."""
    getter = getattr(opts, "get_hash", None)
    setter = getattr(opts, "set_hash", None)
    if getter is None or setter is None or getter():
        return
    setter(compute_secure_hash(opts, key, strict))
    logger.debug("secure hash computed for %s", type(opts).__name__)
