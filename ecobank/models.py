from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator

from .securehash import HASH_IGNORE, format_decimal, register_hash_schema

# amounts go on the wire in the same form they are hashed in
Amount = Annotated[Decimal, PlainSerializer(format_decimal, return_type=str, when_used="json")]


class WireModel(BaseModel):
    """Base for every payload exchanged with the API.

    Field aliases carry the wire names. ``null`` values leave the field at
    its default, as the API sends ``null`` for many empty strings.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        register_hash_schema(cls)

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class SecureHashOption(WireModel):
    # generated from the other fields when left empty
    secure_hash: Annotated[str, HASH_IGNORE] = Field("", alias="secureHash")

    def set_hash(self, value: str) -> None:
        self.secure_hash = value

    def get_hash(self) -> str:
        return self.secure_hash


class HostHeaderInfo(WireModel):
    source_code: str = Field("", alias="sourceCode")
    request_id: str = Field("", alias="requestId")
    affiliate_code: str = Field("", alias="affiliateCode")
    response_code: str = Field("", alias="responseCode")
    response_message: str = Field("", alias="responseMessage")
