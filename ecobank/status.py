from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Optional, Tuple

from pydantic import Field

from .models import SecureHashOption, WireModel
from .response import Response

if TYPE_CHECKING:
    from .client import Client


class TransactionStatus(WireModel):
    request_type: str = Field("", alias="requestType")
    affiliate_code: str = Field("", alias="affiliateCode")
    amount: int = Field(0, alias="amount")
    currency: str = Field("", alias="currency")
    status: str = Field("", alias="status")
    status_code: str = Field("", alias="statusCode")
    status_reason: str = Field("", alias="statusReason")
    transaction_ref_no: str = Field("", alias="transactionRefNo")


class StatusOptions(SecureHashOption):
    client_id: str = Field("", alias="clientId")
    request_id: str = Field("", alias="requestId")


class ETokenStatusOptions(SecureHashOption):
    request_id: str = Field("", alias="requestId")
    affiliate_code: str = Field("", alias="affiliateCode")


class StatusService:
    def __init__(self, client: "Client"):
        self._client = client

    def get_transaction_status(
        self, opts: StatusOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[TransactionStatus, Response]:
        return self._client.execute("POST", "merchant/txns/status", opts, TransactionStatus, cancel)

    def get_etoken_status(
        self, opts: ETokenStatusOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[str, Response]:
        return self._client.execute("POST", "merchant/etoken/status", opts, str, cancel)
