from __future__ import annotations

import threading
from typing import TYPE_CHECKING, List, Optional, Tuple

from pydantic import Field

from .models import SecureHashOption, WireModel
from .payment import PaymentOptions
from .response import Response

if TYPE_CHECKING:
    from .client import Client


class Institution(WireModel):
    """An Ecobank affiliate allowed to take part in cross-border transfers."""

    institution_id: str = Field("", alias="institutionId")
    institution_type: str = Field("", alias="institutionType")
    institution_name: str = Field("", alias="institutionName")
    country_code: str = Field("", alias="countryCode")


class ListInstitutionsOptions(SecureHashOption):
    request_id: str = Field("", alias="requestId")
    client_id: str = Field("", alias="clientId")
    affiliate_code: str = Field("", alias="affiliateCode")
    destination_country: str = Field("", alias="destinationCountry")


class RemitteeAccount(WireModel):
    account_status: str = Field("", alias="accountStatus")
    account_name: str = Field("", alias="accountName")
    account_type: str = Field("", alias="accountType")
    branch_code: str = Field("", alias="branchCode")
    account_no: str = Field("", alias="accountNo")
    currency: str = Field("", alias="ccy")
    affiliate_code: str = Field("", alias="affiliateCode")


class GetRemitteeAccountOptions(SecureHashOption):
    request_id: str = Field("", alias="requestId")
    client_id: str = Field("", alias="clientId")
    affiliate_code: str = Field("", alias="affiliateCode")
    delivery_method: str = Field("", alias="deliveryMethod")
    destination_entity_code: str = Field("", alias="destinationEntityCode")
    account_no: str = Field("", alias="accountNo")
    destination_country: str = Field("", alias="destinationCountry")


class RemittanceService:
    def __init__(self, client: "Client"):
        self._client = client

    def list_institutions(
        self, opts: ListInstitutionsOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[List[Institution], Response]:
        return self._client.execute("POST", "merchant/ecobankafrica/institutions", opts, List[Institution], cancel)

    def get_account(
        self, opts: GetRemitteeAccountOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[RemitteeAccount, Response]:
        return self._client.execute("POST", "merchant/ecobankafrica/account/enquiry", opts, RemitteeAccount, cancel)

    def pay(self, opts: PaymentOptions, cancel: Optional[threading.Event] = None) -> Tuple[str, Response]:
        return self._client.payment.pay(opts, cancel)
