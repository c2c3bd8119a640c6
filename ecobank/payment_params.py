"""Parameter variants carried in ``PaymentExtension.param_list``.

The API expects ``param_list`` as a JSON document encoded into a string,
holding ``{"key": ..., "value": ...}`` pairs. Each variant knows its own
wire names; the extension's ``request_type`` picks the variant when decoding.
"""

from __future__ import annotations

import json
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, List, Tuple, Type

from pydantic import Field

from .models import Amount, WireModel
from .securehash import to_canonical_string


class PaymentType(str, Enum):
    BILLPAYMENT = "BILLPAYMENT"
    TOKEN = "TOKEN"
    DOMESTIC = "DOMESTIC"
    INTERBANK = "INTERBANK"
    INTEBBANKIA = "INTEBBANKIA"
    AIRTIMETOPUP = "AIRTIMETOPUP"
    MOMO = "MOMO"

    def __str__(self) -> str:
        return self.value


class FormData(WireModel):
    field_name: str = Field("", alias="fieldName")
    field_value: str = Field("", alias="fieldValue")


class PaymentParams(WireModel):
    payment_types: ClassVar[Tuple[PaymentType, ...]] = ()

    def to_param_list(self) -> str:
        items = []
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if isinstance(value, list):
                wire: Any = [v.to_wire() if isinstance(v, WireModel) else v for v in value]
            else:
                wire = to_canonical_string(value)
            items.append({"key": info.alias or name, "value": wire})
        return json.dumps(items, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_param_list(cls, text: str) -> "PaymentParams":
        items = json.loads(text)
        if not isinstance(items, list):
            raise ValueError("param_list must encode a list of key/value pairs")
        data: Dict[str, Any] = {}
        for item in items:
            if not isinstance(item, dict) or "key" not in item:
                raise ValueError(f"malformed param_list entry: {item!r}")
            data[item["key"]] = item.get("value")
        return cls.model_validate(data)


class DomesticTransferParams(PaymentParams):
    payment_types: ClassVar[Tuple[PaymentType, ...]] = (PaymentType.DOMESTIC,)

    credit_account_no: str = Field("", alias="creditAccountNo")
    debit_account_branch: str = Field("", alias="debitAccountBranch")
    debit_account_type: str = Field("", alias="debitAccountType")
    credit_account_branch: str = Field("", alias="creditAccountBranch")
    credit_account_type: str = Field("", alias="creditAccountType")
    amount: Amount = Field(Decimal(0), alias="amount")
    currency: str = Field("", alias="ccy")


class TokenTransferParams(PaymentParams):
    payment_types: ClassVar[Tuple[PaymentType, ...]] = (PaymentType.TOKEN,)

    transaction_description: str = Field("", alias="transactionDescription")
    secret_code: str = Field("", alias="secretCode")
    source_account: str = Field("", alias="sourceAccount")
    source_account_currency: str = Field("", alias="sourceAccountCurrency")
    source_account_type: str = Field("", alias="sourceAccountType")
    sender_name: str = Field("", alias="senderName")
    currency: str = Field("", alias="ccy")
    sender_mobile_no: str = Field("", alias="senderMobileNo")
    amount: Amount = Field(Decimal(0), alias="amount")
    sender_id: str = Field("", alias="senderId")
    beneficiary_name: str = Field("", alias="beneficiaryName")
    beneficiary_mobile_no: str = Field("", alias="beneficiaryMobileNo")
    withdrawal_channel: str = Field("", alias="withdrawalChannel")


class InterbankTransferParams(PaymentParams):
    payment_types: ClassVar[Tuple[PaymentType, ...]] = (PaymentType.INTERBANK, PaymentType.INTEBBANKIA)

    destination_bank_code: str = Field("", alias="destinationBankCode")
    sender_name: str = Field("", alias="senderName")
    sender_address: str = Field("", alias="senderAddress")
    sender_phone: str = Field("", alias="senderPhone")
    beneficiary_account_no: str = Field("", alias="beneficiaryAccountNo")
    beneficiary_name: str = Field("", alias="beneficiaryName")
    beneficiary_phone: str = Field("", alias="beneficiaryPhone")
    transfer_reference_no: str = Field("", alias="transferReferenceNo")
    amount: Amount = Field(Decimal(0), alias="amount")
    currency: str = Field("", alias="ccy")
    transfer_type: str = Field("", alias="transferType")


class BillerParams(PaymentParams):
    biller_code: str = Field("", alias="billerCode")
    bill_ref_no: str = Field("", alias="billRefNo")
    cba_ref_no: str = Field("", alias="cbaRefNo")
    customer_name: str = Field("", alias="customerName")
    customer_ref_no: str = Field("", alias="customerRefNo")
    product_code: str = Field("", alias="productCode")
    form_data_value: List[FormData] = Field(default_factory=list, alias="formDataValue")


class BillPaymentParams(BillerParams):
    payment_types: ClassVar[Tuple[PaymentType, ...]] = (PaymentType.BILLPAYMENT,)


class AirtimeTopupParams(BillerParams):
    payment_types: ClassVar[Tuple[PaymentType, ...]] = (PaymentType.AIRTIMETOPUP,)


class MomoParams(BillerParams):
    payment_types: ClassVar[Tuple[PaymentType, ...]] = (PaymentType.MOMO,)


PARAMS_BY_TYPE: Dict[PaymentType, Type[PaymentParams]] = {
    t: cls
    for cls in (
        DomesticTransferParams,
        TokenTransferParams,
        InterbankTransferParams,
        BillPaymentParams,
        AirtimeTopupParams,
        MomoParams,
    )
    for t in cls.payment_types
}


def params_for(request_type: Any) -> Type[PaymentParams]:
    try:
        return PARAMS_BY_TYPE[PaymentType(request_type)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"unsupported payment type: {request_type!r}") from exc
