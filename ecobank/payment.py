from __future__ import annotations

import threading
from decimal import Decimal
from typing import TYPE_CHECKING, Annotated, Any, List, Optional, Tuple

from pydantic import Field, field_serializer, model_validator

from .models import Amount, HostHeaderInfo, SecureHashOption, WireModel
from .payment_params import FormData, PaymentParams, PaymentType, params_for
from .response import Response
from .securehash import HASH_IGNORE, NESTED_HEADER
from .times import Time

if TYPE_CHECKING:
    from .client import Client


class BillerInfo(WireModel):
    biller_code: str = Field("", alias="billerCode")
    biller_id: int = Field(0, alias="billerID")
    biller_name: str = Field("", alias="billerName")
    biller_description: str = Field("", alias="billerDescription")
    biller_category: str = Field("", alias="billerCategory")
    biller_logo: str = Field("", alias="billerLogo")
    bill_amount_type: str = Field("", alias="billAmountType")
    bill_amount: Amount = Field(Decimal(0), alias="billAmount")
    currency: str = Field("", alias="ccy")
    collection_account_no: str = Field("", alias="collectionAccountNo")
    aggregator_name: str = Field("", alias="aggregatorName")
    amount_denominations: str = Field("", alias="amountDenominations")
    product_code_list: str = Field("", alias="productCodeList")


class BillerList(WireModel):
    biller_info: List[BillerInfo] = Field(default_factory=list, alias="billerInfo")
    host_header_info: HostHeaderInfo = Field(default_factory=HostHeaderInfo, alias="hostHeaderInfo")


class GetBillerListOptions(SecureHashOption):
    # corporation ID provisioned for the corporate
    request_id: str = Field("", alias="requestId")
    affiliate_code: str = Field("", alias="affiliateCode")


class GetBillerDetailsOptions(SecureHashOption):
    request_id: str = Field("", alias="requestId")
    affiliate_code: str = Field("", alias="affiliateCode")
    biller_code: str = Field("", alias="billerCode")


class BillFormData(WireModel):
    serial_no: int = Field(0, alias="serialNo")
    field_name: str = Field("", alias="fieldName")
    field_title: str = Field("", alias="fieldTitle")
    data_type: str = Field("", alias="dataType")
    validate_field: str = Field("", alias="validateField")
    default_value: str = Field("", alias="defaultValue")
    max_field_length: int = Field(0, alias="maxFieldLength")
    list_of_values: str = Field("", alias="listofValues")
    lookup_value: List[str] = Field(default_factory=list, alias="lookupValue")


class BillerProductInfo(WireModel):
    product_code: str = Field("", alias="productCode")
    product_name: str = Field("", alias="productName")
    product_description: str = Field("", alias="productDescription")
    product_category: str = Field("", alias="productCategory")
    amount_type: str = Field("", alias="amountType")
    min_amount: Amount = Field(Decimal(0), alias="minAmount")
    max_amount: Amount = Field(Decimal(0), alias="maxAmount")
    currency: str = Field("", alias="ccy")
    exchange_rate: Amount = Field(Decimal(0), alias="exchRate")


class BillerDetail(WireModel):
    biller_code: str = Field("", alias="billerCode")
    biller_id: int = Field(0, alias="billerID")
    biller_name: str = Field("", alias="billerName")
    biller_description: str = Field("", alias="billerDescription")
    biller_category: str = Field("", alias="billerCategory")
    biller_email: str = Field("", alias="billerEmail")
    biller_phone: str = Field("", alias="billerPhone")
    biller_site: str = Field("", alias="billerSite")
    biller_logo: str = Field("", alias="billerLogo")
    bill_amount_type: str = Field("", alias="billAmountType")
    bill_amount: Amount = Field(Decimal(0), alias="billAmount")
    collection_account_no: str = Field("", alias="collectionAccountNo")
    collection_account_name: str = Field("", alias="collectionAccountName")
    collection_account_bank_code: str = Field("", alias="collectionAccountBankCode")
    aggregator_name: str = Field("", alias="aggregatorName")
    validation_required: str = Field("", alias="validationRequired")
    product_list: str = Field("", alias="productList")


class BillerDetails(WireModel):
    biller_info: BillerDetail = Field(default_factory=BillerDetail, alias="billerDetail")
    bill_form_data: List[BillFormData] = Field(default_factory=list, alias="billFormData")
    biller_product_info: List[BillerProductInfo] = Field(default_factory=list, alias="billerProductInfo")
    host_header_info: HostHeaderInfo = Field(default_factory=HostHeaderInfo, alias="hostHeaderInfo")


class FormDataField(WireModel):
    field_name: str = Field("", alias="fieldName")
    field_description: str = Field("", alias="fieldDescription")
    field_masked: str = Field("", alias="fieldMasked")
    field_value: str = Field("", alias="fieldValue")
    field_required: str = Field("", alias="fieldRequired")
    data_type: str = Field("", alias="dataType")


class ValidateBillerOptions(SecureHashOption):
    request_id: str = Field("", alias="requestId")
    affiliate_code: str = Field("", alias="affiliateCode")
    biller_code: str = Field("", alias="billerCode")
    product_code: str = Field("", alias="productCode")
    # the API spells it this way
    mobile_number: str = Field("", alias="mobileNnumber")
    customer_name: str = Field("", alias="customerName")
    form_data_value: Annotated[List[FormData], HASH_IGNORE] = Field(default_factory=list, alias="formDataValue")


class ValidateBillerResponse(WireModel):
    host_header_info: HostHeaderInfo = Field(default_factory=HostHeaderInfo, alias="hostHeaderInfo")
    biller_code: str = Field("", alias="billerCode")
    bill_ref_no: str = Field("", alias="billRefNo")
    customer_name: str = Field("", alias="customerName")
    amount: Amount = Field(Decimal(0), alias="amount")
    payment_description: str = Field("", alias="paymentDescription")
    product_code: str = Field("", alias="productCode")
    response_values: str = Field("", alias="responseValues")
    form_data_value: List[FormDataField] = Field(default_factory=list, alias="formDataValue")


class PaymentHeader(WireModel):
    batch_sequence: str = Field("", alias="batchsequence")
    batch_amount: Amount = Field(Decimal(0), alias="batchamount")
    transaction_amount: Amount = Field(Decimal(0), alias="transactionamount")
    batch_id: str = Field("", alias="batchid")
    transaction_count: int = Field(0, alias="transactioncount")
    batch_count: int = Field(0, alias="batchcount")
    transaction_id: str = Field("", alias="transactionid")
    debit_type: str = Field("", alias="debittype")
    affiliate_code: str = Field("", alias="affiliateCode")
    total_batches: str = Field("", alias="totalbatches")
    execution_date: Optional[Time] = Field(None, alias="execution_date")
    client_id: str = Field("", alias="clientid")


class PaymentExtension(WireModel):
    request_id: str = Field("", alias="request_id")
    request_type: Optional[PaymentType] = Field(None, alias="request_type")
    param_list: Optional[PaymentParams] = Field(None, alias="param_list")
    amount: Amount = Field(Decimal(0), alias="amount")
    currency: str = Field("", alias="currency")
    status: str = Field("", alias="status")
    rate_type: str = Field("", alias="rate_type")

    @model_validator(mode="before")
    @classmethod
    def decode_param_list(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        raw = data.get("param_list")
        if isinstance(raw, str):
            data = dict(data)
            if raw == "":
                data.pop("param_list", None)
            else:
                request_type = data.get("request_type")
                data["param_list"] = params_for(request_type).from_param_list(raw)
        return data

    @model_validator(mode="after")
    def default_request_type(self) -> "PaymentExtension":
        if self.request_type is None and self.param_list is not None and self.param_list.payment_types:
            self.request_type = self.param_list.payment_types[0]
        return self

    @field_serializer("param_list")
    def encode_param_list(self, value: Optional[PaymentParams]) -> str:
        return value.to_param_list() if value is not None else ""


class PaymentOptions(SecureHashOption):
    # only the header feeds the secure hash
    payment_header: Annotated[PaymentHeader, NESTED_HEADER] = Field(default_factory=PaymentHeader, alias="paymentHeader")
    extension: List[PaymentExtension] = Field(default_factory=list, alias="extension")


class PaymentService:
    """Bill payment and fund transfer endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    def get_biller_list(
        self, opts: GetBillerListOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[BillerList, Response]:
        return self._client.execute("POST", "payment/getbillerlist", opts, BillerList, cancel)

    def get_biller_details(
        self, opts: GetBillerDetailsOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[BillerDetails, Response]:
        return self._client.execute("POST", "merchant/getbillerdetails", opts, BillerDetails, cancel)

    def validate_biller(
        self, opts: ValidateBillerOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[ValidateBillerResponse, Response]:
        return self._client.execute("POST", "merchant/validatebiller", opts, ValidateBillerResponse, cancel)

    def pay(self, opts: PaymentOptions, cancel: Optional[threading.Event] = None) -> Tuple[str, Response]:
        return self._client.execute("POST", "merchant/payment", opts, str, cancel)
