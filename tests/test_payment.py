import json
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import httpx
import pytest
from pydantic import ValidationError

from ecobank import (
    BillPaymentParams,
    Client,
    DomesticTransferParams,
    ETokenStatusOptions,
    FormData,
    GetBillerDetailsOptions,
    GetBillerListOptions,
    GetRemitteeAccountOptions,
    InterbankTransferParams,
    ListInstitutionsOptions,
    PaymentExtension,
    PaymentHeader,
    PaymentOptions,
    PaymentType,
    StatusOptions,
    Time,
    TokenTransferParams,
    ValidateBillerOptions,
    compute_secure_hash,
)
from ecobank.payment_params import params_for


def _client(body, seen: dict) -> Client:
    def handler(req: httpx.Request) -> httpx.Response:
        seen["req"] = req
        if isinstance(body, str):
            return httpx.Response(200, content=body.encode(), headers={"Content-Type": "application/json"})
        return httpx.Response(200, json=body)

    c = Client(
        "mock-user",
        "mock-password",
        "mock-lab-key",
        token="mock-token",
        token_expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
    )
    c.http = httpx.Client(transport=httpx.MockTransport(handler))
    return c


def _envelope(content):
    return {
        "response_code": 200,
        "response_message": "success",
        "response_content": content,
        "response_timestamp": "2022-09-23T17:04:43.506",
    }


def _payment_header() -> PaymentHeader:
    return PaymentHeader(
        batch_sequence="1",
        batch_amount=Decimal("520"),
        transaction_amount=Decimal("520"),
        batch_id="EG1593490",
        transaction_count=6,
        batch_count=6,
        transaction_id="E12T443308",
        debit_type="Multiple",
        affiliate_code="EGH",
        total_batches="1",
        execution_date=Time(datetime(2020, 6, 1)),
        client_id="EGHTelc000043",
    )


def test_get_biller_list():
    body = """{
        "response_code": 200,
        "response_message": "success",
        "response_content": {
            "hostHeaderInfo": {
                "sourceCode": "ECOBANKMOBILEAPP",
                "requestId": "ECO2112134345",
                "affiliateCode": "EGH",
                "responseCode": "000",
                "responseMessage": "Success"
            },
            "billerInfo": [
                {
                    "billerCode": "MGC",
                    "billerID": 77427,
                    "billerName": "METHODIST COLLECTION",
                    "billerDescription": "METHODIST COLLECTION",
                    "billerCategory": null,
                    "billerLogo": "/usr/app/Alert/ecobank_banner.jpg",
                    "billAmountType": "",
                    "billAmount": 0,
                    "ccy": "",
                    "collectionAccountNo": "",
                    "aggregatorName": "NEWESB",
                    "amountDenominations": "",
                    "productCodeList": ""
                },
                {
                    "billerCode": "GHWATER",
                    "billerID": 76758,
                    "billerName": "GHANA WATER",
                    "billerDescription": "GHANA WATER",
                    "billerCategory": "ECOBANK",
                    "billerLogo": "/usr/app/Alert/ecobank_banner.jpg",
                    "billAmountType": "",
                    "billAmount": 1,
                    "ccy": "GHS",
                    "collectionAccountNo": "",
                    "aggregatorName": "GHANA WATER",
                    "amountDenominations": "",
                    "productCodeList": ""
                }
            ]
        },
        "response_timestamp": "2022-09-23T17:04:43.506"
    }"""
    seen = {}
    out, _ = _client(body, seen).payment.get_biller_list(
        GetBillerListOptions(request_id="ECO2112134345", affiliate_code="EGH")
    )
    assert seen["req"].url.path == "/corporateapi/payment/getbillerlist"
    assert len(out.biller_info) == 2

    first, second = out.biller_info
    assert first.biller_code == "MGC"
    assert first.biller_id == 77427
    assert first.biller_category == ""
    assert first.aggregator_name == "NEWESB"
    assert first.bill_amount == 0

    assert second.biller_code == "GHWATER"
    assert second.biller_category == "ECOBANK"
    assert second.bill_amount == 1
    assert second.currency == "GHS"

    assert out.host_header_info.source_code == "ECOBANKMOBILEAPP"
    assert out.host_header_info.request_id == "ECO2112134345"
    assert out.host_header_info.response_message == "Success"


def test_get_biller_details():
    content = {
        "billerDetail": {"billerCode": "GHWATER", "billerID": 76758, "billerName": "GHANA WATER", "billAmount": 10.5},
        "billFormData": [
            {"serialNo": 1, "fieldName": "METER NUMBER", "dataType": "STRING", "maxFieldLength": 20, "lookupValue": None}
        ],
        "billerProductInfo": [{"productCode": "02", "productName": "Prepaid", "minAmount": 1, "maxAmount": 1000}],
        "hostHeaderInfo": {"responseCode": "000"},
    }
    seen = {}
    out, _ = _client(_envelope(content), seen).payment.get_biller_details(
        GetBillerDetailsOptions(request_id="ECO76383823", affiliate_code="EGH", biller_code="GHWATER")
    )
    assert seen["req"].url.path == "/corporateapi/merchant/getbillerdetails"
    assert out.biller_info.biller_code == "GHWATER"
    assert out.biller_info.bill_amount == Decimal("10.5")
    assert out.bill_form_data[0].field_name == "METER NUMBER"
    assert out.bill_form_data[0].lookup_value == []
    assert out.biller_product_info[0].max_amount == 1000


def test_validate_biller():
    body = """{
        "response_code": 200,
        "response_message": "success",
        "response_content": {
            "hostHeaderInfo": {
                "sourceCode": "ECOBANKMOBILEAPP",
                "requestId": "0254875943",
                "affiliateCode": "EGH",
                "responseCode": "000",
                "responseMessage": "Success"
            },
            "billerCode": "MTNPTU",
            "billRefNo": "46356262",
            "customerName": "Benson",
            "amount": 0,
            "paymentDescription": "",
            "productCode": "",
            "responseValues": "",
            "formDataValue": [
                {"fieldName": "CHARGE", "fieldDescription": "", "fieldMasked": "", "fieldValue": "100.0", "fieldRequired": "", "dataType": "DOUBLE"},
                {"fieldName": "VAT", "fieldDescription": "", "fieldMasked": "", "fieldValue": "0.0", "fieldRequired": "", "dataType": "DOUBLE"},
                {"fieldName": "TOTAL CHARGE", "fieldDescription": "", "fieldMasked": "", "fieldValue": "100.0", "fieldRequired": "", "dataType": "DOUBLE"}
            ]
        },
        "response_timestamp": "2022-09-23T17:17:53.181"
    }"""
    opts = ValidateBillerOptions(
        request_id="EC12O2134521",
        affiliate_code="EGH",
        biller_code="MTNPTU",
        product_code="02",
        mobile_number="0254875943",
        customer_name="Edu",
        form_data_value=[FormData(field_name="METER NUMBER", field_value="54140081982")],
    )
    seen = {}
    out, _ = _client(body, seen).payment.validate_biller(opts)

    sent = json.loads(seen["req"].content)
    assert seen["req"].url.path == "/corporateapi/merchant/validatebiller"
    assert sent["mobileNnumber"] == "0254875943"
    assert sent["formDataValue"] == [{"fieldName": "METER NUMBER", "fieldValue": "54140081982"}]

    assert out.biller_code == "MTNPTU"
    assert out.bill_ref_no == "46356262"
    assert out.customer_name == "Benson"
    assert out.amount == 0
    assert len(out.form_data_value) == 3
    assert out.form_data_value[0].field_name == "CHARGE"
    assert out.form_data_value[0].field_value == "100.0"
    assert out.form_data_value[2].data_type == "DOUBLE"
    assert out.host_header_info.request_id == "0254875943"


def test_pay_sends_header_hash_and_param_list():
    opts = PaymentOptions(
        payment_header=_payment_header(),
        extension=[
            PaymentExtension(
                request_id="432",
                param_list=DomesticTransferParams(
                    credit_account_no="1441000565001",
                    debit_account_branch="ACCRA",
                    debit_account_type="Corporate",
                    credit_account_branch="Accra",
                    credit_account_type="Corporate",
                    amount=Decimal("10"),
                    currency="GHS",
                ),
                amount=Decimal("10"),
                currency="GHS",
                status="",
                rate_type="spot",
            )
        ],
    )
    seen = {}
    out, resp = _client(_envelope("Payment request received"), seen).payment.pay(opts)
    assert out == "Payment request received"
    assert resp.code == 200

    sent = json.loads(seen["req"].content)
    assert seen["req"].url.path == "/corporateapi/merchant/payment"
    assert sent["secureHash"] == compute_secure_hash(_payment_header(), "mock-lab-key")
    assert sent["paymentHeader"]["execution_date"] == "2020-06-01 00:00:00"
    assert sent["paymentHeader"]["batchamount"] == "520"

    ext = sent["extension"][0]
    assert ext["request_type"] == "DOMESTIC"
    assert isinstance(ext["param_list"], str)
    params = json.loads(ext["param_list"])
    assert {"key": "creditAccountNo", "value": "1441000565001"} in params
    assert {"key": "amount", "value": "10"} in params
    assert {"key": "ccy", "value": "GHS"} in params


def test_payment_extension_decodes_param_list_by_request_type():
    params = InterbankTransferParams(
        destination_bank_code="ASB",
        sender_name="BEN",
        beneficiary_account_no="2000000000",
        amount=Decimal("100.50"),
        currency="GHS",
    )
    wire = PaymentExtension(request_id="1", request_type=PaymentType.INTEBBANKIA, param_list=params).to_wire()
    assert wire["request_type"] == "INTEBBANKIA"

    ext = PaymentExtension.model_validate(wire)
    assert isinstance(ext.param_list, InterbankTransferParams)
    assert ext.param_list.destination_bank_code == "ASB"
    assert ext.param_list.amount == Decimal("100.5")
    assert ext.request_type is PaymentType.INTEBBANKIA


def test_payment_extension_bill_form_data():
    params = BillPaymentParams(
        biller_code="GHWATER",
        customer_ref_no="54140081982",
        form_data_value=[FormData(field_name="METER NUMBER", field_value="54140081982")],
    )
    items = json.loads(params.to_param_list())
    assert {"key": "formDataValue", "value": [{"fieldName": "METER NUMBER", "fieldValue": "54140081982"}]} in items

    back = BillPaymentParams.from_param_list(params.to_param_list())
    assert back.form_data_value[0].field_value == "54140081982"


def test_payment_extension_empty_param_list():
    ext = PaymentExtension.model_validate({"request_id": "1", "request_type": "TOKEN", "param_list": ""})
    assert ext.param_list is None
    assert ext.request_type is PaymentType.TOKEN


def test_payment_extension_rejects_unknown_request_type():
    with pytest.raises(ValidationError):
        PaymentExtension.model_validate({"request_type": "CHEQUE", "param_list": "[]"})


def test_params_for():
    assert params_for("TOKEN") is TokenTransferParams
    assert params_for(PaymentType.INTERBANK) is InterbankTransferParams
    with pytest.raises(ValueError):
        params_for("CHEQUE")


def test_list_institutions():
    content = [
        {"institutionId": "ECOBANKGH", "institutionType": "BANK", "institutionName": "Ecobank Ghana", "countryCode": "GH"},
        {"institutionId": "ECOBANKNG", "institutionType": "BANK", "institutionName": "Ecobank Nigeria", "countryCode": "NG"},
    ]
    seen = {}
    out, _ = _client(_envelope(content), seen).remittance.list_institutions(
        ListInstitutionsOptions(request_id="1", client_id="ECO1", affiliate_code="EGH", destination_country="NG")
    )
    assert seen["req"].url.path == "/corporateapi/merchant/ecobankafrica/institutions"
    assert [i.country_code for i in out] == ["GH", "NG"]


def test_remittee_account():
    content = {"accountStatus": "ACTIVE", "accountName": "ADA", "accountNo": "0011223344", "ccy": "NGN"}
    seen = {}
    out, _ = _client(_envelope(content), seen).remittance.get_account(
        GetRemitteeAccountOptions(request_id="1", account_no="0011223344", destination_country="NG")
    )
    assert seen["req"].url.path == "/corporateapi/merchant/ecobankafrica/account/enquiry"
    assert out.account_name == "ADA"
    assert out.currency == "NGN"


def test_remittance_pay_uses_payment_endpoint():
    seen = {}
    out, _ = _client(_envelope("accepted"), seen).remittance.pay(PaymentOptions(payment_header=_payment_header()))
    assert seen["req"].url.path == "/corporateapi/merchant/payment"
    assert out == "accepted"


def test_transaction_status():
    content = {
        "requestType": "DOMESTIC",
        "affiliateCode": "EGH",
        "amount": 10,
        "currency": "GHS",
        "status": "SUCCESS",
        "statusCode": "000",
        "statusReason": "",
        "transactionRefNo": "E12T443308",
    }
    seen = {}
    out, _ = _client(_envelope(content), seen).status.get_transaction_status(
        StatusOptions(client_id="EGHTelc000043", request_id="E12T443308")
    )
    assert seen["req"].url.path == "/corporateapi/merchant/txns/status"
    assert out.amount == 10
    assert out.status == "SUCCESS"


def test_etoken_status():
    seen = {}
    out, _ = _client(_envelope("PAID"), seen).status.get_etoken_status(
        ETokenStatusOptions(request_id="E12T443308", affiliate_code="EGH")
    )
    assert seen["req"].url.path == "/corporateapi/merchant/etoken/status"
    assert out == "PAID"


def test_amounts_sent_as_hashed():
    header = _payment_header()
    header.batch_amount = Decimal("520.00")
    header.transaction_amount = Decimal("5.2E+2")
    opts = PaymentOptions(
        payment_header=header,
        extension=[PaymentExtension(request_id="1", param_list=DomesticTransferParams(amount=Decimal("10.50")), amount=Decimal("10.50"))],
    )
    seen = {}
    _client(_envelope(""), seen).payment.pay(opts)

    sent = json.loads(seen["req"].content)
    assert sent["paymentHeader"]["batchamount"] == "520"
    assert sent["paymentHeader"]["transactionamount"] == "520"
    assert sent["extension"][0]["amount"] == "10.5"
    assert {"key": "amount", "value": "10.5"} in json.loads(sent["extension"][0]["param_list"])
    assert sent["secureHash"] == compute_secure_hash(_payment_header(), "mock-lab-key")
    assert PaymentHeader().to_wire()["batchamount"] == "0"
