from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from ecobank import (
    AirtimeTopupParams,
    BillPaymentParams,
    Client,
    DomesticTransferParams,
    FormData,
    InterbankTransferParams,
    MomoParams,
    PaymentExtension,
    PaymentHeader,
    PaymentOptions,
    ResponseError,
    Time,
    TokenTransferParams,
)


def build_payment() -> PaymentOptions:
    return PaymentOptions(
        payment_header=PaymentHeader(
            client_id="EGHTelc000043",
            batch_sequence="1",
            batch_amount=Decimal(520),
            transaction_amount=Decimal(520),
            batch_id="EG1593490",
            transaction_count=6,
            batch_count=6,
            transaction_id="E12T443308",
            debit_type="Multiple",
            affiliate_code="EGH",
            total_batches="1",
            execution_date=Time(datetime(2020, 6, 1)),
        ),
        extension=[
            PaymentExtension(
                request_id="2323",
                param_list=DomesticTransferParams(
                    credit_account_no="1441001996321",
                    debit_account_branch="ACCRA",
                    debit_account_type="Corporate",
                    credit_account_branch="Accra",
                    credit_account_type="Corporate",
                    amount=Decimal(10),
                    currency="GHS",
                ),
                amount=Decimal(10),
                currency="GHS",
                rate_type="spot",
            ),
            PaymentExtension(
                request_id="432",
                param_list=TokenTransferParams(
                    transaction_description="Service payment for electrical repairs.",
                    secret_code="AWER1234",
                    source_account="1441000565307",
                    source_account_currency="GHS",
                    source_account_type="Corporate",
                    sender_name="Freeman Kay",
                    currency="GHS",
                    sender_mobile_no="0202205113",
                    amount=Decimal(40),
                    sender_id="QWE345Y4",
                    beneficiary_name="Stephen Kojo",
                    beneficiary_mobile_no="0233445566",
                    withdrawal_channel="ATM",
                ),
                amount=Decimal(40),
                currency="GHS",
                rate_type="spot",
            ),
            PaymentExtension(
                request_id="2325",
                param_list=InterbankTransferParams(
                    destination_bank_code="ASB",
                    sender_name="BEN",
                    sender_address="23 Accra Central",
                    sender_phone="233263653712",
                    beneficiary_account_no="110424812001",
                    beneficiary_name="Owen",
                    beneficiary_phone="233543837123",
                    transfer_reference_no="QWE345Y4",
                    amount=Decimal(10),
                    currency="GHS",
                    transfer_type="spot",
                ),
                amount=Decimal(10),
                currency="GHS",
                rate_type="spot",
            ),
            PaymentExtension(
                request_id="ECI55096987905",
                param_list=BillPaymentParams(
                    biller_code="Pass_Bio_ECI",
                    bill_ref_no="239729",
                    customer_name="Freeman Kay",
                    customer_ref_no="239729",
                    product_code="PassBio",
                    form_data_value=[
                        FormData(field_name="LastName", field_value="Kojo"),
                        FormData(field_name="FirstName", field_value="Kwame"),
                        FormData(field_name="Amount", field_value="300"),
                        FormData(field_name="Phone", field_value="225543756765"),
                    ],
                ),
                amount=Decimal(300),
                currency="GHS",
                rate_type="spot",
            ),
            PaymentExtension(
                request_id="WQ5500098663046",
                param_list=AirtimeTopupParams(
                    biller_code="A02E",
                    bill_ref_no="81729",
                    customer_name="Owen Kay",
                    customer_ref_no="824225",
                    product_code="A02E",
                    form_data_value=[FormData(field_name="BEN_PHONE_NO", field_value="2348034830707")],
                ),
                amount=Decimal(10),
                currency="NGN",
                rate_type="spot",
            ),
            PaymentExtension(
                request_id="1234BBY8SXZX",
                param_list=MomoParams(
                    biller_code="AIRTELTIGOEGH",
                    bill_ref_no="2988759",
                    cba_ref_no="05609",
                    customer_name="Owen Kay",
                    customer_ref_no="824225",
                    product_code="AIRTELTIGO_MOBILEMONEY",
                    form_data_value=[FormData(field_name="BEN_PHONE_NO", field_value="0560000159")],
                ),
                amount=Decimal(150),
                currency="GHS",
                rate_type="spot",
            ),
        ],
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    with Client.from_settings() as client:
        client.login()
        try:
            out, resp = client.payment.pay(build_payment())
        except ResponseError as err:
            for message in err:
                print("error:", message)
            raise SystemExit(1)
        print("Code:", resp.code)
        print("Message:", resp.message)
        print(out)


if __name__ == "__main__":
    main()
