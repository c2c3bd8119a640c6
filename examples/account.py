from __future__ import annotations

import json
import logging
from datetime import datetime

from ecobank import (
    AccountBalanceOptions,
    AccountEnquiryOptions,
    AccountEnquiryThirdPartyOptions,
    Client,
    Date,
    GenerateStatementOptions,
)


def show(result, resp) -> None:
    print("Code:", resp.code)
    print("Message:", resp.message)
    if isinstance(result, list):
        print(json.dumps([r.to_wire() for r in result], indent=2))
    else:
        print(json.dumps(result.to_wire(), indent=2))
    print()


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    # ECOBANK_USERNAME, ECOBANK_PASSWORD and ECOBANK_LAB_KEY
    with Client.from_settings() as client:
        client.login()

        show(*client.account.get_balance(AccountBalanceOptions(
            request_id="14232436312",
            affiliate_code="EGH",
            account_no="6500184371",
            client_id="ECO00184371123",
            company_name="ECOBANK TEST CO",
        )))

        show(*client.account.enquiry(AccountEnquiryOptions(
            request_id="14232436312",
            affiliate_code="EGH",
            account_no="1441000574000",
            client_id="ECO00184371123",
            company_name="ECOBANK TEST CO",
        )))

        show(*client.account.enquiry_third_party(AccountEnquiryThirdPartyOptions(
            request_id="726262198272",
            affiliate_code="EGH",
            account_no="1020820171412",
            destination_bank_code="300315",
            client_id="EC06500184371123",
            company_name="Ecobanker",
        )))

        show(*client.account.generate_statement(GenerateStatementOptions(
            request_id="123456",
            client_id="ZEEPAY",
            affiliate_code="EGH",
            corporate_id="OMNI",
            account_number="1441000574000",
            start_date=Date(datetime(2020, 3, 1)),
            end_date=Date(datetime(2020, 3, 16)),
        )))


if __name__ == "__main__":
    main()
