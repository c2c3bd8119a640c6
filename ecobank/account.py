from __future__ import annotations

import threading
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional, Tuple

from pydantic import Field

from .models import Amount, HostHeaderInfo, SecureHashOption, WireModel
from .response import Response
from .times import Date, Time

if TYPE_CHECKING:
    from .client import Client


class AccountBalanceOptions(SecureHashOption):
    request_id: str = Field("", alias="requestId")
    affiliate_code: str = Field("", alias="affiliateCode")
    account_no: str = Field("", alias="accountNo")
    client_id: str = Field("", alias="clientId")
    company_name: str = Field("", alias="companyName")


class AccountBalance(WireModel):
    host_header_info: HostHeaderInfo = Field(default_factory=HostHeaderInfo, alias="hostHeaderInfo")
    account_no: str = Field("", alias="accountNo")
    response_code: str = Field("", alias="responseCode")
    response_message: str = Field("", alias="responseMessage")
    account_name: str = Field("", alias="accountName")
    currency: str = Field("", alias="ccy")
    branch_code: str = Field("", alias="branchCode")
    customer_id: str = Field("", alias="customerID")
    available_balance: Amount = Field(Decimal(0), alias="availableBalance")
    current_balance: Amount = Field(Decimal(0), alias="currentBalance")
    overdraft_limit: Amount = Field(Decimal(0), alias="odlimit")
    account_type: str = Field("", alias="accountType")
    account_class: str = Field("", alias="accountClass")
    account_status: str = Field("", alias="accountStatus")


class AccountEnquiryOptions(SecureHashOption):
    request_id: str = Field("", alias="requestId")
    affiliate_code: str = Field("", alias="affiliateCode")
    account_no: str = Field("", alias="accountNo")
    client_id: str = Field("", alias="clientId")
    company_name: str = Field("", alias="companyName")


class AccountEnquiry(WireModel):
    account_no: str = Field("", alias="accountNo")
    account_name: str = Field("", alias="accountName")
    currency: str = Field("", alias="ccy")
    account_status: str = Field("", alias="accountStatus")
    response_code: str = Field("", alias="responseCode")
    response_message: str = Field("", alias="responseMessage")
    affiliate_code: str = Field("", alias="affiliateCode")
    request_id: str = Field("", alias="requestId")
    source_code: str = Field("", alias="sourceCode")


class AccountEnquiryThirdPartyOptions(SecureHashOption):
    request_id: str = Field("", alias="requestId")
    affiliate_code: str = Field("", alias="affiliateCode")
    account_no: str = Field("", alias="accountNo")
    destination_bank_code: str = Field("", alias="destinationBankCode")
    client_id: str = Field("", alias="clientId")
    company_name: str = Field("", alias="companyName")


class AccountEnquiryThirdParty(WireModel):
    account_name: str = Field("", alias="accountName")
    account_type: str = Field("", alias="accountType")
    account_status: str = Field("", alias="accountStatus")
    host_header_info: HostHeaderInfo = Field(default_factory=HostHeaderInfo, alias="hostHeaderInfo")


class StatementTransaction(WireModel):
    acc_currency: str = Field("", alias="acccy")
    debit_credit: str = Field("", alias="drcrind")
    ref_number: str = Field("", alias="trnrefno")
    paid_in: str = Field("", alias="paidin")
    paid_out: str = Field("", alias="paidout")
    value_date: Optional[Time] = Field(None, alias="valuedate")
    amount: str = Field("", alias="lcyamount1")
    narrative: str = Field("", alias="narrative")


class GenerateStatementOptions(SecureHashOption):
    corporate_id: str = Field("", alias="corporateId")
    request_id: str = Field("", alias="requestId")
    client_id: str = Field("", alias="clientId")
    affiliate_code: str = Field("", alias="affiliateCode")
    account_number: str = Field("", alias="accountNumber")
    start_date: Optional[Date] = Field(None, alias="startDate")
    end_date: Optional[Date] = Field(None, alias="endDate")


class CreateAccountOptions(SecureHashOption):
    client_id: str = Field("", alias="clientId")
    request_id: str = Field("", alias="requestId")
    affiliate_code: str = Field("", alias="affiliateCode")
    first_name: str = Field("", alias="firstName")
    middle_name: str = Field("", alias="middlename")
    last_name: str = Field("", alias="lastname")
    mobile_no: str = Field("", alias="mobileNo")
    gender: str = Field("", alias="gender")
    identity_no: str = Field("", alias="identityNo")
    identity_type: str = Field("", alias="identityType")
    id_issue_date: str = Field("", alias="iDIssueDate")
    id_expiry_date: str = Field("", alias="iDExpiryDate")
    currency: str = Field("", alias="ccy")
    country: str = Field("", alias="country")
    branch_code: str = Field("", alias="branchCode")
    date_of_birth: str = Field("", alias="dateOfBirth")
    country_of_residence: str = Field("", alias="countryOfResidence")
    email: str = Field("", alias="email")
    street: str = Field("", alias="street")
    city: str = Field("", alias="city")
    state: str = Field("", alias="state")
    image: str = Field("", alias="image")
    signature: str = Field("", alias="signature")


class CreateAccountResponse(WireModel):
    short_name: str = Field("", alias="shortname")
    account_no: str = Field("", alias="accountNo")
    mobile_no: str = Field("", alias="mobileNo")
    track_ref: str = Field("", alias="trackRef")
    client_id: str = Field("", alias="clientId")
    host_header_info: HostHeaderInfo = Field(default_factory=HostHeaderInfo, alias="hostHeaderInfo")


class AccountService:
    """Account services and express account opening."""

    def __init__(self, client: "Client"):
        self._client = client

    def get_balance(
        self, opts: AccountBalanceOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[AccountBalance, Response]:
        return self._client.execute("POST", "merchant/accountbalance", opts, AccountBalance, cancel)

    def enquiry(
        self, opts: AccountEnquiryOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[AccountEnquiry, Response]:
        return self._client.execute("POST", "merchant/accountinquiry", opts, AccountEnquiry, cancel)

    def enquiry_third_party(
        self, opts: AccountEnquiryThirdPartyOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[AccountEnquiryThirdParty, Response]:
        # the misspelt path is the one the API serves
        return self._client.execute("POST", "merchant/accountinquirythridpay", opts, AccountEnquiryThirdParty, cancel)

    def generate_statement(
        self, opts: GenerateStatementOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[List[StatementTransaction], Response]:
        return self._client.execute("POST", "merchant/statement", opts, List[StatementTransaction], cancel)

    def create_account(
        self, opts: CreateAccountOptions, cancel: Optional[threading.Event] = None
    ) -> Tuple[CreateAccountResponse, Response]:
        return self._client.execute("POST", "merchant/createexpressaccount", opts, CreateAccountResponse, cancel)
