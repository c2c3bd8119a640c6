from .account import (
    AccountBalance,
    AccountBalanceOptions,
    AccountEnquiry,
    AccountEnquiryOptions,
    AccountEnquiryThirdParty,
    AccountEnquiryThirdPartyOptions,
    CreateAccountOptions,
    CreateAccountResponse,
    GenerateStatementOptions,
    StatementTransaction,
)
from .auth import AccessTokenOptions, BearerToken, token_expiry
from .client import (
    DEFAULT_BASE_URL,
    Client,
    RetryConfig,
    Session,
    default_backoff,
    default_check_retry,
    do_request,
)
from .config import EcobankSettings
from .errors import (
    AuthenticationError,
    AuthenticationUnavailableError,
    DecodeError,
    EcobankError,
    RequestCancelledError,
    ResponseError,
    SchemaError,
    SDKError,
    TimeFormatError,
)
from .models import Amount, HostHeaderInfo, SecureHashOption, WireModel
from .payment import (
    BillerDetails,
    BillerInfo,
    BillerList,
    GetBillerDetailsOptions,
    GetBillerListOptions,
    PaymentExtension,
    PaymentHeader,
    PaymentOptions,
    ValidateBillerOptions,
    ValidateBillerResponse,
)
from .payment_params import (
    AirtimeTopupParams,
    BillPaymentParams,
    DomesticTransferParams,
    FormData,
    InterbankTransferParams,
    MomoParams,
    PaymentParams,
    PaymentType,
    TokenTransferParams,
)
from .remittance import (
    GetRemitteeAccountOptions,
    Institution,
    ListInstitutionsOptions,
    RemitteeAccount,
)
from .response import Response, decode_response
from .securehash import (
    HASH_IGNORE,
    NESTED_HEADER,
    compute_secure_hash,
    ensure_secure_hash,
    to_canonical_string,
)
from .status import ETokenStatusOptions, StatusOptions, TransactionStatus
from .times import Date, Time, add_time_format, parse_date, parse_timestamp

__all__ = [
    "AccessTokenOptions",
    "AccountBalance",
    "AccountBalanceOptions",
    "AccountEnquiry",
    "AccountEnquiryOptions",
    "AccountEnquiryThirdParty",
    "AccountEnquiryThirdPartyOptions",
    "AirtimeTopupParams",
    "Amount",
    "AuthenticationError",
    "AuthenticationUnavailableError",
    "BearerToken",
    "BillPaymentParams",
    "BillerDetails",
    "BillerInfo",
    "BillerList",
    "Client",
    "CreateAccountOptions",
    "CreateAccountResponse",
    "DEFAULT_BASE_URL",
    "Date",
    "DecodeError",
    "DomesticTransferParams",
    "ETokenStatusOptions",
    "EcobankError",
    "EcobankSettings",
    "FormData",
    "GenerateStatementOptions",
    "GetBillerDetailsOptions",
    "GetBillerListOptions",
    "GetRemitteeAccountOptions",
    "HASH_IGNORE",
    "HostHeaderInfo",
    "Institution",
    "InterbankTransferParams",
    "ListInstitutionsOptions",
    "MomoParams",
    "NESTED_HEADER",
    "PaymentExtension",
    "PaymentHeader",
    "PaymentOptions",
    "PaymentParams",
    "PaymentType",
    "RemitteeAccount",
    "RequestCancelledError",
    "Response",
    "ResponseError",
    "RetryConfig",
    "SDKError",
    "SchemaError",
    "SecureHashOption",
    "Session",
    "StatementTransaction",
    "StatusOptions",
    "Time",
    "TimeFormatError",
    "TokenTransferParams",
    "TransactionStatus",
    "ValidateBillerOptions",
    "ValidateBillerResponse",
    "WireModel",
    "add_time_format",
    "compute_secure_hash",
    "decode_response",
    "default_backoff",
    "default_check_retry",
    "do_request",
    "ensure_secure_hash",
    "parse_date",
    "parse_timestamp",
    "to_canonical_string",
    "token_expiry",
]
