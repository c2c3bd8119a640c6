import os
import uuid

import pytest

from ecobank import AccountBalanceOptions, Client, EcobankSettings, GetBillerListOptions

ECOBANK_INTEGRATION = os.getenv("ECOBANK_INTEGRATION") == "1"
ECOBANK_AFFILIATE = os.getenv("ECOBANK_AFFILIATE", "EGH")
ECOBANK_ACCOUNT_NO = os.getenv("ECOBANK_ACCOUNT_NO", "6500184371")
ECOBANK_CLIENT_ID = os.getenv("ECOBANK_CLIENT_ID", "ECO00184371123")


def _client() -> Client:
    return Client.from_settings(EcobankSettings())


@pytest.mark.skipif(not ECOBANK_INTEGRATION, reason="set ECOBANK_INTEGRATION=1")
def test_integration_login():
    with _client() as client:
        client.login()
        assert client.session.is_valid()


@pytest.mark.skipif(not ECOBANK_INTEGRATION, reason="set ECOBANK_INTEGRATION=1")
def test_integration_balance():
    with _client() as client:
        out, resp = client.account.get_balance(
            AccountBalanceOptions(
                request_id=uuid.uuid4().hex[:12],
                affiliate_code=ECOBANK_AFFILIATE,
                account_no=ECOBANK_ACCOUNT_NO,
                client_id=ECOBANK_CLIENT_ID,
                company_name="ECOBANK TEST CO",
            )
        )
        assert resp.code == 200
        assert out.account_no


@pytest.mark.skipif(not ECOBANK_INTEGRATION, reason="set ECOBANK_INTEGRATION=1")
def test_integration_biller_list():
    with _client() as client:
        out, _ = client.payment.get_biller_list(
            GetBillerListOptions(request_id=uuid.uuid4().hex[:12], affiliate_code=ECOBANK_AFFILIATE)
        )
        assert out.biller_info
