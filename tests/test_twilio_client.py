"""Tests for the Twilio call client wrapper.

The SDK client is replaced by a MagicMock; no network access.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import requests
from twilio.base.exceptions import TwilioException, TwilioRestException

from twilio_calls.call_service.twilio_client import TwilioCallClient
from twilio_calls.shared.config import TwilioConfig
from twilio_calls.shared.models import CallsFetched, CallsUnavailable


def rest_error(status: int) -> TwilioRestException:
    return TwilioRestException(
        status=status,
        uri="/2010-04-01/Accounts/AC_TEST_ACCOUNT_SID/Calls.json",
        msg="Authenticate" if status == 401 else "Server error",
        code=20003 if status == 401 else None,
    )


class TestClientConstruction:
    def test_sdk_client_is_built_lazily(self, twilio_client, client_factory) -> None:
        client_factory.assert_not_called()

        twilio_client.fetch_calls()

        client_factory.assert_called_once_with("AC_TEST_ACCOUNT_SID", "test_auth_token_12345")

    def test_sdk_client_is_reused(self, twilio_client, client_factory) -> None:
        twilio_client.fetch_calls()
        twilio_client.fetch_calls()

        client_factory.assert_called_once()

    def test_from_config_unwraps_secrets(self) -> None:
        config = TwilioConfig(account_sid="AC_CONFIGURED", auth_token="configured-token")

        client = TwilioCallClient.from_config(config)

        assert client.account_sid == "AC_CONFIGURED"
        assert client.auth_token == "configured-token"


class TestFetchCalls:
    def test_returns_records_in_api_order(self, twilio_client, sdk_client, call_instance_factory) -> None:
        sdk_client.calls.list.return_value = [
            call_instance_factory(sid=f"CA{index:032d}", price="-0.0150")
            for index in range(3)
        ]

        result = twilio_client.fetch_calls()

        assert isinstance(result, CallsFetched)
        assert [record.sid for record in result.records] == [f"CA{index:032d}" for index in range(3)]
        assert result.records[0].price == Decimal("-0.0150")
        sdk_client.calls.list.assert_called_once_with()

    def test_empty_account(self, twilio_client) -> None:
        result = twilio_client.fetch_calls()

        assert isinstance(result, CallsFetched)
        assert result.records == []

    def test_unpriced_call(self, twilio_client, sdk_client, call_instance_factory) -> None:
        sdk_client.calls.list.return_value = [call_instance_factory(price=None, price_unit=None)]

        record = twilio_client.fetch_calls().records[0]

        assert record.price is None
        assert record.price_unit is None

    @pytest.mark.parametrize("status", [401, 403])
    def test_rejected_credentials(self, twilio_client, sdk_client, status: int) -> None:
        sdk_client.calls.list.side_effect = rest_error(status)

        result = twilio_client.fetch_calls()

        assert isinstance(result, CallsUnavailable)
        assert result.status_code == status

    def test_client_cannot_be_built(self, call_instance_factory) -> None:
        factory = MagicMock(side_effect=TwilioException("Credentials are required to create a TwilioClient"))
        client = TwilioCallClient("", "", client_factory=factory)

        result = client.fetch_calls()

        assert isinstance(result, CallsUnavailable)
        assert "Credentials are required" in result.reason
        assert result.status_code is None

    def test_api_unreachable(self, twilio_client, sdk_client) -> None:
        sdk_client.calls.list.side_effect = requests.exceptions.ConnectionError("Name or service not known")

        result = twilio_client.fetch_calls()

        assert isinstance(result, CallsUnavailable)

    def test_other_rest_errors_propagate(self, twilio_client, sdk_client) -> None:
        sdk_client.calls.list.side_effect = rest_error(500)

        with pytest.raises(TwilioRestException):
            twilio_client.fetch_calls()

    def test_read_timeout_propagates(self, twilio_client, sdk_client) -> None:
        sdk_client.calls.list.side_effect = requests.exceptions.ReadTimeout("timed out")

        with pytest.raises(requests.exceptions.ReadTimeout):
            twilio_client.fetch_calls()
