"""
Pytest configuration and fixtures for the call reporter tests.
"""
import io
import os
import sys
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from twilio_calls.call_service.console import Console
from twilio_calls.call_service.twilio_client import TwilioCallClient


def make_call_instance(sid="CA00000000000000000000000000000001", status="completed",
                       price="-1.50", price_unit="USD", to="+14155551234",
                       date_created=None, start_time=None, end_time=None):
    """Build an object shaped like twilio's CallInstance"""
    created = date_created or datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)
    return SimpleNamespace(
        sid=sid,
        date_created=created,
        to=to,
        status=status,
        start_time=start_time or datetime(2024, 1, 15, 10, 30, 5, tzinfo=timezone.utc),
        end_time=end_time or datetime(2024, 1, 15, 10, 32, 45, tzinfo=timezone.utc),
        price=price,
        price_unit=price_unit,
    )


@pytest.fixture
def call_instance_factory():
    return make_call_instance


@pytest.fixture
def sdk_client():
    """Mock twilio.rest.Client with an empty call list"""
    client = MagicMock()
    client.calls.list.return_value = []
    return client


@pytest.fixture
def client_factory(sdk_client):
    return MagicMock(return_value=sdk_client)


@pytest.fixture
def twilio_client(client_factory) -> TwilioCallClient:
    return TwilioCallClient(
        account_sid="AC_TEST_ACCOUNT_SID",
        auth_token="test_auth_token_12345",
        client_factory=client_factory,
    )


@pytest.fixture
def console():
    return Console(stdout=io.StringIO(), stderr=io.StringIO())


@pytest.fixture
def twilio_env(monkeypatch):
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC_TEST_ACCOUNT_SID")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "test_auth_token_12345")
    monkeypatch.delenv("TWILIO_CALLS_LOCALE", raising=False)
    monkeypatch.delenv("TWILIO_CALLS_LOG_LEVEL", raising=False)


@pytest.fixture
def empty_env(monkeypatch):
    for name in ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN",
                 "TWILIO_CALLS_LOCALE", "TWILIO_CALLS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
