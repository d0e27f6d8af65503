import logging
from typing import Optional, Callable, Any

import requests
from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.rest import Client

from ..shared.config import TwilioConfig
from ..shared.models import CallRecord, CallsFetched, CallsUnavailable, FetchResult

# REST status codes that mean the credentials were rejected
CREDENTIAL_STATUS_CODES = (401, 403)

class TwilioCallClient:
    """Client for reading call records from the Twilio API"""

    def __init__(self, account_sid: str, auth_token: str,
                 client_factory: Optional[Callable[[str, str], Any]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the Twilio client wrapper

        The SDK client is only built on the first request.

        Args:
            account_sid (str): Twilio account SID
            auth_token (str): Twilio auth token
            client_factory (callable, optional): Builds the SDK client from the two credentials.
                Defaults to ``twilio.rest.Client``.
            logger (logging.Logger, optional): Logger to use. Defaults to None.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.client_factory = client_factory or Client
        self._client = None

    @classmethod
    def from_config(cls, config: TwilioConfig, logger: Optional[logging.Logger] = None) -> "TwilioCallClient":
        """
        Create a client from validated configuration

        Args:
            config (TwilioConfig): Twilio credentials
            logger (logging.Logger, optional): Logger to use. Defaults to None.

        Returns:
            TwilioCallClient: Client wrapper, not yet connected
        """
        return cls(
            account_sid=config.account_sid.get_secret_value(),
            auth_token=config.auth_token.get_secret_value(),
            logger=logger
        )

    @property
    def client(self):
        """SDK client, built on first access"""
        if self._client is None:
            self._client = self.client_factory(self.account_sid, self.auth_token)
        return self._client

    def fetch_calls(self) -> FetchResult:
        """
        Get all call records of the account in one request

        The SDK follows the pagination links itself; the returned records keep
        the order of the API response.

        Returns:
            FetchResult: ``CallsFetched`` with the records, or ``CallsUnavailable``
            when the credentials were rejected or the API could not be reached
        """
        try:
            self.logger.debug("Requesting call records from Twilio")
            calls = self.client.calls.list()
        except TwilioRestException as e:
            if e.status not in CREDENTIAL_STATUS_CODES:
                raise
            self.logger.info(f"Twilio rejected the credentials: {e.status} - {e.msg}")
            return CallsUnavailable(reason=str(e.msg), status_code=e.status)
        except TwilioException as e:
            self.logger.info(f"Unable to create Twilio client: {e}")
            return CallsUnavailable(reason=str(e))
        except requests.exceptions.ConnectionError as e:
            self.logger.info(f"Unable to reach the Twilio API: {e}")
            return CallsUnavailable(reason=str(e))

        records = [CallRecord.from_instance(call) for call in calls]
        self.logger.info(f"Retrieved {len(records)} call records")
        return CallsFetched(records=records)
