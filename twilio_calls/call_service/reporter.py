import logging
from typing import Optional

from ..shared.config import DEFAULT_LOCALE, AppConfig
from ..shared.models import ExitCode, CallsUnavailable

from .console import Console
from .formatting import TABLE_HEADERS, to_display_row
from .twilio_client import TwilioCallClient

class CallListReporter:
    """Prints the calls of a Twilio account as a table"""

    def __init__(self, client: TwilioCallClient, console: Optional[Console] = None,
                 locale: str = DEFAULT_LOCALE, logger: Optional[logging.Logger] = None):
        """
        Initialize the reporter

        Args:
            client (TwilioCallClient): Source of the call records
            console (Console, optional): Output streams. Defaults to the process stdout/stderr.
            locale (str, optional): Locale used to format prices. Defaults to "en_US".
            logger (logging.Logger, optional): Logger to use. Defaults to None.
        """
        self.client = client
        self.console = console or Console()
        self.locale = locale
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: AppConfig, console: Optional[Console] = None,
                    locale: Optional[str] = None,
                    logger: Optional[logging.Logger] = None) -> "CallListReporter":
        """
        Create a reporter with a Twilio client built from configuration

        Args:
            config (AppConfig): Application configuration
            console (Console, optional): Output streams
            locale (str, optional): Overrides the configured locale
            logger (logging.Logger, optional): Logger to use

        Returns:
            CallListReporter: Reporter ready to run
        """
        return cls(
            client=TwilioCallClient.from_config(config.twilio, logger=logger),
            console=console,
            locale=locale or config.reporter.locale,
            logger=logger
        )

    def run(self, short_date: bool = False) -> ExitCode:
        """
        Fetch the account's calls and print them

        Args:
            short_date (bool): Display all dates in the short form

        Returns:
            ExitCode: SUCCESS, or FAILURE when the calls could not be retrieved
        """
        result = self.client.fetch_calls()
        if isinstance(result, CallsUnavailable):
            self.console.error("Unable to retrieve calls from your account")
            return ExitCode.FAILURE

        calls = result.records
        if not calls:
            self.console.info("No calls are available on your account")

        rows = [to_display_row(call, short_date=short_date, locale=self.locale) for call in calls]
        self.logger.debug(f"Formatted {len(rows)} rows with locale {self.locale}")

        self.console.info("The current list of calls available on your account:")
        self.console.table(TABLE_HEADERS, rows)
        self.console.info(f"Total calls: {len(calls)}")

        return ExitCode.SUCCESS
