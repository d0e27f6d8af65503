"""
Call Service for the Twilio call reporter.

This service retrieves call records from Twilio and prints them as a table.
"""

from .twilio_client import TwilioCallClient
from .console import Console
from .formatting import format_call_price, to_display_row, TABLE_HEADERS
from .reporter import CallListReporter

__all__ = [
    'TwilioCallClient',
    'Console',
    'format_call_price',
    'to_display_row',
    'TABLE_HEADERS',
    'CallListReporter'
]
