"""
Twilio call reporter.

This package lists the calls of a Twilio account as a formatted table.
"""

__version__ = "1.0.0"

from . import shared
from . import call_service

__all__ = [
    'shared',
    'call_service'
]
