"""
Shared configuration, models and utilities for the Twilio call reporter.
"""

from .utils import (
    setup_logging,
    capitalize_first,
    format_timestamp,
    SHORT_DATE_FORMAT
)

from .models import (
    ExitCode,
    CallRecord,
    DisplayRow,
    CallsFetched,
    CallsUnavailable,
    FetchResult
)

from .config import (
    load_config,
    AppConfig,
    TwilioConfig,
    ReporterConfig
)

__all__ = [
    # Utils
    'setup_logging',
    'capitalize_first',
    'format_timestamp',
    'SHORT_DATE_FORMAT',

    # Models
    'ExitCode',
    'CallRecord',
    'DisplayRow',
    'CallsFetched',
    'CallsUnavailable',
    'FetchResult',

    # Config
    'load_config',
    'AppConfig',
    'TwilioConfig',
    'ReporterConfig'
]
