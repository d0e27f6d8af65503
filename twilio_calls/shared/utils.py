import sys
import logging
from datetime import datetime
from email.utils import format_datetime
from pathlib import Path
from typing import Optional

SHORT_DATE_FORMAT = '%d/%m/%Y %H:%M'

# Configure logging
def setup_logging(service_name, log_level=logging.INFO, log_file=None):
    """
    Configure logging with consistent format and handlers

    Console output goes to stderr so that it never mixes with the report
    printed on stdout.

    Args:
        service_name (str): Name of the service for the logger
        log_level (int): Logging level (default: logging.INFO)
        log_file (str, optional): Also write the log to this file

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(service_name)

    # Check if logger already has handlers to avoid duplicate output
    if logger.handlers:
        logger.setLevel(log_level)
        return logger

    logger.setLevel(log_level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

# Text utilities
def capitalize_first(text):
    """
    Upper-case the first character and leave the rest untouched.
    E.g., in-progress -> In-progress, IN-PROGRESS -> IN-PROGRESS

    Args:
        text (str): Text to capitalize

    Returns:
        str: Capitalized text
    """
    if not text:
        return text
    return text[:1].upper() + text[1:]

# Date utilities
def format_timestamp(value: Optional[datetime], short_date: bool = False) -> str:
    """
    Render a timestamp in the short form or as an RFC 2822 date

    Args:
        value (datetime, optional): Timestamp to render
        short_date (bool): Use the day/month/year hour:minute form

    Returns:
        str: Rendered timestamp, or an empty string when there is none
    """
    if value is None:
        return ""
    if short_date:
        return value.strftime(SHORT_DATE_FORMAT)
    return format_datetime(value)
