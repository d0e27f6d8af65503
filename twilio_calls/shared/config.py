import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, SecretStr, validator
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_LOCALE = "en_US"
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

class TwilioConfig(BaseModel):
    """Twilio API credentials"""
    account_sid: SecretStr
    auth_token: SecretStr

    @validator('account_sid', 'auth_token')
    def validate_not_blank(cls, v):
        """Validate that a credential is present"""
        if not v.get_secret_value().strip():
            raise ValueError("Credential is required")
        return v

class ReporterConfig(BaseModel):
    """Call reporter configuration"""
    locale: str = DEFAULT_LOCALE
    log_level: str = "WARNING"

    @validator('log_level')
    def validate_log_level(cls, v):
        """Validate log level"""
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v

class AppConfig(BaseModel):
    """Application configuration"""
    twilio: TwilioConfig
    reporter: ReporterConfig = ReporterConfig()

def _read_config_file(config_path: Optional[str], logger: logging.Logger) -> Dict[str, Any]:
    """
    Read a JSON config file, ignoring a missing or unreadable one

    Args:
        config_path (str, optional): Path to config file
        logger (logging.Logger): Logger to report problems to

    Returns:
        Dict[str, Any]: Parsed file contents, or an empty dict
    """
    if not config_path:
        return {}

    config_file = Path(config_path)
    if not config_file.exists():
        logger.warning(f"Configuration file {config_file} does not exist, using environment only")
        return {}

    try:
        with open(config_file, 'r') as f:
            config_data = json.load(f)
        logger.info(f"Loaded configuration from {config_file}")
        return config_data
    except (OSError, ValueError) as e:
        logger.error(f"Error loading configuration from {config_file}: {e}")
        return {}

def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from environment variables and config file

    Environment variables take precedence over values from the file.

    Args:
        config_path (str, optional): Path to config file

    Returns:
        AppConfig: Application configuration

    Raises:
        pydantic.ValidationError: If the credentials are missing or a value is invalid
    """
    logger = logging.getLogger(__name__)

    config_data = _read_config_file(config_path, logger)
    file_twilio = config_data.get("twilio", {})
    file_reporter = config_data.get("reporter", {})

    twilio_config = {
        "account_sid": os.environ.get("TWILIO_ACCOUNT_SID", file_twilio.get("account_sid", "")),
        "auth_token": os.environ.get("TWILIO_AUTH_TOKEN", file_twilio.get("auth_token", "")),
    }

    reporter_config = {
        "locale": os.environ.get("TWILIO_CALLS_LOCALE", file_reporter.get("locale", DEFAULT_LOCALE)),
        "log_level": os.environ.get("TWILIO_CALLS_LOG_LEVEL", file_reporter.get("log_level", "WARNING")),
    }

    try:
        return AppConfig(twilio=twilio_config, reporter=reporter_config)
    except Exception as e:
        logger.debug(f"Error validating configuration: {e}")
        raise
