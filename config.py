"""Configuration module for the Slack driver service."""
import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Slack credentials
SLACK_TOKEN = os.getenv("SLACK_TOKEN", "")
SLACK_SIGNING_SECRET = os.getenv("SLACK_SIGNING_SECRET", "")

# Outbound HTTP
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Environment (development / production)
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")


def driver_config() -> Dict[str, Any]:
    """Settings mapping handed to drivers; unset keys are left out."""
    settings = {
        "slack_token": SLACK_TOKEN,
        "slack_signing_secret": SLACK_SIGNING_SECRET,
    }
    return {key: value for key, value in settings.items() if value}
