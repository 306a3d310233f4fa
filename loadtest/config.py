"""
Configuration and utilities for the load-test steps.

This module provides shared configuration and helper functions
used by the steps and the command line runner.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# ============================================
# API CONFIGURATION
# ============================================
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8081")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "30"))
AUTH_TOKEN = os.getenv("AUTH_TOKEN")


# ============================================
# SUBSCRIPTION STEP CONFIGURATION
# ============================================
APPLICATION_ID = os.getenv("APPLICATION_ID")
TARGET_URL = os.getenv("TARGET_URL")


def parse_event_types(raw: str) -> List[str]:
    """Split a comma separated list of event types, dropping blanks."""
    return [item.strip() for item in raw.split(",") if item.strip()]


EVENT_TYPES = parse_event_types(os.getenv("EVENT_TYPES", ""))


# ============================================
# LOGGING
# ============================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# ============================================
# HELPER FUNCTIONS
# ============================================

def validate_config(
    auth_token: str = None,
    application_id: str = None,
    event_types: List[str] = None,
    target_url: str = None,
) -> dict:
    """
    Validate that all required configuration is present.

    Arguments left as None fall back to the values loaded from the
    environment.

    Returns:
        dict: Configuration status with warnings and errors
    """
    auth_token = auth_token if auth_token is not None else AUTH_TOKEN
    application_id = application_id if application_id is not None else APPLICATION_ID
    event_types = event_types if event_types is not None else EVENT_TYPES
    target_url = target_url if target_url is not None else TARGET_URL

    status = {
        "valid": True,
        "errors": [],
        "warnings": []
    }

    if not auth_token:
        status["errors"].append("AUTH_TOKEN not configured in .env")
        status["valid"] = False
    elif not auth_token.startswith("Bearer "):
        status["warnings"].append(
            "AUTH_TOKEN has no 'Bearer ' prefix - it is sent verbatim"
        )

    if not application_id:
        status["errors"].append("APPLICATION_ID not configured in .env")
        status["valid"] = False

    if not event_types:
        status["errors"].append("EVENT_TYPES not configured in .env")
        status["valid"] = False

    if not target_url:
        status["errors"].append("TARGET_URL not configured in .env")
        status["valid"] = False

    return status


def mask_token(token: str) -> str:
    """Mask all but the edges of a token for display."""
    if not token:
        return "✗ Not configured"
    if len(token) <= 12:
        return "*" * len(token)
    return f"{token[:8]}...{token[-4:]}"


def print_config(
    api_url: str = None,
    auth_token: str = None,
    application_id: str = None,
    event_types: List[str] = None,
    target_url: str = None,
):
    """
    Print the configuration in use (with sensitive values masked).

    Arguments left as None fall back to the values loaded from the
    environment.
    """
    api_url = api_url if api_url is not None else API_BASE_URL
    auth_token = auth_token if auth_token is not None else AUTH_TOKEN
    application_id = application_id if application_id is not None else APPLICATION_ID
    event_types = event_types if event_types is not None else EVENT_TYPES
    target_url = target_url if target_url is not None else TARGET_URL

    print("\n" + "="*60)
    print("CONFIGURATION")
    print("="*60)
    print(f"API Base URL:        {api_url}")
    print(f"API Timeout:         {API_TIMEOUT}s")
    print(f"Auth Token:          {mask_token(auth_token)}")
    print(f"Application ID:      {application_id or '✗ Not configured'}")
    print(f"Event Types:         {len(event_types)} configured")
    print(f"Target URL:          {target_url or '✗ Not configured'}")
    print(f"Log Level:           {LOG_LEVEL}")
    print("="*60 + "\n")


if __name__ == "__main__":
    print_config()

    status = validate_config()
    if status["errors"]:
        print("❌ ERRORS:")
        for error in status["errors"]:
            print(f"   - {error}")

    if status["warnings"]:
        print("⚠️  WARNINGS:")
        for warning in status["warnings"]:
            print(f"   - {warning}")

    if status["valid"]:
        print("✓ Configuration is valid!")
    else:
        print("❌ Configuration is invalid - the step will not run")
