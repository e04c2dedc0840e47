"""
Configuration, constants, and logging setup.
"""

import os
import logging

from dotenv import load_dotenv

from models import WatchSettings

# --- LOAD ENV ---
load_dotenv()

# --- LOGGING ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("json_autovalidator")


def log_event(level: int, message: str, **data):
    """Lightweight structured logging helper."""
    try:
        serialized = " | ".join(f"{k}={v}" for k, v in data.items())
        logger.log(level, f"{message}{' | ' + serialized if serialized else ''}")
    except Exception:
        logger.log(level, message)


# --- CONSTANTS ---
DEBOUNCE_SECONDS = float(os.getenv("DEBOUNCE_SECONDS", 5))
SETTLE_SECONDS = float(os.getenv("SETTLE_SECONDS", 1))
RETRY_DELAY_SECONDS = float(os.getenv("RETRY_DELAY_SECONDS", 5))
MAX_RETRIES = int(os.getenv("MAX_RETRIES", 5))
MAX_EDITS = int(os.getenv("MAX_EDITS", 64))

# Artifact left behind by serializers that emit absent values
UNDEFINED_ARTIFACT = "undefined,"


def settings_from_env() -> WatchSettings:
    """Build watch settings from the environment-backed constants."""
    return WatchSettings(
        debounce_seconds=DEBOUNCE_SECONDS,
        settle_seconds=SETTLE_SECONDS,
        retry_delay_seconds=RETRY_DELAY_SECONDS,
        max_retries=MAX_RETRIES,
        max_edits=MAX_EDITS,
    )


DEFAULT_SETTINGS = settings_from_env()
