"""Configuration management for the llapctl application."""
import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    """Process-wide settings with sensible defaults."""

    # Program name shown in usage text
    PROG_NAME: str = os.getenv("LLAP_PROG_NAME", "llap")

    # Logging
    LOG_LEVEL: str = os.getenv("LLAP_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv(
        "LLAP_LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Launcher hand-off
    HANDOFF_FILENAME: str = os.getenv("LLAP_HANDOFF_FILENAME", "llap-config.json")

    # Security
    REDACT_KEYS: tuple = ("password", "secret", "token", "keytab", "principal")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"Unknown log level: {cls.LOG_LEVEL}")
        if not cls.HANDOFF_FILENAME:
            raise ValueError("Missing required configuration: LLAP_HANDOFF_FILENAME")

# Don't validate on import to allow for dynamic configuration
# Call Config.validate() explicitly when needed
