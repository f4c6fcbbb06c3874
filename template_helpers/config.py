"""
Configuration management for the template helpers.
Loads settings from environment variables with sensible defaults.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from .helpers import DESC_TRUNCATE_MAX

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Main configuration container."""
    desc_truncate_max_raw: str = field(
        default_factory=lambda: os.getenv("DESC_TRUNCATE_MAX", str(DESC_TRUNCATE_MAX))
    )

    # General settings
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    @property
    def desc_truncate_max(self) -> int:
        """Truncation length for descriptions, falling back to the default when unparseable."""
        try:
            return int(self.desc_truncate_max_raw)
        except ValueError:
            return DESC_TRUNCATE_MAX

    @property
    def effective_log_level(self) -> int:
        """Logging level to configure; DEBUG wins when debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level, logging.INFO)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.log_level not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")

        try:
            truncate_max = int(self.desc_truncate_max_raw)
        except ValueError:
            errors.append(f"DESC_TRUNCATE_MAX must be an integer, got {self.desc_truncate_max_raw!r}")
        else:
            if truncate_max <= 0:
                errors.append(f"DESC_TRUNCATE_MAX must be positive, got {truncate_max}")

        return errors


# Global config instance
config = Config()
