# config/settings.py
"""
Framework configuration with validation and environment support.
This module defines the settings for the multicore framework: logging
destinations and levels, plus the runtime environment flags.
"""
import os
from typing import Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).lower() == 'true'


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = field(
        default_factory=lambda: os.getenv('MULTICORE_LOG_LEVEL', 'INFO'))
    # No file output unless a directory is configured
    file_path: Optional[str] = field(
        default_factory=lambda: os.getenv('MULTICORE_LOG_DIR'))
    max_file_size: int = field(default_factory=lambda: int(
        os.getenv('MULTICORE_LOG_MAX_BYTES', str(10 * 1024 * 1024))))  # 10MB
    backup_count: int = field(default_factory=lambda: int(
        os.getenv('MULTICORE_LOG_BACKUPS', '5')))
    console_output: bool = field(
        default_factory=lambda: _env_flag('MULTICORE_LOG_CONSOLE', 'true'))

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.level}")
        if self.max_file_size <= 0:
            raise ValueError("Log file size must be positive")
        if self.backup_count < 0:
            raise ValueError("Log backup count must not be negative")


class Settings:
    """Main framework settings"""

    def __init__(self):
        self.logging = LoggingConfig()

        # Environment
        self.environment = os.getenv('ENVIRONMENT', 'development')
        self.debug = _env_flag('DEBUG')

    def is_production(self) -> bool:
        """Check if running in production"""
        return self.environment.lower() == 'production'

    def get_log_level(self) -> str:
        """Get effective log level"""
        if self.debug:
            return "DEBUG"
        return self.logging.level


# Global settings instance
settings = Settings()
