import os
from dataclasses import dataclass

LOG_LEVEL_ENV_VAR = "COLLECTION_EXTENSIONS_LOG_LEVEL"


@dataclass
class Settings:
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, letting the environment override the log level."""
        settings = cls()
        level_name = os.getenv(LOG_LEVEL_ENV_VAR)
        if level_name:
            settings.log_level = level_name
        return settings
