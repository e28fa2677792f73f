import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

PACKAGE_DIR = Path(__file__).resolve().parent

# Data-related settings
DATA_CONFIG = {
    "DATA_FILE": PACKAGE_DIR / "data" / "njpopulation.dat",
    "DECADES": 23,
    "COLUMNS": ["year", "population"]
}

# Query-related settings
QUERY_CONFIG = {
    "EARLIEST_YEAR": 1790,
    "LATEST_YEAR": 2010,
    "DECADE_SPAN": 10,
    "SENTINEL": "0"
}

# Logging-related settings
LOGGING_CONFIG = {
    "LOG_FILE": None,
    "LOG_FORMAT": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "LOG_LEVEL": "WARNING",
    "MAX_BYTES": 10 * 1024 * 1024,  # 10MB
    "BACKUP_COUNT": 5
}


@dataclass
class AppConfig:
    """Runtime settings for a single session"""
    data_file: Path = DATA_CONFIG["DATA_FILE"]
    log_level: str = LOGGING_CONFIG["LOG_LEVEL"]
    log_file: Optional[str] = LOGGING_CONFIG["LOG_FILE"]

    @classmethod
    def from_env(cls):
        """Create configuration from environment variables"""
        data_file = os.getenv("NJ_POPULATION_DATA_FILE")
        return cls(
            data_file=Path(data_file) if data_file else DATA_CONFIG["DATA_FILE"],
            log_level=os.getenv("NJ_POPULATION_LOG_LEVEL", LOGGING_CONFIG["LOG_LEVEL"]).upper(),
            log_file=os.getenv("NJ_POPULATION_LOG_FILE") or LOGGING_CONFIG["LOG_FILE"]
        )
