from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


HELP_ROUTE_PREFIX = "/help"

# 60 samples at a 5 minute cadence cover the last 5 hours.
DEFAULT_HISTORY_CAPACITY = 60
DEFAULT_SAMPLE_INTERVAL_SECONDS = 300.0
DEFAULT_READ_TIMEOUT_SECONDS = 2.0
