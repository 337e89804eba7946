from enum import Enum

# Legacy annotation keys written by the predictive autoscaler.
BOOT_LATENCY_ANNOTATION = "InitializationTime"
PREDICTIVE_ANNOTATION = "predictive"
OBSERVATIONS_ANNOTATION = "previousCPUUtilizations"

RETENTION_MULTIPLIER = 20.0
# Ten minutes: at a 30 second sync period, at most 20 stored samples.
MAX_RETENTION_SECONDS = 600.0
SAMPLING_PERIOD_SECONDS = 30.0


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
