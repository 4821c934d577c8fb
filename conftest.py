from calculator.config import LOG_LEVEL
from calculator.logging_config import configure_logging

configure_logging(LOG_LEVEL)
