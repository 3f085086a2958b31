"""Pytest configuration for test logging."""
from rdcalc.config import LOG_LEVEL
from rdcalc.observability.logging_config import configure_logging

configure_logging(LOG_LEVEL)
