"""Centralized logging configuration."""
import logging


def configure_logging(level: str = "WARNING"):
    """Configure logging with appropriate levels for different modules."""
    log_level = getattr(logging, level.upper())

    # Base configuration
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True  # Override any existing configuration
    )

    # Suppress noisy logs from the graph runtime
    logging.getLogger("langgraph").setLevel(logging.WARNING)

    # Set root logger to the desired level
    logging.getLogger().setLevel(log_level)
