"""
Logging configuration.

Log lines go to stderr so audit JSON written to stdout stays parseable.
"""
import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("seo_auditor")
logger.setLevel(LOG_LEVEL)

stderr_handler = logging.StreamHandler(sys.stderr)
stderr_handler.setLevel(LOG_LEVEL)

formatter = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
stderr_handler.setFormatter(formatter)

if not logger.handlers:
    logger.addHandler(stderr_handler)
