"""Logging utilities for the application."""

import logging
import sys

from constants import LOGGING_LEVEL

# Create and configure application logger
logger = logging.getLogger("csv_datasets")

logger.setLevel(LOGGING_LEVEL)

# Create formatter with process and thread IDs for worker identification
formatter = logging.Formatter("%(asctime)s - PID:%(process)d - Thread:%(thread)d - %(name)s - %(levelname)s - %(message)s")

# Create and configure stdout handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(formatter)

# Add stdout handler to logger
logger.addHandler(console_handler)

# Prevent propagation to root logger to avoid duplicate logs
logger.propagate = False
