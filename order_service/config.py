"""
config.py — Runtime Settings

Settings are read once from environment variables at import time.
"""

import os

LOG_LEVEL = os.environ.get("ORDER_SERVICE_LOG_LEVEL", "INFO")
# Empty means console logging only
LOG_FILE = os.environ.get("ORDER_SERVICE_LOG_FILE", "")

API_HOST = os.environ.get("ORDER_SERVICE_HOST", "127.0.0.1")
API_PORT = int(os.environ.get("ORDER_SERVICE_PORT", "8000"))

DEFAULT_NOTIFICATION_MESSAGE = os.environ.get(
    "ORDER_SERVICE_NOTIFICATION_MESSAGE", "Your order has been placed!"
)
