"""
Production settings for ProvisioningConsole.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "").split(",")

# Security settings
SECURE_SSL_REDIRECT = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

# Secret key must come from the environment
SECRET_KEY = os.environ["SECRET_KEY"]

OBSERVABILITY_ENABLED = os.environ.get("OBSERVABILITY_ENABLED", "true").lower() == "true"

LOGGING = get_logging_config(  # noqa: F405
    "production",
    log_file=os.environ.get("LOG_FILE", "/var/log/provisioning_console/app.log"),
)
