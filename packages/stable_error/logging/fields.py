"""Canonical logging field names for stable error log lines.

Downstream log pipelines group on these keys, so they are kept in one place.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Stable error fields.
ERROR_ID = "error_id"
ERROR_CATEGORY = "error_category"
SEVERITY = "severity"
STATUS_CODE = "status_code"
ERROR_NAME = "error_name"
ORIGINAL_NAME = "original_name"

STABLE_ERROR_CREATED_EVENT = "stable_error_created"
STABLE_ERROR_REPORTED_EVENT = "stable_error_reported"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
