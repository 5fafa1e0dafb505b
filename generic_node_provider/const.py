"""Constants for the generic node provider.

This module centralizes provider-option keys, path roles, and fetch defaults.
"""

from __future__ import annotations

from typing import Final

DOMAIN: Final = "generic_node_provider"

# Use a stable logger name so callers can configure it independently of the
# discovery pipeline that embeds this provider.
LOGGER_NAME: Final = DOMAIN

CONF_PROPERTY_PATH_ID: Final = "propertyPathId"
CONF_PROPERTY_PATH_IP_PRIVATE: Final = "propertyPathIpPrivate"
CONF_PROPERTY_PATH_IP_PUBLIC: Final = "propertyPathIpPublic"

# Checked in this order; the first missing key is reported.
REQUIRED_PROPERTY_PATHS: Final[tuple[str, ...]] = (
    CONF_PROPERTY_PATH_ID,
    CONF_PROPERTY_PATH_IP_PRIVATE,
)
PROPERTY_PATHS: Final[tuple[str, ...]] = (
    *REQUIRED_PROPERTY_PATHS,
    CONF_PROPERTY_PATH_IP_PUBLIC,
)

PATH_SEPARATOR: Final = "."

OPT_HEADERS: Final = "headers"
OPT_REJECT_UNAUTHORIZED: Final = "rejectUnauthorized"

DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
DEFAULT_REJECT_UNAUTHORIZED: Final = True

MSG_NOT_JSON: Final = "Data must parse to a JSON array"
MSG_NOT_ARRAY: Final = "Data must be a JSON array"
