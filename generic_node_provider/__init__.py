"""Generic node provider package.

Discovers nodes from any URL returning a JSON array of records. Callers name
where each record keeps its id and addresses with dotted property paths.

The package provides:
    - Property path compilation and schema-tolerant resolution
    - Two-stage response parsing (JSON, then array shape)
    - The `GenericNodeProvider` extractor and its default aiohttp client
"""

from __future__ import annotations

# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
from .client import NodeDataClient
from .exceptions import (
    ConfigurationError,
    FetchError,
    GenericNodeProviderError,
    ResponseFormatError,
)
from .models import Node, NodeIp, complete_nodes
from .paths import CompiledPath, compile_property_path, resolve_property_path
from .payloads import RecordsError, RecordsResult, parse_node_records
from .provider import GenericNodeProvider, validate_provider_options

__all__ = [
    "CompiledPath",
    "ConfigurationError",
    "FetchError",
    "GenericNodeProvider",
    "GenericNodeProviderError",
    "Node",
    "NodeDataClient",
    "NodeIp",
    "RecordsError",
    "RecordsResult",
    "ResponseFormatError",
    "compile_property_path",
    "complete_nodes",
    "parse_node_records",
    "resolve_property_path",
    "validate_provider_options",
]
