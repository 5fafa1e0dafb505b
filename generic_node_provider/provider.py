"""Generic node provider.

Maps records from an arbitrary JSON array to `Node` values using three
caller-configured property paths (id, private IP, public IP). The provider
owns the compiled paths; fetching is delegated to a client exposing
`async_fetch_body(url, options)`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol, cast

import voluptuous as vol

from .client import NodeDataClient
from .const import (
    CONF_PROPERTY_PATH_ID,
    CONF_PROPERTY_PATH_IP_PRIVATE,
    CONF_PROPERTY_PATH_IP_PUBLIC,
    LOGGER_NAME,
    PROPERTY_PATHS,
)
from .exceptions import ConfigurationError, ResponseFormatError
from .models import Node, NodeIp
from .paths import CompiledPath, compile_property_path, resolve_property_path
from .payloads import parse_node_records

PROVIDER_OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_PROPERTY_PATH_ID): str,
        vol.Required(CONF_PROPERTY_PATH_IP_PRIVATE): str,
        vol.Optional(CONF_PROPERTY_PATH_IP_PUBLIC): str,
    },
    extra=vol.ALLOW_EXTRA,
)


class FetchCapability(Protocol):
    """Anything that can fetch a raw body for a URL."""

    async def async_fetch_body(
        self, url: str, options: Mapping[str, Any] | None = None
    ) -> Any: ...


def _configuration_error(err: vol.MultipleInvalid) -> ConfigurationError:
    """Translate schema errors, reporting keys in their documented order."""
    for key in PROPERTY_PATHS:
        for error in err.errors:
            if not error.path or error.path[0] != key:
                continue
            if isinstance(error, vol.RequiredFieldInvalid):
                return ConfigurationError(f"ProviderOptions.{key} required")
            return ConfigurationError(f"ProviderOptions.{key} must be a string")
    return ConfigurationError(f"Invalid provider options: {err}")


def validate_provider_options(provider_options: Any) -> dict[str, Any]:
    """Validate provider options.

    Args:
        provider_options: Caller-supplied mapping (or `None`).

    Returns:
        The validated options.

    Raises:
        ConfigurationError: If a required path is missing or a path is not a
            string.
    """
    if provider_options is None:
        provider_options = {}
    if not isinstance(provider_options, Mapping):
        raise ConfigurationError("ProviderOptions must be a mapping")
    try:
        return cast(
            dict[str, Any], PROVIDER_OPTIONS_SCHEMA(dict(provider_options))
        )
    except vol.MultipleInvalid as err:
        raise _configuration_error(err) from err


class GenericNodeProvider:
    """Discover nodes from a URL returning a JSON array of records."""

    def __init__(
        self,
        *,
        logger: Any = None,
        client: FetchCapability | None = None,
    ) -> None:
        self.logger = logger if logger is not None else logging.getLogger(LOGGER_NAME)

        self._client = client
        self._owns_client = client is None

        self._provider_options: Mapping[str, Any] | None = None
        self._init_options: Any = None
        self._property_paths: dict[str, CompiledPath] | None = None

    @property
    def client(self) -> FetchCapability:
        if self._client is None:
            self._client = NodeDataClient()
        return self._client

    @property
    def provider_options(self) -> Mapping[str, Any] | None:
        return self._provider_options

    @property
    def init_options(self) -> Any:
        return self._init_options

    @property
    def property_paths(self) -> dict[str, CompiledPath] | None:
        """Compiled paths keyed by option name, or `None` before init."""
        if self._property_paths is None:
            return None
        return dict(self._property_paths)

    @property
    def initialized(self) -> bool:
        return self._property_paths is not None

    async def async_init(
        self, provider_options: Mapping[str, Any] | None = None, init_options: Any = None
    ) -> None:
        """Validate options and compile the property paths.

        Args:
            provider_options: Must contain `propertyPathId` and
                `propertyPathIpPrivate`; may contain `propertyPathIpPublic`.
                Other keys are kept and ignored.
            init_options: Stored for the caller; not interpreted.

        Raises:
            ConfigurationError: If a required path is missing or invalid.
        """
        validated = validate_provider_options(provider_options)

        # An absent public path compiles like an empty one (whole record).
        self._property_paths = {
            key: compile_property_path(validated.get(key, ""))
            for key in PROPERTY_PATHS
        }
        self._provider_options = provider_options
        self._init_options = init_options

    async def async_get_nodes_from_uri(
        self, url: str, options: Mapping[str, Any] | None = None
    ) -> list[Node]:
        """Fetch records from a URL and map them to nodes.

        Args:
            url: Location of the JSON array.
            options: Fetch options passed through to the client unchanged.

        Returns:
            One node per record, in record order. Unresolved fields are `None`.

        Raises:
            ResponseFormatError: If the body is not JSON or not a JSON array.
            ConfigurationError: If the provider has not been initialized.
        """
        body = await self.client.async_fetch_body(url, options)

        result = parse_node_records(body)
        if result.error is not None:
            raise ResponseFormatError(result.error.value)
        if not self.initialized:
            raise ConfigurationError("Provider not initialized")

        return [self.node_from_record(record) for record in result.records]

    def node_from_record(self, record: Any) -> Node:
        """Map one record to a node using the compiled paths."""
        if self._property_paths is None:
            raise ConfigurationError("Provider not initialized")
        paths = self._property_paths
        return Node(
            id=resolve_property_path(record, paths[CONF_PROPERTY_PATH_ID]),
            ip=NodeIp(
                public=resolve_property_path(
                    record, paths[CONF_PROPERTY_PATH_IP_PUBLIC]
                ),
                private=resolve_property_path(
                    record, paths[CONF_PROPERTY_PATH_IP_PRIVATE]
                ),
            ),
        )

    async def async_close(self) -> None:
        """Close the internally-created client, if any."""
        if self._owns_client and isinstance(self._client, NodeDataClient):
            await self._client.async_close()
            self._client = None
