"""Node records emitted by the provider.

These are lightweight, immutable values; the discovery pipeline decides what
to do with incomplete ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

# -----------------------------------------------------------------------------
# Node Records
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class NodeIp:
    """Public/private address pair for a node.

    Attributes:
        public: Value found at the public IP path, or `None`.
        private: Value found at the private IP path, or `None`.
    """

    public: Any = None
    private: Any = None


@dataclass(frozen=True)
class Node:
    """One discovered node.

    Values are whatever the configured paths resolve to; no coercion is
    applied, so `id` may be a whole record when its path is empty.

    Attributes:
        id: Node identifier, or `None` when the path did not resolve.
        ip: Address pair.
    """

    id: Any = None
    ip: NodeIp = field(default_factory=NodeIp)

    def to_dict(self) -> dict[str, Any]:
        """Return the `{id, ip: {public, private}}` mapping form."""
        return {
            "id": self.id,
            "ip": {"public": self.ip.public, "private": self.ip.private},
        }


def complete_nodes(nodes: Iterable[Node]) -> list[Node]:
    """Keep nodes that carry both an id and a private IP.

    Args:
        nodes: Nodes as returned by the provider.

    Returns:
        Nodes whose `id` and `ip.private` resolved, in input order.
    """
    return [n for n in nodes if n.id is not None and n.ip.private is not None]
