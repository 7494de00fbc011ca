"""
Static DNS configuration provider.

This module provides a provider that reports a fixed server list from
configuration, for testing, demonstration and pinned environments.
"""

import logging
from typing import Dict, List

from .base_provider import DNSConfigProvider

logger = logging.getLogger(__name__)


class StaticProvider(DNSConfigProvider):
    """Static provider for testing and demonstration purposes."""

    name = "static"

    def __init__(self, config: Dict = None):
        """Initialize static provider."""
        config = config or {}
        self.servers = list(config.get("servers") or [])

    def get_servers(self) -> List[str]:
        """Get the configured servers."""
        logger.info(f"Static: Reporting {len(self.servers)} servers")
        return list(self.servers)
