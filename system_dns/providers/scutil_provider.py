"""
macOS dynamic store provider.

On macOS ``/etc/resolv.conf`` is a compatibility copy; the configuration
daemon's dynamic store, printed by ``scutil --dns``, is authoritative and
also carries per-domain resolvers installed by VPN clients.
"""

import logging
from typing import Dict, List

from .base_provider import DNSConfigProvider
from ..parsers.scutil import parse_scutil_dns, scutil_nameservers
from ..utils.commands import run_command

logger = logging.getLogger(__name__)


class ScutilProvider(DNSConfigProvider):
    """DNS configuration read from ``scutil --dns``."""

    name = "scutil"

    def __init__(self, config: Dict = None):
        config = config or {}
        self.command = config.get("command", "scutil")
        self.timeout = float(config.get("timeout", 5.0))

    def get_servers(self) -> List[str]:
        output = run_command([self.command, "--dns"], timeout=self.timeout)
        resolvers = parse_scutil_dns(output)
        nameservers = scutil_nameservers(resolvers)
        logger.debug(
            f"scutil reported {len(resolvers)} resolvers with "
            f"{len(nameservers)} nameservers"
        )
        return nameservers
