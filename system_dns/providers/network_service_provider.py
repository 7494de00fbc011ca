"""
macOS network service provider.

Reads the DNS servers set manually on each network service with
``networksetup``. Servers learned via DHCP are not reported by
``networksetup``; use the ``scutil`` provider for the effective list.
"""

import logging
from typing import Dict, List

from .base_provider import DNSConfigProvider
from ..parsers.networksetup import parse_dns_servers_output, parse_service_order
from ..utils.commands import run_command

logger = logging.getLogger(__name__)


class NetworkServiceProvider(DNSConfigProvider):
    """DNS servers configured per macOS network service."""

    name = "network_services"

    def __init__(self, config: Dict = None):
        config = config or {}
        self.command = config.get("command", "networksetup")
        self.timeout = float(config.get("timeout", 5.0))
        self.services = config.get("services") or []

    def get_servers(self) -> List[str]:
        """Get manually configured DNS servers in network service order."""
        servers = []
        for service_servers in self.get_servers_by_service().values():
            for address in service_servers:
                if address not in servers:
                    servers.append(address)
        return servers

    def get_servers_by_service(self) -> Dict[str, List[str]]:
        """Get manually configured DNS servers keyed by network service name."""
        by_service: Dict[str, List[str]] = {}
        for service in self.list_services():
            output = run_command(
                [self.command, "-getdnsservers", service["name"]],
                timeout=self.timeout,
            )
            by_service[service["name"]] = parse_dns_servers_output(output)
            logger.debug(
                f"Service '{service['name']}' has DNS servers "
                f"{by_service[service['name']]}"
            )
        return by_service

    def list_services(self) -> List[Dict]:
        """List enabled network services in service order."""
        output = run_command(
            [self.command, "-listnetworkserviceorder"], timeout=self.timeout
        )
        services = [s for s in parse_service_order(output) if s["enabled"]]
        if self.services:
            services = [s for s in services if s["name"] in self.services]
        return services
