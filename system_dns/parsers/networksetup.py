"""
Parsers for macOS ``networksetup`` output.
"""

import re
from typing import Dict, List

from ..utils.validators import validate_ip_address

SERVICE_LINE = re.compile(r"^\((\d+|\*)\)\s+(.+)$")
HARDWARE_LINE = re.compile(r"^\(Hardware Port:\s*(.*?),\s*Device:\s*(.*?)\)$")
NO_SERVERS_MARKER = "There aren't any DNS Servers"


def parse_service_order(text: str) -> List[Dict]:
    """
    Parse ``networksetup -listnetworkserviceorder`` output.

    Disabled services are listed as ``(*) Name`` and are kept with
    ``enabled`` set to False so callers can decide whether to skip them.
    """
    services: List[Dict] = []
    position = 0

    for raw_line in text.splitlines():
        line = raw_line.strip()

        hardware = HARDWARE_LINE.match(line)
        if hardware:
            if services:
                services[-1]["port"] = hardware.group(1) or None
                services[-1]["device"] = hardware.group(2) or None
            continue

        service = SERVICE_LINE.match(line)
        if service:
            position += 1
            services.append(
                {
                    "order": position,
                    "name": service.group(2).strip(),
                    "port": None,
                    "device": None,
                    "enabled": service.group(1) != "*",
                }
            )

    return services


def parse_dns_servers_output(text: str) -> List[str]:
    """Parse ``networksetup -getdnsservers <service>`` output."""
    if NO_SERVERS_MARKER in text:
        return []
    return [
        line.strip()
        for line in text.splitlines()
        if validate_ip_address(line.strip())
    ]
