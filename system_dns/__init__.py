"""
System DNS - Query the DNS servers configured on the host

A small library for reading the host resolver configuration from
resolv.conf, the Windows registry, systemd-resolved or the macOS
configuration daemon, and returning it as an ordered list of addresses.
"""

__version__ = "1.0.0"
__author__ = "System DNS Team"
__description__ = "Query the DNS servers configured on the host"

from .core.dns_query import (
    SystemDNSQuery,
    get_system_dns_servers,
    get_system_dns_servers_async,
)
from .exceptions import ConfigUnavailable

__all__ = [
    "ConfigUnavailable",
    "SystemDNSQuery",
    "get_system_dns_servers",
    "get_system_dns_servers_async",
]
