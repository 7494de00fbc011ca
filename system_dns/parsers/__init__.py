"""
Parsers for host resolver configuration formats.
"""

from .networksetup import parse_dns_servers_output, parse_service_order
from .resolv_conf import parse_resolv_conf
from .scutil import parse_scutil_dns, scutil_nameservers

__all__ = [
    "parse_dns_servers_output",
    "parse_service_order",
    "parse_resolv_conf",
    "parse_scutil_dns",
    "scutil_nameservers",
]
