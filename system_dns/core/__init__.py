"""
Core system DNS query functionality.

This package contains the query that turns host resolver configuration
into an ordered list of DNS server addresses.
"""

from .dns_query import (
    SystemDNSQuery,
    get_system_dns_servers,
    get_system_dns_servers_async,
)

__all__ = ["SystemDNSQuery", "get_system_dns_servers", "get_system_dns_servers_async"]
