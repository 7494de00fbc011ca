"""
Validators - Input validation for DNS server addresses

This module provides validation and normalization helpers for the
addresses reported by the host resolver configuration.
"""

import ipaddress
import logging
from typing import Iterable, List

logger = logging.getLogger(__name__)


def validate_ip_address(address: str) -> bool:
    """
    Validate an IPv4 or IPv6 address.

    IPv6 addresses may carry a scope suffix (``fe80::1%en0``).

    Args:
        address: The address to validate

    Returns:
        True if valid, False otherwise
    """
    if not address or not isinstance(address, str):
        return False

    try:
        ipaddress.ip_address(address.strip())
        return True
    except ValueError:
        return False


def is_loopback_address(address: str) -> bool:
    """Return True for loopback and unspecified addresses."""
    try:
        ip = ipaddress.ip_address(address.strip())
    except ValueError:
        return False
    return ip.is_loopback or ip.is_unspecified


def normalize_servers(values: Iterable, exclude_loopback: bool = False) -> List[str]:
    """
    Normalize a sequence of reported DNS server addresses.

    Strips whitespace, drops malformed entries and removes duplicates while
    keeping the first occurrence of each address.

    Args:
        values: Raw addresses in source order
        exclude_loopback: Also drop loopback and unspecified addresses

    Returns:
        Ordered list of unique, well-formed addresses
    """
    servers: List[str] = []
    for item in values:
        value = str(item).strip()
        if not value:
            continue
        if not validate_ip_address(value):
            logger.warning(f"Ignoring malformed DNS server address: {value!r}")
            continue
        if exclude_loopback and is_loopback_address(value):
            logger.debug(f"Ignoring loopback DNS server address: {value}")
            continue
        if value not in servers:
            servers.append(value)
    return servers
