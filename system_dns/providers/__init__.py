"""
Host DNS configuration providers.

This package contains adapters for the places an operating system keeps
its resolver configuration: resolv.conf and the Windows registry (via
dnspython), systemd-resolved, and the macOS configuration daemon.
"""

from .base_provider import ConfigUnavailable, DNSConfigProvider
from .network_service_provider import NetworkServiceProvider
from .registry import PROVIDERS, default_provider_names, get_provider
from .resolver_provider import ResolverConfigProvider, SystemdResolvedProvider
from .scutil_provider import ScutilProvider
from .static_provider import StaticProvider

__all__ = [
    "ConfigUnavailable",
    "DNSConfigProvider",
    "NetworkServiceProvider",
    "PROVIDERS",
    "default_provider_names",
    "get_provider",
    "ResolverConfigProvider",
    "SystemdResolvedProvider",
    "ScutilProvider",
    "StaticProvider",
]
