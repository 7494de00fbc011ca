"""
Resolver configuration provider implementation.

This module reads the host resolver configuration using the dnspython
library: resolv.conf on POSIX hosts, the registry on Windows.
"""

import logging
import os
from typing import Dict, List

import dns.exception
import dns.resolver

from .base_provider import ConfigUnavailable, DNSConfigProvider
from ..parsers.resolv_conf import parse_resolv_conf

logger = logging.getLogger(__name__)


class ResolverConfigProvider(DNSConfigProvider):
    """Resolver configuration provider using dnspython library."""

    name = "resolver"
    DEFAULT_FILENAME = "/etc/resolv.conf"

    def __init__(self, config: Dict = None):
        """Initialize resolver configuration provider."""
        config = config or {}
        self.filename = config.get("filename", self.DEFAULT_FILENAME)

    def get_servers(self) -> List[str]:
        """Get nameservers from the resolver configuration."""
        try:
            resolver = dns.resolver.Resolver(filename=self.filename, configure=True)
        except dns.resolver.NoResolverConfiguration as e:
            # dnspython raises the same error for a missing file and for a
            # file without nameserver lines.
            if self._is_readable():
                logger.info(f"No nameservers configured in {self.filename}")
                return []
            raise ConfigUnavailable(
                f"Cannot read resolver configuration {self.filename}: {e}"
            ) from e
        except ValueError as e:
            logger.warning(
                f"dnspython rejected {self.filename} ({e}), parsing it directly"
            )
            return self._parse_file()
        except dns.exception.DNSException as e:
            raise ConfigUnavailable(
                f"Failed to load resolver configuration: {e}"
            ) from e

        nameservers = [self._address_of(ns) for ns in resolver.nameservers]
        logger.debug(f"Read {len(nameservers)} nameservers from {self.filename}")
        return nameservers

    def _is_readable(self) -> bool:
        return os.path.isfile(self.filename) and os.access(self.filename, os.R_OK)

    def _parse_file(self) -> List[str]:
        """Parse the resolv.conf file without dnspython."""
        try:
            with open(self.filename, "r", encoding="utf-8", errors="replace") as f:
                return parse_resolv_conf(f.read())
        except OSError as e:
            raise ConfigUnavailable(f"Cannot read {self.filename}: {e}") from e

    @staticmethod
    def _address_of(nameserver) -> str:
        """Return the address of a nameserver string or Nameserver object."""
        return str(getattr(nameserver, "address", nameserver))


class SystemdResolvedProvider(ResolverConfigProvider):
    """Upstream servers managed by systemd-resolved.

    ``/etc/resolv.conf`` on such hosts usually names only the 127.0.0.53
    stub listener; the real upstream list lives in the file below.
    """

    name = "systemd_resolved"
    DEFAULT_FILENAME = "/run/systemd/resolve/resolv.conf"
