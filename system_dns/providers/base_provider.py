"""
Base DNS configuration provider interface.

This module defines the abstract base class that all host configuration
providers must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..exceptions import ConfigUnavailable

__all__ = ["ConfigUnavailable", "DNSConfigProvider"]


class DNSConfigProvider(ABC):
    """Abstract base class for host DNS configuration providers.

    Providers return raw entries in source order and raise
    ``ConfigUnavailable`` when their source cannot be read.
    """

    name = "base"

    @abstractmethod
    def get_servers(self) -> List[str]:
        """Get the configured DNS server addresses in priority order."""
        pass
