"""
Provider selection by name and platform.
"""

import logging
import sys
from typing import Dict, List, Optional

from .base_provider import DNSConfigProvider
from .network_service_provider import NetworkServiceProvider
from .resolver_provider import ResolverConfigProvider, SystemdResolvedProvider
from .scutil_provider import ScutilProvider
from .static_provider import StaticProvider

logger = logging.getLogger(__name__)

PROVIDERS = {
    ResolverConfigProvider.name: ResolverConfigProvider,
    SystemdResolvedProvider.name: SystemdResolvedProvider,
    ScutilProvider.name: ScutilProvider,
    NetworkServiceProvider.name: NetworkServiceProvider,
    StaticProvider.name: StaticProvider,
}


def default_provider_names(platform: Optional[str] = None) -> List[str]:
    """Return the provider order used when none is configured."""
    platform = platform or sys.platform
    if platform == "darwin":
        return [ScutilProvider.name, ResolverConfigProvider.name]
    return [ResolverConfigProvider.name]


def get_provider(name: str, config: Dict = None) -> Optional[DNSConfigProvider]:
    """Get a configuration provider by name, or None if it is unknown."""
    provider_class = PROVIDERS.get(name)
    if provider_class is None:
        logger.warning(f"Unknown DNS configuration provider '{name}', skipping")
        return None
    return provider_class(config or {})
