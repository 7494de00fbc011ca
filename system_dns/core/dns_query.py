"""
System DNS Query - Enumerate the DNS servers configured on the host

The query tries each configuration provider in order and returns the
first answer it gets, normalized into an ordered, duplicate-free list of
address strings. Each call builds its own providers and worker, so the
query holds no state between calls and may run on many threads at once.
"""

import asyncio
import concurrent.futures
import logging
import threading
from typing import Dict, List, Optional, Tuple

from ..exceptions import ConfigUnavailable
from ..providers.base_provider import DNSConfigProvider
from ..providers.registry import default_provider_names, get_provider
from ..utils.validators import normalize_servers

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0
NO_SOURCE = "none"


class SystemDNSQuery:
    """Query the DNS servers configured on the host."""

    def __init__(self, config: Optional[Dict] = None):
        """Initialize the query from the ``system_dns`` configuration section."""
        self.config = config or {}
        settings = self.config.get("system_dns") or {}
        timeout = settings.get("timeout")
        self.timeout = float(timeout) if timeout is not None else DEFAULT_TIMEOUT
        self.strict = bool(settings.get("strict", False))
        self.exclude_loopback = bool(settings.get("exclude_loopback", False))
        self.sources = list(settings.get("sources") or [])
        self.provider_configs = settings.get("providers") or {}

    def get_servers(self) -> List[str]:
        """
        Get the DNS servers configured on the host in priority order.

        Returns:
            Ordered list of addresses; empty when nothing is configured or,
            outside strict mode, when no configuration source is readable

        Raises:
            ConfigUnavailable: In strict mode, when no source could be read
        """
        return self.query()[1]

    def query(self) -> Tuple[str, List[str]]:
        """Get the name of the answering provider and its DNS servers."""
        try:
            source, servers = self._run_with_timeout()
        except ConfigUnavailable as e:
            if self.strict:
                raise
            logger.warning(f"System DNS configuration unavailable: {e}")
            return NO_SOURCE, []

        logger.info(f"Found {len(servers)} DNS servers via {source}")
        return source, servers

    async def get_servers_async(self) -> List[str]:
        """Get the configured DNS servers without blocking the event loop."""
        return await asyncio.to_thread(self.get_servers)

    def _run_with_timeout(self) -> Tuple[str, List[str]]:
        """Run the provider chain on a worker thread bounded by the timeout.

        The worker is a daemon thread so a wedged host call can neither
        block the caller past the timeout nor keep the process from exiting.
        """
        future: concurrent.futures.Future = concurrent.futures.Future()

        def run():
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(self._query_providers())
            except Exception as e:
                future.set_exception(e)

        worker = threading.Thread(target=run, name="system-dns-query", daemon=True)
        worker.start()
        try:
            return future.result(timeout=self.timeout)
        except concurrent.futures.TimeoutError:
            raise ConfigUnavailable(
                f"System DNS query timed out after {self.timeout}s"
            )

    def _query_providers(self) -> Tuple[str, List[str]]:
        """Return the first readable provider's answer, even if it is empty."""
        failures = []
        for provider in self._get_providers():
            try:
                raw_servers = provider.get_servers()
            except ConfigUnavailable as e:
                logger.debug(f"Provider '{provider.name}' unavailable: {e}")
                failures.append(f"{provider.name}: {e}")
                continue
            except Exception as e:
                logger.error(f"Provider '{provider.name}' failed: {e}")
                failures.append(f"{provider.name}: {e}")
                continue

            servers = normalize_servers(raw_servers, self.exclude_loopback)
            logger.debug(f"Provider '{provider.name}' reported {servers}")
            return provider.name, servers

        raise ConfigUnavailable(
            "No DNS configuration source available"
            + (f" ({'; '.join(failures)})" if failures else "")
        )

    def _get_providers(self) -> List[DNSConfigProvider]:
        """Build the providers for the configured or platform default order."""
        providers = self._build_providers(self.sources or default_provider_names())
        if not providers:
            logger.warning("No usable DNS configuration providers, using defaults")
            providers = self._build_providers(default_provider_names())
        return providers

    def _build_providers(self, names: List[str]) -> List[DNSConfigProvider]:
        providers = []
        for name in names:
            provider_config = dict(self.provider_configs.get(name) or {})
            provider_config.setdefault("timeout", self.timeout)
            provider = get_provider(name, provider_config)
            if provider is not None:
                providers.append(provider)
        return providers


def get_system_dns_servers(config: Optional[Dict] = None) -> List[str]:
    """Return the DNS servers configured on the host in priority order."""
    return SystemDNSQuery(config).get_servers()


async def get_system_dns_servers_async(config: Optional[Dict] = None) -> List[str]:
    """Async form of ``get_system_dns_servers`` run on a worker thread."""
    return await SystemDNSQuery(config).get_servers_async()
