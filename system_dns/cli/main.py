#!/usr/bin/env python3
"""
System DNS - Command Line Interface

Main entry point for the system-dns CLI.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from rich.console import Console
from rich.table import Table

from ..core.dns_query import DEFAULT_TIMEOUT, SystemDNSQuery
from ..exceptions import ConfigUnavailable
from ..providers.network_service_provider import NetworkServiceProvider

console = Console()
error_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="System DNS - Show the DNS servers configured on this host"
    )

    parser.add_argument("--config", "-c", help="Configuration file path")

    parser.add_argument(
        "--source",
        "-s",
        action="append",
        dest="sources",
        help="Configuration source to query, in order (repeatable)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of printing an empty list when no source is readable",
    )

    parser.add_argument(
        "--exclude-loopback",
        action="store_true",
        help="Drop loopback and unspecified addresses such as 127.0.0.53",
    )

    parser.add_argument(
        "--by-service",
        action="store_true",
        help="Show manually configured servers per network service (macOS)",
    )

    parser.add_argument("--json", action="store_true", help="Print JSON output")

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.config and not Path(args.config).exists():
        error_console.print(f"Error: Configuration file '{args.config}' not found")
        sys.exit(1)

    config = load_config(args.config) if args.config else get_default_config()
    apply_arguments(config, args)
    config_logger(config, verbose=args.verbose)

    try:
        if args.by_service:
            by_service = query_services(config)
            if args.json:
                print(json.dumps(by_service))
            else:
                display_services(by_service)
        else:
            source, servers = SystemDNSQuery(config).query()
            if args.json:
                print(json.dumps(servers))
            else:
                display_servers(source, servers)
    except ConfigUnavailable as e:
        error_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    sys.exit(0)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        validate_config(config)
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        error_console.print(f"Error: Invalid configuration file '{config_path}': {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        error_console.print(f"Error: Invalid configuration file '{config_path}': {e}")
        sys.exit(1)


def validate_config(config) -> None:
    """Check the configuration shape, raising ValueError on the first problem."""
    if not isinstance(config, dict):
        raise ValueError("top level must be a mapping")

    for section in ("system_dns", "logging"):
        if config.get(section) is not None and not isinstance(config[section], dict):
            raise ValueError(f"'{section}' must be a mapping")

    settings = config.get("system_dns") or {}
    if "timeout" in settings:
        timeout = settings["timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ValueError(f"'system_dns.timeout' must be a number, got {timeout!r}")
        if timeout <= 0:
            raise ValueError("'system_dns.timeout' must be positive")

    sources = settings.get("sources")
    if sources is not None and (
        not isinstance(sources, list) or not all(isinstance(s, str) for s in sources)
    ):
        raise ValueError("'system_dns.sources' must be a list of provider names")

    providers = settings.get("providers") or {}
    if not isinstance(providers, dict):
        raise ValueError("'system_dns.providers' must be a mapping")
    for name, provider_config in providers.items():
        if provider_config is not None and not isinstance(provider_config, dict):
            raise ValueError(f"'system_dns.providers.{name}' must be a mapping")


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "system_dns": {
            "timeout": DEFAULT_TIMEOUT,
            "strict": False,
            "exclude_loopback": False,
            "providers": {},
        },
        "logging": {"level": "WARNING"},
    }


def apply_arguments(config: Dict, args: argparse.Namespace) -> Dict:
    """Apply command line overrides to the configuration."""
    settings = config.setdefault("system_dns", {})
    if args.sources:
        settings["sources"] = args.sources
    if args.strict:
        settings["strict"] = True
    if args.exclude_loopback:
        settings["exclude_loopback"] = True
    return config


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging.

    Logs go to stderr so that ``--json`` output on stdout stays parseable.
    """
    logging_config = config.get("logging", None) or {}
    log_level = "DEBUG" if verbose else logging_config.get("level", "WARNING")
    handlers = [logging.StreamHandler(sys.stderr)]

    log_file = logging_config.get("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def query_services(config: Dict) -> Dict[str, List[str]]:
    """Query manually configured DNS servers per network service."""
    settings = config.get("system_dns") or {}
    provider_config = dict(
        (settings.get("providers") or {}).get(NetworkServiceProvider.name) or {}
    )
    provider_config.setdefault("timeout", settings.get("timeout") or DEFAULT_TIMEOUT)
    try:
        return NetworkServiceProvider(provider_config).get_servers_by_service()
    except ConfigUnavailable as e:
        if settings.get("strict"):
            raise
        logger.warning(f"Network service configuration unavailable: {e}")
        return {}


def display_servers(source: str, servers: List[str]):
    """Display the configured DNS servers."""
    if not servers:
        console.print("[yellow]No DNS servers configured[/yellow]")
        return

    table = Table(title="System DNS Servers")
    table.add_column("Priority", style="cyan")
    table.add_column("Address", style="magenta")
    table.add_column("Source", style="white")

    for priority, address in enumerate(servers, start=1):
        table.add_row(str(priority), address, source)

    console.print(table)


def display_services(by_service: Dict[str, List[str]]):
    """Display DNS servers per network service."""
    if not by_service:
        console.print("[yellow]No network services found[/yellow]")
        return

    table = Table(title="DNS Servers by Network Service")
    table.add_column("Service", style="cyan")
    table.add_column("DNS Servers", style="magenta")

    for service, servers in by_service.items():
        table.add_row(service, ", ".join(servers) if servers else "(automatic)")

    console.print(table)


if __name__ == "__main__":
    main()
