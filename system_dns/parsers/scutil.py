"""
Parser for macOS ``scutil --dns`` output.

``scutil --dns`` prints the resolver configuration held in the dynamic
store. The first "DNS configuration" section lists the resolvers used for
unscoped queries; later sections (scoped queries) repeat per-interface
copies of the same servers and are ignored.
"""

import logging
import re
from typing import Dict, List

logger = logging.getLogger(__name__)

RESOLVER_HEADER = re.compile(r"^resolver\s+#(\d+)$")
KEY_VALUE = re.compile(r"^([^:]+?)\s*:\s*(.*)$")
INDEXED_KEY = re.compile(r"^(.+?)\[(\d+)\]$")
INTERFACE = re.compile(r"\((\S+)\)")


def parse_scutil_dns(text: str) -> List[Dict]:
    """
    Parse the first section of ``scutil --dns`` into resolver entries.

    Args:
        text: Raw command output

    Returns:
        Resolver dictionaries in listed order
    """
    resolvers: List[Dict] = []
    current = None
    sections_seen = 0

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith("DNS configuration"):
            sections_seen += 1
            if sections_seen > 1:
                break
            continue

        header = RESOLVER_HEADER.match(line)
        if header:
            current = {
                "number": int(header.group(1)),
                "nameservers": [],
                "search": [],
                "domain": None,
                "interface": None,
                "order": None,
            }
            resolvers.append(current)
            continue

        if current is None:
            continue

        match = KEY_VALUE.match(line)
        if not match:
            continue
        key, value = match.group(1).strip(), match.group(2).strip()

        indexed = INDEXED_KEY.match(key)
        if indexed:
            if indexed.group(1) == "nameserver":
                current["nameservers"].append(value)
            elif indexed.group(1) == "search domain":
                current["search"].append(value)
        elif key == "domain":
            current["domain"] = value
        elif key == "if_index":
            interface = INTERFACE.search(value)
            if interface:
                current["interface"] = interface.group(1)
        elif key == "order":
            try:
                current["order"] = int(value)
            except ValueError:
                logger.debug(f"Unparseable resolver order: {value}")

    return resolvers


def scutil_nameservers(resolvers: List[Dict]) -> List[str]:
    """
    Flatten resolver entries into a priority-ordered nameserver list.

    General resolvers (no ``domain``) come first in listed order, followed
    by domain-specific resolvers such as split-DNS VPN entries.
    """
    general = [r for r in resolvers if not r.get("domain")]
    scoped = [r for r in resolvers if r.get("domain")]

    nameservers = []
    for resolver in general + scoped:
        for address in resolver["nameservers"]:
            if address not in nameservers:
                nameservers.append(address)
    return nameservers
