"""
Parser for resolv.conf resolver configuration files.

Only ``nameserver`` lines are read; other keywords such as ``search`` and
``options`` are ignored.
"""

import logging
from typing import List

from ..utils.validators import validate_ip_address

logger = logging.getLogger(__name__)


def parse_resolv_conf(text: str) -> List[str]:
    """Return the ``nameserver`` entries of a resolv.conf in file order."""
    nameservers = []
    for line_num, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line[0] in "#;":
            continue
        tokens = line.split()
        if len(tokens) < 2 or tokens[0] != "nameserver":
            continue

        address = tokens[1]
        if not validate_ip_address(address):
            logger.warning(
                f"Invalid nameserver '{address}' at line {line_num}, skipping"
            )
            continue
        nameservers.append(address)
    return nameservers
