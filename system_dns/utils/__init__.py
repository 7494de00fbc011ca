"""
Utility functions and helpers.

This package contains address validation and the read-only command
runner used by the platform providers.
"""

from .commands import run_command
from .validators import (
    is_loopback_address,
    normalize_servers,
    validate_ip_address,
)

__all__ = [
    "run_command",
    "is_loopback_address",
    "normalize_servers",
    "validate_ip_address",
]
