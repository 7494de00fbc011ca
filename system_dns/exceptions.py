"""
Exceptions raised by the system DNS query.
"""


class ConfigUnavailable(Exception):
    """The host DNS configuration source could not be read."""
