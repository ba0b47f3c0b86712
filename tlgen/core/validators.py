"""Format validators for wizard fields

All checks use re.fullmatch: a `$` anchor would let a trailing newline through.
"""

import re

NAMESPACE_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")

# Each label: 1-63 chars, alphanumeric ends, hyphens only inside.
HOST_PATTERN = re.compile(
    r"[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(\.[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)

# 1-65535, no leading zeros. One alternative per digit band.
PORT_PATTERN = re.compile(
    r"[1-9][0-9]{0,3}"
    r"|[1-5][0-9]{4}"
    r"|6[0-4][0-9]{3}"
    r"|65[0-4][0-9]{2}"
    r"|655[0-2][0-9]"
    r"|6553[0-5]"
)


def is_valid_namespace(namespace: str) -> bool:
    """Router/service key: letters, digits, dash and underscore only"""
    return NAMESPACE_PATTERN.fullmatch(namespace) is not None


def is_valid_host(host: str) -> bool:
    """Dot separated DNS labels"""
    return HOST_PATTERN.fullmatch(host) is not None


def is_valid_port(port: str) -> bool:
    """Decimal port number between 1 and 65535"""
    return PORT_PATTERN.fullmatch(port) is not None
