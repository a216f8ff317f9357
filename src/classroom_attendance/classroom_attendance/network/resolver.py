"""Local-network address resolution.

Student devices reach the server through the address encoded in the
check-in QR code, so it must be an address on the classroom LAN rather
than loopback.
"""

from __future__ import annotations

import ipaddress
import logging
import socket
from typing import Iterable, Mapping, Optional

import psutil

from ..core.constants import FALLBACK_ADDRESS

logger = logging.getLogger(__name__)

_PRIVATE_LAN_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
)
_LINK_LOCAL = ipaddress.ip_network("169.254.0.0/16")


def _ipv4(address: str) -> Optional[ipaddress.IPv4Address]:
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        return None
    return ip if isinstance(ip, ipaddress.IPv4Address) else None


def select_lan_address(interfaces: Mapping[str, Iterable[str]]) -> str:
    """Pick the address student devices should use.

    Preference: first private LAN IPv4 (link-local 169.254/16 excluded),
    then any other non-loopback IPv4, then link-local, then 127.0.0.1.
    Interface order is kept.
    """

    candidates = []
    for addresses in interfaces.values():
        for address in addresses:
            ip = _ipv4(address)
            if ip is None or ip.is_loopback:
                continue
            candidates.append(ip)

    for ip in candidates:
        if ip in _LINK_LOCAL:
            continue
        if any(ip in net for net in _PRIVATE_LAN_NETWORKS):
            return str(ip)

    for ip in candidates:
        if ip not in _LINK_LOCAL:
            return str(ip)
    if candidates:
        return str(candidates[0])
    return FALLBACK_ADDRESS


def host_interfaces() -> dict[str, list[str]]:
    """IPv4 addresses per interface of this machine."""

    return {
        name: [a.address for a in addrs if a.family == socket.AF_INET]
        for name, addrs in psutil.net_if_addrs().items()
    }


def resolve_lan_address(override: Optional[str] = None) -> str:
    if override:
        return override
    try:
        interfaces = host_interfaces()
    except OSError as e:
        logger.warning("Could not list network interfaces (%s); using %s", e, FALLBACK_ADDRESS)
        return FALLBACK_ADDRESS
    return select_lan_address(interfaces)
