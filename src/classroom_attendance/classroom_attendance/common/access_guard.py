from __future__ import annotations

import ipaddress
import logging
from functools import wraps

from flask import request

from ..core.enums import AccessPolicy
from ..core.exceptions import ForbiddenError

logger = logging.getLogger(__name__)


def is_loopback(address: str | None) -> bool:
    if not address:
        return False
    try:
        ip = ipaddress.ip_address(address.split("%", 1)[0])
    except ValueError:
        return False
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    return ip.is_loopback


def is_allowed(policy: AccessPolicy, address: str | None) -> bool:
    if policy == AccessPolicy.LAN:
        return True
    return is_loopback(address)


def guard(policy: AccessPolicy):
    """Reject requests whose origin is not permitted by ``policy``.

    Administrative endpoints use LOCAL_ONLY so only the operator's machine
    can mutate data; the check-in endpoint uses LAN.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            origin = request.remote_addr
            if not is_allowed(policy, origin):
                logger.warning("Rejected %s %s from %s", request.method, request.path, origin)
                raise ForbiddenError("This action is only available on the instructor's machine")
            return view(*args, **kwargs)

        return wrapper

    return decorator


local_only = guard(AccessPolicy.LOCAL_ONLY)
lan_open = guard(AccessPolicy.LAN)
