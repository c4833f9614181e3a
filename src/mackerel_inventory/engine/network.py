# Copyright (c) 2024 Mackerel Inventory Contributors
# MIT License

"""
Private address classification.

Only IPv4 addresses are considered. IPv6 addresses, including IPv4-mapped
ones such as ``::ffff:10.0.0.1``, never count as private here.
"""

import ipaddress
from typing import Optional

PRIVATE_NETWORKS = (
    ipaddress.IPv4Network("10.0.0.0/8"),
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("192.168.0.0/16"),
)


def parse_ipv4(address: Optional[str]) -> Optional[ipaddress.IPv4Address]:
    """Parse an IPv4 address, returning None for anything unparseable."""
    if not address or not isinstance(address, str):
        return None
    try:
        return ipaddress.IPv4Address(address)
    except ValueError:
        return None


def is_private_ip(address: Optional[str]) -> bool:
    """
    Check whether an address lies in one of the RFC 1918 ranges.
    
    Malformed addresses are not an error; they simply do not qualify.
    """
    ip = parse_ipv4(address)
    if ip is None:
        return False
    return any(ip in network for network in PRIVATE_NETWORKS)
