"""Count addresses between two IPv4 addresses and validate address strings."""

from __future__ import annotations

import ipaddress
import re

_OCTET = re.compile(r"[+-]?[0-9]+")


def _parse_ipv4(text: str) -> tuple[int, int, int, int]:
    parts = text.split(".")
    if len(parts) != 4 or not all(_OCTET.fullmatch(part) for part in parts):
        raise ValueError(f"invalid ip address: {text}")
    a, b, c, d = (int(part) for part in parts)
    return a, b, c, d


def ips_between(start: str, end: str) -> int:
    """Return how many addresses lie from ``start`` (inclusive) to ``end`` (exclusive)."""
    total = 0
    for first, second in zip(_parse_ipv4(start), _parse_ipv4(end)):
        total = total * 256 + (second - first)
    return total


def is_valid_ip(ip: str) -> bool:
    """Return whether ``ip`` is an address written in its canonical form."""
    if "%" in ip:
        return False
    try:
        address = ipaddress.ip_address(ip)
    except ValueError:
        return False
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped:
        return str(address.ipv4_mapped) == ip
    return str(address) == ip