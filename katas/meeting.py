"""Sort a guest list by last name, then first name."""

from __future__ import annotations


def _parse(entry: str) -> tuple[str, str]:
    parts = entry.split(":")
    if len(parts) < 2:
        raise ValueError(f"malformed guest entry: {entry!r}")
    return parts[0], parts[1]


def meeting(s: str) -> str:
    """Return the guests in ``s`` as ``(LAST, FIRST)`` groups in sorted order."""
    guests = [_parse(entry) for entry in s.split(";")]
    guests.sort(key=lambda guest: (guest[1].lower(), guest[0].lower()))
    return "".join(f"({last}, {first})".upper() for first, last in guests)