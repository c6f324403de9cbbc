"""Naming Series — Frappe-style sequential document names ("SIG00001", "TR-00001").

Invariants:
    - next name = prefix + zero-padded (highest existing number + 1)
    - Names not matching prefix + digits are ignored when finding the highest number
    - Padding widens naturally past 99999 (never truncates)
    - Gaps below the highest number are never filled; deleting the highest name
      frees that number for the next one
"""

import re


def next_in_series(existing: list[str], prefix: str, width: int = 5) -> str:
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    highest = 0
    for name in existing:
        m = pattern.match(name or "")
        if m:
            highest = max(highest, int(m.group(1)))
    return f"{prefix}{highest + 1:0{width}d}"


def next_driver_doc_name(existing: list[str]) -> str:
    return next_in_series(existing, "SIG")


def next_trip_id(existing: list[str]) -> str:
    return next_in_series(existing, "TR-")
