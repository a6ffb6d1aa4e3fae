from __future__ import annotations

import threading
import time
from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it easily.
    """
    return datetime.now()


_id_lock = threading.Lock()
_last_ms = 0


def new_time_id(prefix: str) -> str:
    """Time-based identifier such as ``entry_1735689600000``.

    Milliseconds are bumped when two ids are requested within the same
    millisecond, so ids issued by one process never collide.
    """
    global _last_ms
    with _id_lock:
        ms = time.time_ns() // 1_000_000
        if ms <= _last_ms:
            ms = _last_ms + 1
        _last_ms = ms
    return f"{prefix}_{ms}"
