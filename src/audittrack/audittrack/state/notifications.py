from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Iterable, Iterator, Optional

from ..common.datetime_utils import now_local
from ..core.constants import MAX_NOTIFICATIONS
from ..core.enums import Severity


@dataclass(frozen=True)
class Notification:
    id: str
    message: str
    severity: Severity
    timestamp: str


class NotificationQueue:
    """Newest-first list of transient messages, capped at ``limit``."""

    def __init__(self, items: Iterable[Notification] = (), *, limit: int = MAX_NOTIFICATIONS):
        self._limit = int(limit)
        self._items: list[Notification] = list(items)[: self._limit]

    def push(self, message: str, severity: Severity = Severity.INFO, *, now: Optional[datetime] = None) -> Notification:
        now = now or now_local()
        # Same-millisecond pushes still need distinct ids
        stamp = int(now.timestamp() * 1000)
        while any(n.id == str(stamp) for n in self._items):
            stamp += 1

        item = Notification(
            id=str(stamp),
            message=message,
            severity=Severity(severity),
            timestamp=now.strftime("%H:%M:%S"),
        )
        self._items = [item, *self._items][: self._limit]
        return item

    def clear(self) -> None:
        self._items = []

    def __iter__(self) -> Iterator[Notification]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[Notification]:
        return list(self._items)

    def to_list(self) -> list[dict]:
        return [{**asdict(n), "severity": n.severity.value} for n in self._items]

    @classmethod
    def from_list(cls, data) -> "NotificationQueue":
        items = []
        for raw in data or []:
            try:
                items.append(
                    Notification(
                        id=str(raw["id"]),
                        message=str(raw["message"]),
                        severity=Severity(raw.get("severity", Severity.INFO.value)),
                        timestamp=str(raw.get("timestamp", "")),
                    )
                )
            except (KeyError, TypeError, ValueError):
                continue
        return cls(items)
