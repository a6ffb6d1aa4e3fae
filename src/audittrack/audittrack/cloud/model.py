from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

SUPPORTED_SCHEMES = {"mysql", "mysql+mysqlconnector"}


@dataclass(frozen=True)
class RemoteConfig:
    """Endpoint + credential of the shared MySQL database.

    ``url`` looks like ``mysql://user@host:3306/audittrack``; ``key`` is the
    database password.
    """

    url: str
    key: str

    @classmethod
    def from_dict(cls, data) -> Optional["RemoteConfig"]:
        """Build from a decoded JSON object; ``None`` when a field is missing."""
        if not isinstance(data, dict):
            return None
        url = str(data.get("url") or "").strip()
        key = str(data.get("key") or "").strip()
        if not url or not key:
            return None
        return cls(url=url, key=key)

    def to_dict(self) -> dict:
        return {"url": self.url, "key": self.key}

    def is_valid(self) -> bool:
        try:
            parsed = urlparse(self.url)
            parsed.port  # raises ValueError on a malformed port
        except ValueError:
            return False
        return (
            parsed.scheme in SUPPORTED_SCHEMES
            and bool(parsed.hostname)
            and bool(parsed.path.strip("/"))
            and bool(self.key)
        )
