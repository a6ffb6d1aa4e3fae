from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStore:
    """Namespaced key-value store on disk, one JSON document per key.

    The API mirrors a browser's localStorage (get/set/remove by string key)
    so the local mirror keeps the same keys as the shared deployment.
    """

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._dir

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._dir / f"{key}.json"

    def has(self, key: str) -> bool:
        return self._path(key).exists()

    def get(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        if not path.exists():
            return default
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.exception("Unreadable local snapshot %s", path)
            return default

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        self._dir.mkdir(parents=True, exist_ok=True)

        # Atomic write: temp file in the same directory, then replace.
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(value, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except Exception:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise

    def remove(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()

    def get_list(self, key: str) -> Optional[list]:
        value = self.get(key)
        return value if isinstance(value, list) else None
