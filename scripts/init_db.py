"""Apply database/schema.sql to the shared MySQL database.

Usage: python scripts/init_db.py [MAGIC_LINK]
Without a link, the configuration saved in the local mirror is used.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.audittrack.audittrack.cloud.resolver import ConfigResolver
from src.audittrack.audittrack.database.bootstrap import apply_schema, list_tables
from src.audittrack.audittrack.database.connection import DBConfig
from src.audittrack.audittrack.storage.local_store import LocalStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_dir = Path(settings.DATA_DIR)
    if not data_dir.is_absolute():
        data_dir = REPO_ROOT / data_dir

    resolver = ConfigResolver(LocalStore(data_dir))
    fragment = sys.argv[1].split("#", 1)[-1] if len(sys.argv) > 1 else None
    remote = resolver.resolve(fragment)
    if remote is None or not remote.is_valid():
        raise SystemExit("Aucune configuration distante valide (lien magique ou réglages).")

    db_config = DBConfig.from_remote_config(remote)
    apply_schema(db_config)
    print(f"OK: Applied schema.sql -> {db_config.describe()} (tables={len(list_tables(db_config))})")


if __name__ == "__main__":
    main()
