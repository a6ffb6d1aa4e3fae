"""Export every time entry of the active storage to backups/*.csv."""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.audittrack.audittrack.container import build_container
from src.audittrack.audittrack.export.spreadsheet import entries_to_csv


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_dir = Path(settings.DATA_DIR)
    if not data_dir.is_absolute():
        data_dir = REPO_ROOT / data_dir

    container = build_container(data_dir=data_dir)
    state = container.build_state()
    state.refresh()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"audittrack_entries_{ts}.csv"
    out_file.write_text(entries_to_csv(state.entries), encoding="utf-8-sig")

    print(f"OK: Backup created: {out_file} ({len(state.entries)} entries)")


if __name__ == "__main__":
    main()
