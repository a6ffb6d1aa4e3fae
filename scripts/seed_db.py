"""Make sure the active storage has its default administrator."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.audittrack.audittrack.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_dir = Path(settings.DATA_DIR)
    if not data_dir.is_absolute():
        data_dir = REPO_ROOT / data_dir

    container = build_container(data_dir=data_dir)
    state = container.build_state()
    state.refresh()

    print(f"OK: {len(state.people)} collaborator(s) in {state.gateway.describe()}")


if __name__ == "__main__":
    main()
