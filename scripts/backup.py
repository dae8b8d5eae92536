"""Backup every stored collection into one JSON file.

Works for all store backends since it goes through the record store.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from hr_ledger.config import get_settings_module
from hr_ledger.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        store_backend=settings.STORE_BACKEND,
        data_dir=settings.DATA_DIR,
        db_config=dict(settings.DB_CONFIG),
    )

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"hr_ledger_{ts}.json"
    out_file.write_text(json.dumps(container.store.dump(), ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
