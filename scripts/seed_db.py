from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from hr_ledger.config import get_settings_module
from hr_ledger.container import build_container
from hr_ledger.seed import seed_demo_data


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        store_backend=settings.STORE_BACKEND,
        data_dir=settings.DATA_DIR,
        db_config=dict(settings.DB_CONFIG),
    )

    if container.store.get_employees():
        raise SystemExit("Store already has employees; refusing to seed over existing data.")

    seed_demo_data(container)
    print(f"OK: Seeded {len(container.store.get_employees())} employees -> {settings.STORE_BACKEND}")


if __name__ == "__main__":
    main()
