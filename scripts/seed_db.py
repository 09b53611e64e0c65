from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.campus_events.campus_events.database.bootstrap import seed_demo_data
from src.campus_events.campus_events.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    counts = seed_demo_data(db_config)
    summary = ", ".join(f"{table}={n}" for table, n in counts.items())
    print(f"OK: Seeded database -> {DBConfig.from_dict(db_config).describe()} ({summary})")


if __name__ == "__main__":
    main()
