"""Example: run every report for the demo college through the service layer (no Flask).

Run ``python scripts/init_db.py && python scripts/seed_db.py`` first.
"""

import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.campus_events.campus_events.container import build_container
from src.campus_events.campus_events.reports.service import REPORT_NAMES


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    try:
        for name in REPORT_NAMES:
            rows = container.report_service.run(name, {"collegeId": "C001"})
            print(name)
            print(json.dumps(rows, indent=2))
    finally:
        container.conn.close()


if __name__ == "__main__":
    main()
