"""Create the campus events database (if needed) and apply database/schema.sql."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.campus_events.campus_events.database.bootstrap import apply_schema, list_tables
from src.campus_events.campus_events.database.connection import DBConfig
from src.campus_events.campus_events.main import DATABASE_DIR


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = DBConfig.from_dict(db_config).describe()

    apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
    tables = sorted(list_tables(db_config))
    print(f"OK: schema applied to {target}: {', '.join(tables)}")


if __name__ == "__main__":
    main()
