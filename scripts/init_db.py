from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from worktime.database.bootstrap import apply_schema, list_tables
from worktime.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_schema(config, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = list_tables(config)
    print(f"OK: Applied schema.sql -> {config.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
