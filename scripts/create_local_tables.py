#!/usr/bin/env python3
"""Create the travel_places table for local development.

Uses the ORM metadata directly, so no Alembic history is written. Run
``alembic upgrade head`` instead against shared databases.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config
from core.db import Base, Database


def main():
    """Create all tables known to Base.metadata."""
    with Database(get_config()) as database:
        url = database.url.render_as_string(hide_password=True)
        print(f"Creating tables at {url}...")
        print()

        Base.metadata.create_all(database.engine)
        for table_name in Base.metadata.tables:
            print(f"✓ {table_name} table ready")

    print()
    print("✅ All tables ready")


if __name__ == "__main__":
    main()
