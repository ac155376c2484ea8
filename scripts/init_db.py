"""
Database initialization script.

Creates the schedule tables directly (no Alembic).  Use
``alembic upgrade head`` for managed databases.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from loguru import logger

from app.db.init_db import init_db

if __name__ == "__main__":
    try:
        init_db()
    except Exception:
        logger.exception("Database initialization failed")
        sys.exit(1)
    sys.exit(0)
