#!/usr/bin/env python3
"""
Database bootstrap tool - creates the database, Products table and index if missing
"""

import os
import sys
import asyncio
import argparse
import logging
from dotenv import load_dotenv

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from database.bootstrap import run_bootstrap

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Main CLI interface"""
    load_dotenv()

    parser = argparse.ArgumentParser(description="Ensure the products database and schema exist")
    parser.add_argument(
        "--database-url",
        default=os.getenv("DATABASE_URL"),
        help="PostgreSQL URL of the target database (default: $DATABASE_URL)"
    )
    parser.add_argument(
        "--admin-database",
        default=os.getenv("ADMIN_DATABASE", "postgres"),
        help="Administrative database used to create the target database"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    if not args.database_url:
        parser.error("a database URL is required (--database-url or DATABASE_URL)")

    result = asyncio.run(run_bootstrap(args.database_url, args.admin_database))

    if not result.success:
        print(f"❌ Bootstrap failed for {result.database or 'unknown database'}: {result.error}")
        return 1

    action = "created" if result.database_created else "already existed"
    print(f"✅ Database {result.database} {action}; Products schema is in place")
    return 0


if __name__ == "__main__":
    sys.exit(main())
