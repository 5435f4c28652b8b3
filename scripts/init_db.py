#!/usr/bin/env python
"""Create the payroll admin tables in an empty database.

This only creates missing tables from the ORM metadata; it does not alter
existing ones.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --database-url sqlite+aiosqlite:///payroll_admin.db
    python scripts/init_db.py --dry-run
"""

import argparse
import asyncio
import os
import sys

from sqlalchemy import create_mock_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from payroll_admin.config import get_settings
from payroll_admin.database import create_schema
from payroll_admin.models import Base


def print_ddl(database_url: str) -> None:
    """Print CREATE statements for the target dialect without connecting."""

    def dump(sql, *multiparams, **params):
        print(f"{str(sql.compile(dialect=engine.dialect)).strip()};\n")

    engine = create_mock_engine(database_url, dump)
    Base.metadata.create_all(engine, checkfirst=False)


async def apply_schema(database_url: str) -> None:
    engine = create_async_engine(database_url)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Create payroll admin tables")
    parser.add_argument(
        "--database-url",
        default=os.environ.get("DATABASE_URL", get_settings().database_url),
        help="Database URL",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the DDL instead of executing it",
    )

    args = parser.parse_args()

    print("Payroll Admin Schema Setup")
    print("=" * 50)
    print(f"Database: {args.database_url.split('@')[-1] if '@' in args.database_url else args.database_url}")
    print(f"Tables: {', '.join(sorted(Base.metadata.tables))}")
    print()

    if args.dry_run:
        print_ddl(args.database_url)
        return 0

    try:
        asyncio.run(apply_schema(args.database_url))
    except SQLAlchemyError as e:
        print(f"ERROR: Could not create tables: {e}")
        return 1

    print("Schema ready.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
