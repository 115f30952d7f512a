# create_tables.py
import argparse
import sys

from sqlalchemy.exc import SQLAlchemyError

from taskhub.config import Settings
from taskhub.database import Database


def create_tables(database: Database, drop: bool = False) -> bool:
    """Create all tables, optionally dropping the existing ones first"""
    try:
        if drop:
            # metadata.drop_all orders the drops by foreign key dependency
            database.drop_all()
            print("Existing tables dropped")

        database.create_all()
        print("✅ All tables created successfully!")
        return True
    except SQLAlchemyError as e:
        print(f"❌ Error creating tables: {e}")
        return False


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the Team Task Hub database schema")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first (destroys data)")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    database = Database(settings.database_url, settings.db_statement_timeout_ms)
    try:
        return 0 if create_tables(database, drop=args.drop) else 1
    finally:
        database.dispose()


if __name__ == "__main__":
    sys.exit(main())
