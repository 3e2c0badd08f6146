"""Command line helpers for operating the service.

Usage:
    glowup-admin create-admin EMAIL [--password PASSWORD] [--full-name NAME]
    glowup-admin init-db
"""

import argparse
import getpass
import logging
import sys
from typing import List, Optional

from .auth import DatabaseAuthProvider
from .db import Database, DatabaseConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def _database(url: Optional[str]) -> Database:
    return Database(DatabaseConfig(url=url)) if url else Database()

def create_admin(database: Database, email: str, password: str, full_name: Optional[str] = None) -> str:
    """Create a user and put them on the admin list."""
    database.init_db()
    provider = DatabaseAuthProvider(database)
    user_id = provider.create_user(email, password, is_admin=True, full_name=full_name)
    logger.info(f"Admin {email} created with id {user_id}")
    return user_id

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Glow Up Diaries admin tools")
    parser.add_argument('--database-url', help="Override the environment's database URL")
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    create_parser = subparsers.add_parser('create-admin', help="Create an admin account")
    create_parser.add_argument('email')
    create_parser.add_argument('--password', help="Prompted for if omitted")
    create_parser.add_argument('--full-name')
    
    subparsers.add_parser('init-db', help="Create any missing tables")
    
    args = parser.parse_args(argv)
    database = _database(args.database_url)
    
    try:
        if args.command == 'init-db':
            database.init_db()
        else:
            password = args.password or getpass.getpass("Password: ")
            create_admin(database, args.email, password, args.full_name)
    except Exception as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
