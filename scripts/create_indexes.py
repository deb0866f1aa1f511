"""
MongoDB Index Creation Script

Creates the indexes every repository declares. The API also does this on
startup; run it by hand after restoring a dump or against production.

Usage:
    python scripts/create_indexes.py [--prod]
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to Python path to allow importing from root
sys.path.insert(0, str(Path(__file__).parent.parent))

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import OperationFailure

from config import settings
from logging_config import logger
from repositories import CustomerRepository, DepartmentRepository, EmployeeRepository


async def create_indexes(use_prod: bool = False) -> None:
    """Create all collection indexes"""
    db_name = settings.get_db_name(use_prod)
    client = AsyncIOMotorClient(settings.get_db_url(use_prod))
    db = client[db_name]

    logger.info(f"Starting index creation for database: {db_name}...")

    try:
        for repository_class in (EmployeeRepository, DepartmentRepository, CustomerRepository):
            repository = repository_class(db)
            try:
                await repository.ensure_indexes()
                logger.info(f"  ✓ Indexes ready on {repository.collection_name}")
            except OperationFailure as e:
                if "already exists" in str(e) or "IndexOptionsConflict" in str(e):
                    logger.info(f"  ↷ Index already exists on {repository.collection_name}")
                else:
                    logger.error(
                        f"  ✗ Failed to create indexes on {repository.collection_name}: {str(e)}"
                    )
                    raise
        logger.info("Index creation finished")
    finally:
        client.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Create MongoDB indexes.')
    parser.add_argument('--prod',
                        action='store_true',
                        help='Create indexes in production database.')
    args = parser.parse_args()
    asyncio.run(create_indexes(args.prod))
