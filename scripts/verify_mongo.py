"""
Connectivity check for the configured MongoDB deployment.

Usage:
    python scripts/verify_mongo.py
"""

import asyncio
import sys

from dotenv import load_dotenv
from pymongo.errors import PyMongoError

load_dotenv(".env")

from parcelly.app.core.config import settings  # noqa: E402
from parcelly.app.db.mongo import MongoProvider  # noqa: E402


async def check_db() -> int:
    provider = MongoProvider(settings.database_uri, settings.db_name)
    print(f"Testing connection to: {settings.db_host}/{settings.db_name}")
    try:
        await provider.connect()
        names = await provider.database.list_collection_names()
        print(f"✅ Connection Successful! Collections: {sorted(names)}")
        return 0
    except PyMongoError as e:
        print(f"❌ Connection Failed: {e}")
        return 1
    finally:
        await provider.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(check_db()))
