"""
Initialize the database: create all tables.
Run with: python -m scripts.init_db
"""

import asyncio

from vitals_api.config import get_settings
from vitals_api.database import Database


async def init():
    db = Database(get_settings())
    print("Creating database tables...")
    await db.create_all()
    print("All tables created successfully.")
    await db.dispose()


if __name__ == "__main__":
    asyncio.run(init())
