import logging

import motor.motor_asyncio

from config import MONGO_URI, MONGO_DB

logger = logging.getLogger(__name__)

mongo_client = None
mongo_db = None


async def connect_to_mongo():
    """Open the motor client for MONGO_URI; storage sees None until this runs."""
    global mongo_client, mongo_db

    if not MONGO_URI:
        logger.warning("⚠️ MONGO_URI not set, skipping Mongo connection")
        return

    mongo_client = motor.motor_asyncio.AsyncIOMotorClient(MONGO_URI)
    mongo_db = mongo_client[MONGO_DB]
    logger.info("✅ Connected to MongoDB (DB=%s)", MONGO_DB)


async def close_mongo_connection():
    """Close the client and reset the handle so later lookups fail soft."""
    global mongo_client, mongo_db

    if mongo_client:
        mongo_client.close()
        mongo_client = None
        mongo_db = None
        logger.info("🔻 MongoDB connection closed")


def get_db():
    """Current catalog database, or None when MongoDB is not connected."""
    return mongo_db
