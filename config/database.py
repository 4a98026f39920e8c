from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from fastapi import Request
from typing import Optional
import logging
import asyncio
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
from config import settings

logger = logging.getLogger('database')

COLLECTIONS = [
    'users', 'customers', 'services', 'transactions', 'appointments',
    'consultation_forms', 'therapist_hours', 'settings'
]


class Database:
    """Handle on the salon database.

    One instance is built when the application starts and handed to every
    request through the ``get_db`` dependency.
    """
    MAX_RETRIES = 3
    RETRY_DELAY = 1  # seconds

    def __init__(self, db: AsyncIOMotorDatabase, client: Optional[AsyncIOMotorClient] = None):
        self.client = client
        self.db = db

        self.users = db.users
        self.customers = db.customers
        self.services = db.services
        self.transactions = db.transactions
        self.appointments = db.appointments
        self.consultation_forms = db.consultation_forms
        self.therapist_hours = db.therapist_hours
        self.settings = db.settings

    @classmethod
    async def connect(cls, mongodb_url: Optional[str] = None, database_name: Optional[str] = None) -> 'Database':
        """Create database connection with retries."""
        mongodb_url = mongodb_url or settings.MONGODB_URL
        database_name = database_name or settings.DATABASE_NAME

        if not mongodb_url:
            raise ValueError("MONGODB_URL environment variable is not set")

        retries = 0
        last_error = None

        while retries < cls.MAX_RETRIES:
            try:
                logger.info(f"Attempting to connect to MongoDB (Attempt {retries + 1}/{cls.MAX_RETRIES})")

                client = AsyncIOMotorClient(
                    mongodb_url,
                    serverSelectionTimeoutMS=5000,
                    connectTimeoutMS=10000,
                    socketTimeoutMS=10000,
                    maxPoolSize=50,
                    retryWrites=True,
                    retryReads=True
                )
                db = client[database_name]

                # Test the connection
                await db.command('ping')

                logger.info(f"Successfully connected to MongoDB database: {database_name}")

                # Initialize collections if they don't exist
                existing = await db.list_collection_names()
                for collection in COLLECTIONS:
                    if collection not in existing:
                        await db.create_collection(collection)
                        logger.info(f"Created collection: {collection}")

                database = cls(db, client)
                await database.ensure_indexes()
                return database

            except (ConnectionFailure, ServerSelectionTimeoutError) as e:
                last_error = e
                retries += 1
                if retries < cls.MAX_RETRIES:
                    logger.warning(f"Failed to connect to MongoDB (Attempt {retries}/{cls.MAX_RETRIES}). Retrying in {cls.RETRY_DELAY} seconds...")
                    await asyncio.sleep(cls.RETRY_DELAY)
                continue
            except Exception as e:
                logger.error(f"Unexpected error connecting to MongoDB: {str(e)}")
                raise

        logger.error(f"Failed to connect to MongoDB after {cls.MAX_RETRIES} attempts")
        raise last_error

    async def ensure_indexes(self):
        await self.users.create_index([("username", ASCENDING)], unique=True)
        await self.users.create_index([("email", ASCENDING)], unique=True)
        await self.customers.create_index([("email", ASCENDING)], unique=True, sparse=True)
        await self.transactions.create_index([("date", DESCENDING)])
        await self.transactions.create_index([("customer.id", ASCENDING)])
        await self.transactions.create_index([("therapist.id", ASCENDING)])
        await self.appointments.create_index([("start_time", ASCENDING), ("end_time", ASCENDING)])
        await self.consultation_forms.create_index([("customer_id", ASCENDING)])
        await self.therapist_hours.create_index(
            [("therapist_id", ASCENDING), ("date", ASCENDING)], unique=True
        )

    def close(self):
        """Close database connection."""
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB connection closed.")


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the application's database handle."""
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database not initialized. The application lifespan did not connect.")
    return db
