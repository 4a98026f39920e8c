import logging
from schemas.settings import LogoSettings
from schemas.common import utcnow
from config.database import Database

logger = logging.getLogger(__name__)

# The settings collection holds a single document
SETTINGS_KEY = {"key": "branding"}


async def get_logo(db: Database) -> LogoSettings:
    settings = await db.settings.find_one(SETTINGS_KEY)
    return LogoSettings(**settings) if settings else LogoSettings()


async def update_logo(db: Database, logo: str) -> LogoSettings:
    await db.settings.update_one(
        SETTINGS_KEY,
        {"$set": {"logo": logo, "updated_at": utcnow()}},
        upsert=True
    )
    logger.info("Branding logo updated")
    return await get_logo(db)
