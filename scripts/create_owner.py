"""Create the first owner account.

Every user endpoint needs a signed-in session, so the first owner has to be
created directly against the database:

    python -m scripts.create_owner <username> <email> <name> <password>
"""
from config.database import Database
from config.logging_config import setup_logging
from crud import user_crud
from schemas.user import UserCreate
from services.errors import IntegrityViolationError
from pydantic import ValidationError
import asyncio
import logging
import sys

setup_logging()
logger = logging.getLogger(__name__)


async def create_owner(username: str, email: str, name: str, password: str):
    db = await Database.connect()
    try:
        existing = await user_crud.get_owner(db)
        if existing:
            logger.info(f"Owner already exists: {existing.username} ({existing.user_id})")
            return existing

        owner = await user_crud.create_user(db, UserCreate(
            username=username,
            email=email,
            name=name,
            password=password,
            role="owner"
        ))
        logger.info(f"Created owner {owner.username} ({owner.user_id})")
        return owner
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 5:
        print(__doc__)
        sys.exit(1)
    try:
        asyncio.run(create_owner(*sys.argv[1:]))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except (ValidationError, IntegrityViolationError) as e:
        logger.error(f"Could not create owner: {str(e)}")
        sys.exit(1)
