from typing import List, Optional
import logging
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError
from schemas.user import UserCreate, UserUpdate, User, generate_user_id
from schemas.common import utcnow
from config.database import Database
from services.auth_service import hash_password
from services.errors import IntegrityViolationError

logger = logging.getLogger(__name__)

# Never read the hash back out of the collection
NO_PASSWORD = {"password": 0}

DUPLICATE_USER = "Email or username already exists"


async def _ensure_unique(db: Database, username: Optional[str], email: Optional[str], exclude_user_id: Optional[str] = None):
    clauses = []
    if username:
        clauses.append({"username": username})
    if email:
        clauses.append({"email": email})
    if not clauses:
        return

    query = {"$or": clauses}
    if exclude_user_id:
        query["user_id"] = {"$ne": exclude_user_id}

    existing = await db.users.find_one(query, NO_PASSWORD)
    if existing:
        logger.info(f"Rejected duplicate user: username={username} email={email}")
        raise IntegrityViolationError(DUPLICATE_USER)


async def create_user(db: Database, user: UserCreate) -> User:
    await _ensure_unique(db, user.username, user.email)

    user_dict = user.model_dump(exclude={"password"})
    user_dict["password"] = hash_password(user.password.get_secret_value())
    user_dict["user_id"] = generate_user_id(user.name)
    user_dict["created_at"] = utcnow()
    user_dict["updated_at"] = user_dict["created_at"]

    try:
        await db.users.insert_one(user_dict)
    except DuplicateKeyError:
        raise IntegrityViolationError(DUPLICATE_USER)

    logger.info(f"Created user {user_dict['user_id']} ({user_dict['username']}, role={user_dict['role']})")
    user_dict.pop("password")
    user_dict.pop("_id", None)
    return User(**user_dict)


async def get_user(db: Database, user_id: str) -> Optional[User]:
    user = await db.users.find_one({"user_id": user_id}, NO_PASSWORD)
    return User(**user) if user else None


async def get_owner(db: Database) -> Optional[User]:
    owner = await db.users.find_one({"role": "owner"}, NO_PASSWORD)
    return User(**owner) if owner else None


async def get_all_users(db: Database) -> List[User]:
    users = await db.users.find({}, NO_PASSWORD).sort("created_at", DESCENDING).to_list(length=None)
    return [User(**user) for user in users]


async def get_active_therapists(db: Database) -> List[User]:
    therapists = await db.users.find({"role": "therapist", "active": True}, NO_PASSWORD).to_list(length=None)
    return [User(**therapist) for therapist in therapists]


async def update_user(db: Database, user_id: str, user_data: UserUpdate) -> Optional[User]:
    update = user_data.model_dump(exclude_unset=True, exclude={"password"})
    await _ensure_unique(db, update.get("username"), update.get("email"), exclude_user_id=user_id)

    # Hash only when a new plaintext was supplied
    if user_data.password is not None:
        update["password"] = hash_password(user_data.password.get_secret_value())
    update["updated_at"] = utcnow()

    try:
        result = await db.users.update_one({"user_id": user_id}, {"$set": update})
    except DuplicateKeyError:
        raise IntegrityViolationError(DUPLICATE_USER)

    if not result.matched_count:
        return None
    logger.info(f"Updated user {user_id}: {sorted(k for k in update if k != 'password')}")
    return await get_user(db, user_id)


async def delete_user(db: Database, user_id: str) -> bool:
    result = await db.users.delete_one({"user_id": user_id})
    if result.deleted_count:
        logger.info(f"Deleted user {user_id}")
    return result.deleted_count > 0
