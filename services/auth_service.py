from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

import jwt
from passlib.context import CryptContext

from config import settings
from config.database import Database
from schemas.auth import SessionData
from schemas.user import User
from services.errors import AuthenticationError, InvalidInputError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

INVALID_CREDENTIALS = "Invalid username or password"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compare a plaintext password with a stored bcrypt hash in constant time."""
    return pwd_context.verify(plain_password, hashed_password)


def create_session_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Mint a signed session token carrying the user's id, username and role."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(days=settings.SESSION_MAX_AGE_DAYS))
    payload = {
        "sub": user.user_id,
        "username": user.username,
        "role": user.role,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_session_token(token: Optional[str]) -> Optional[SessionData]:
    """Decode a session token; None when missing, expired or tampered with."""
    if not token:
        return None
    try:
        payload: Dict[str, Any] = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
    except jwt.PyJWTError:
        return None

    user_id = payload.get("sub")
    username = payload.get("username")
    role = payload.get("role")
    if not user_id or not username or not role:
        return None
    return SessionData(user_id=user_id, username=username, role=role)


async def authenticate_user(db: Database, username: str, password: str) -> User:
    """Check credentials and return the user.

    Unknown usernames, wrong passwords and deactivated accounts all raise the
    same AuthenticationError so callers cannot tell them apart.
    """
    if not username or not password:
        raise InvalidInputError("Username and password are required")

    user = await db.users.find_one({"username": username.strip().lower()})
    if not user:
        # Spend the same time as a real comparison
        pwd_context.dummy_verify()
        logger.info(f"Failed login for username: {username}")
        raise AuthenticationError(INVALID_CREDENTIALS)

    if not verify_password(password, user["password"]) or not user.get("active", True):
        logger.info(f"Failed login for username: {username}")
        raise AuthenticationError(INVALID_CREDENTIALS)

    user.pop("password", None)
    logger.info(f"User {user['user_id']} logged in")
    return User(**user)
