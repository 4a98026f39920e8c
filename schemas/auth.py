from pydantic import SecretStr
from typing import Optional
from schemas.common import SalonModel
from schemas.user import User


class LoginRequest(SalonModel):
    username: str = ""
    password: SecretStr = SecretStr("")
    callback_url: Optional[str] = None


class LoginResponse(SalonModel):
    user: User
    redirect_to: str


class SessionData(SalonModel):
    user_id: str
    username: str
    role: str
