from typing import Optional
from datetime import datetime
from schemas.common import SalonModel


class LogoSettings(SalonModel):
    logo: str = ""
    updated_at: Optional[datetime] = None


class LogoUpdate(SalonModel):
    logo: str
