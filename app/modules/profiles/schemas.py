from enum import Enum
from pydantic import BaseModel, EmailStr, StringConstraints
from typing import Annotated, Optional, List
from datetime import datetime


class Intent(str, Enum):
    COFOUNDER = "cofounder"
    CLIENT = "client"
    TEAMMATE = "teammate"


class IntentFilter(str, Enum):
    """Intent filter for the members listing; ALL disables intent filtering."""
    ALL = "all"
    COFOUNDER = "cofounder"
    CLIENT = "client"
    TEAMMATE = "teammate"


class ProfileCreate(BaseModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    email: EmailStr
    ikigai: str = ""
    skills: str = ""  # comma-separated, as typed into the form
    interests: str = ""  # comma-separated, as typed into the form
    intent: Intent
    portfolio_url: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    working_style: str = ""
    availability: str = ""


class ProfileResponse(BaseModel):
    id: str
    name: str
    email: str
    ikigai: str = ""
    skills: List[str] = []
    interests: List[str] = []
    intent: Intent
    portfolio_url: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    working_style: str = ""
    availability: str = ""
    created_at: datetime

    class Config:
        from_attributes = True
