from pydantic import BaseModel, EmailStr
from datetime import datetime


class MessageCreate(BaseModel):
    from_email: EmailStr
    to_email: EmailStr
    message: str


class MessageResponse(BaseModel):
    id: str
    from_email: str
    to_email: str
    message: str
    timestamp: datetime

    class Config:
        from_attributes = True


class MessageSentResponse(BaseModel):
    from_email: str
    to_email: str
    message: str = "Message sent"


class ProfileMessageCreate(BaseModel):
    from_email: EmailStr
    message: str
