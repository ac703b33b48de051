from enum import Enum
from pydantic import BaseModel
from typing import Optional


class Bucket(str, Enum):
    PROFILE_IMAGES = "profile-images"
    PORTFOLIO_FILES = "portfolio-files"
    CHAT_ATTACHMENTS = "chat-attachments"
    USER_DOCUMENTS = "user-documents"


class UploadedFile(BaseModel):
    """A user-supplied file waiting to be validated and transferred."""
    name: str
    content_type: str
    size: int
    content: bytes = b""

    @classmethod
    def from_bytes(cls, name: str, content_type: str, content: bytes) -> "UploadedFile":
        return cls(name=name, content_type=content_type, size=len(content), content=content)


class StoredObject(BaseModel):
    bucket: Bucket
    path: str
    full_path: Optional[str] = None
    public_url: Optional[str] = None


class FileDeletedResponse(BaseModel):
    bucket: Bucket
    path: str
    deleted: bool = True


class PublicUrlResponse(BaseModel):
    bucket: Bucket
    path: str
    public_url: str
