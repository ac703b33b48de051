"""Per-bucket upload policy and storage path derivation."""
import re
import time
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from app.core.exceptions import FileTooLargeError, UnsupportedFileTypeError
from app.modules.storage.schemas import Bucket, UploadedFile

MB = 1024 * 1024

IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/webp", "image/gif"})
WORD_TYPES = frozenset({
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
})
SPREADSHEET_TYPES = frozenset({
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
})
PDF = "application/pdf"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


@dataclass(frozen=True)
class BucketPolicy:
    max_size: int
    allowed_types: FrozenSet[str]


BUCKET_POLICIES: Dict[Bucket, BucketPolicy] = {
    Bucket.PROFILE_IMAGES: BucketPolicy(
        max_size=5 * MB,
        allowed_types=IMAGE_TYPES,
    ),
    Bucket.PORTFOLIO_FILES: BucketPolicy(
        max_size=50 * MB,
        allowed_types=IMAGE_TYPES | WORD_TYPES | {
            PDF, "video/mp4", "video/webm", "audio/mpeg", "audio/wav",
        },
    ),
    Bucket.CHAT_ATTACHMENTS: BucketPolicy(
        max_size=10 * MB,
        allowed_types=IMAGE_TYPES | WORD_TYPES | {PDF, "text/plain"},
    ),
    Bucket.USER_DOCUMENTS: BucketPolicy(
        max_size=20 * MB,
        allowed_types=IMAGE_TYPES | WORD_TYPES | SPREADSHEET_TYPES | {
            PDF, "text/plain", "text/csv",
        },
    ),
}


def validate_file(file: UploadedFile, bucket: Bucket) -> bool:
    """Raise if `file` breaks the bucket's size or type policy. Size is checked first."""
    policy = BUCKET_POLICIES[Bucket(bucket)]
    if file.size > policy.max_size:
        raise FileTooLargeError(Bucket(bucket).value, policy.max_size, file.size)
    if file.content_type not in policy.allowed_types:
        raise UnsupportedFileTypeError(Bucket(bucket).value, file.content_type)
    return True


def sanitize_filename(file_name: str) -> str:
    return _UNSAFE_FILENAME_CHARS.sub("_", file_name)


def generate_file_path(
    owner_id: str,
    file_name: str,
    folder: Optional[str] = None,
    now_ms: Optional[int] = None,
) -> str:
    """Build `{folder/}{owner_id}/{epoch_millis}_{sanitized_name}`. No I/O."""
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    base_path = f"{folder}/{owner_id}" if folder else owner_id
    return f"{base_path}/{timestamp}_{sanitize_filename(file_name)}"
