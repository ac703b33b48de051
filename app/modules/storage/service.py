from supabase import Client
from app.modules.storage.schemas import Bucket, UploadedFile, StoredObject
from app.modules.storage.policy import validate_file, generate_file_path
from app.core.exceptions import AppException
from app.core.store_errors import translate_store_error
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

# Listing is capped; there is no pagination beyond the first page
LIST_LIMIT = 100

AVATAR_FOLDER = "avatars"
PORTFOLIO_FOLDER = "portfolio"
ATTACHMENT_FOLDER = "attachments"
DOCUMENT_FOLDER = "documents"


class StorageService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _bucket(self, bucket: Bucket):
        return self.supabase.storage.from_(Bucket(bucket).value)

    def upload_file(
        self,
        bucket: Bucket,
        path: str,
        file: UploadedFile,
        overwrite: bool = False,
    ) -> StoredObject:
        """Transfer bytes to bucket/path. Without overwrite an existing object is a conflict."""
        bucket = Bucket(bucket)
        try:
            response = self._bucket(bucket).upload(
                path=path,
                file=file.content,
                file_options={
                    "content-type": file.content_type,
                    "upsert": "true" if overwrite else "false",
                },
            )
        except Exception as e:
            raise translate_store_error(
                e, "upload_file", bucket.value,
                conflict_message=f"An object already exists at {path} in {bucket.value}",
                conflict_reason="object-exists",
            ) from e

        logger.info(f"Uploaded {path} to {bucket.value} ({file.size} bytes)")
        return StoredObject(
            bucket=bucket,
            path=path,
            full_path=getattr(response, "full_path", None),
        )

    def get_public_url(self, bucket: Bucket, path: str) -> str:
        """Public URL for bucket/path; does not check that the object exists"""
        return self._bucket(bucket).get_public_url(path)

    def delete_file(self, bucket: Bucket, path: str) -> bool:
        """Delete one object. Deleting a missing object is not an error."""
        bucket = Bucket(bucket)
        try:
            removed = self._bucket(bucket).remove([path])
        except Exception as e:
            raise translate_store_error(e, "delete_file", bucket.value) from e
        if removed:
            logger.info(f"Deleted {path} from {bucket.value}")
        else:
            logger.info(f"Nothing to delete at {path} in {bucket.value}")
        return True

    def list_files(self, bucket: Bucket, folder: Optional[str] = None) -> List[dict]:
        """First page (up to 100 entries) of the objects under folder"""
        bucket = Bucket(bucket)
        try:
            entries = self._bucket(bucket).list(folder or "", {
                "limit": LIST_LIMIT,
                "offset": 0,
            })
        except Exception as e:
            raise translate_store_error(e, "list_files", bucket.value) from e
        return list(entries or [])[:LIST_LIMIT]

    def _validated_upload(
        self,
        bucket: Bucket,
        folder: str,
        owner_id: str,
        file: UploadedFile,
        overwrite: bool,
    ) -> StoredObject:
        try:
            validate_file(file, bucket)
        except AppException as e:
            logger.warning(f"Rejected upload of {file.name} to {bucket.value}: {e}")
            raise
        path = generate_file_path(owner_id, file.name, folder)
        stored = self.upload_file(bucket, path, file, overwrite=overwrite)
        stored.public_url = self.get_public_url(bucket, stored.path)
        return stored

    def upload_profile_image(self, owner_id: str, file: UploadedFile) -> StoredObject:
        """One avatar per user: later uploads replace the earlier object"""
        return self._validated_upload(Bucket.PROFILE_IMAGES, AVATAR_FOLDER, owner_id, file, overwrite=True)

    def upload_portfolio_file(self, owner_id: str, file: UploadedFile) -> StoredObject:
        return self._validated_upload(Bucket.PORTFOLIO_FILES, PORTFOLIO_FOLDER, owner_id, file, overwrite=False)

    def upload_chat_attachment(self, owner_id: str, file: UploadedFile) -> StoredObject:
        return self._validated_upload(Bucket.CHAT_ATTACHMENTS, ATTACHMENT_FOLDER, owner_id, file, overwrite=False)

    def upload_user_document(self, owner_id: str, file: UploadedFile) -> StoredObject:
        return self._validated_upload(Bucket.USER_DOCUMENTS, DOCUMENT_FOLDER, owner_id, file, overwrite=False)
