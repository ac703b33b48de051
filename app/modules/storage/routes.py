from fastapi import APIRouter, Depends, UploadFile, File
from app.database.supabase_client import get_supabase
from app.modules.storage.schemas import (
    Bucket, UploadedFile, StoredObject, FileDeletedResponse, PublicUrlResponse
)
from app.modules.storage.service import StorageService
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/storage", tags=["storage"])


def get_storage_service(supabase: Client = Depends(get_supabase)) -> StorageService:
    return StorageService(supabase)


async def _read_upload(file: UploadFile) -> UploadedFile:
    content = await file.read()
    return UploadedFile.from_bytes(
        name=file.filename or "upload",
        content_type=file.content_type or "application/octet-stream",
        content=content,
    )


@router.post("/{owner_id}/avatar", response_model=StoredObject, status_code=201)
async def upload_avatar(
    owner_id: str,
    file: UploadFile = File(...),
    service: StorageService = Depends(get_storage_service)
):
    """Upload (or replace) the owner's profile image"""
    return service.upload_profile_image(owner_id, await _read_upload(file))


@router.post("/{owner_id}/portfolio", response_model=StoredObject, status_code=201)
async def upload_portfolio(
    owner_id: str,
    file: UploadFile = File(...),
    service: StorageService = Depends(get_storage_service)
):
    return service.upload_portfolio_file(owner_id, await _read_upload(file))


@router.post("/{owner_id}/attachments", response_model=StoredObject, status_code=201)
async def upload_attachment(
    owner_id: str,
    file: UploadFile = File(...),
    service: StorageService = Depends(get_storage_service)
):
    return service.upload_chat_attachment(owner_id, await _read_upload(file))


@router.post("/{owner_id}/documents", response_model=StoredObject, status_code=201)
async def upload_document(
    owner_id: str,
    file: UploadFile = File(...),
    service: StorageService = Depends(get_storage_service)
):
    return service.upload_user_document(owner_id, await _read_upload(file))


@router.get("/{bucket}", response_model=List[dict])
async def list_files(
    bucket: Bucket,
    folder: Optional[str] = None,
    service: StorageService = Depends(get_storage_service)
):
    """List up to 100 objects under a folder"""
    return service.list_files(bucket, folder)


@router.get("/{bucket}/public-url", response_model=PublicUrlResponse)
async def get_public_url(
    bucket: Bucket,
    path: str,
    service: StorageService = Depends(get_storage_service)
):
    return PublicUrlResponse(bucket=bucket, path=path, public_url=service.get_public_url(bucket, path))


@router.delete("/{bucket}", response_model=FileDeletedResponse)
async def delete_file(
    bucket: Bucket,
    path: str,
    service: StorageService = Depends(get_storage_service)
):
    """Delete one object; deleting a missing object still succeeds"""
    service.delete_file(bucket, path)
    return FileDeletedResponse(bucket=bucket, path=path)
