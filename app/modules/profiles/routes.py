from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.profiles.schemas import ProfileCreate, ProfileResponse, IntentFilter
from app.modules.profiles.service import ProfileService
from supabase import Client
from typing import List

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(supabase: Client = Depends(get_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.post("", response_model=ProfileResponse, status_code=201)
async def create_profile(
    profile_data: ProfileCreate,
    service: ProfileService = Depends(get_profile_service)
):
    """Create a profile. A taken email answers 409 with reason "email-taken"."""
    return service.create_profile(profile_data)


@router.get("", response_model=List[ProfileResponse])
async def list_profiles(
    search: str = "",
    intent: IntentFilter = IntentFilter.ALL,
    service: ProfileService = Depends(get_profile_service)
):
    """List profiles newest first, optionally narrowed by search text and intent"""
    return service.search_profiles(search, intent)


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(
    profile_id: str,
    service: ProfileService = Depends(get_profile_service)
):
    """Get profile by ID"""
    return service.get_profile_by_id(profile_id)
