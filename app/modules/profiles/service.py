from supabase import Client
from postgrest.exceptions import APIError
from app.modules.profiles.schemas import ProfileCreate, ProfileResponse, IntentFilter
from app.modules.profiles.filters import filter_profiles
from app.core.exceptions import NotFoundError, UnknownError
from app.core.store_errors import translate_store_error, INVALID_TEXT_REPRESENTATION
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

TABLE = "profiles"


def split_list_field(text: Optional[str]) -> List[str]:
    """Split comma-separated form input into trimmed, non-empty entries."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    filter_profiles = staticmethod(filter_profiles)

    def create_profile(self, profile_data: ProfileCreate) -> ProfileResponse:
        """Insert one profile row and return it with its generated id"""
        row = {
            "name": profile_data.name.strip(),
            "email": str(profile_data.email),
            "ikigai": profile_data.ikigai,
            "skills": split_list_field(profile_data.skills),
            "interests": split_list_field(profile_data.interests),
            "intent": profile_data.intent.value,
            "portfolio_url": _blank_to_none(profile_data.portfolio_url),
            "linkedin": _blank_to_none(profile_data.linkedin),
            "twitter": _blank_to_none(profile_data.twitter),
            "working_style": profile_data.working_style,
            "availability": profile_data.availability,
        }
        try:
            result = self.supabase.table(TABLE).insert(row).execute()
        except Exception as e:
            raise translate_store_error(
                e, "create_profile", TABLE,
                conflict_message=f"A profile with email {row['email']} already exists",
                conflict_reason="email-taken",
            ) from e

        if not result.data:
            logger.error(f"create_profile on {TABLE}: store returned no row")
            raise UnknownError("create_profile", TABLE, "store returned no row")

        profile = ProfileResponse(**result.data[0])
        logger.info(f"Created profile {profile.id}")
        return profile

    def get_profile_by_id(self, profile_id: str) -> ProfileResponse:
        """Get profile by ID"""
        try:
            result = self.supabase.table(TABLE)\
                .select("*")\
                .eq("id", profile_id)\
                .limit(1)\
                .execute()
        except APIError as e:
            # A malformed uuid cannot match any row
            if e.code == INVALID_TEXT_REPRESENTATION:
                logger.warning(f"get_profile_by_id on {TABLE}: not found {profile_id} (malformed id)")
                raise NotFoundError("Profile", profile_id) from e
            raise translate_store_error(e, "get_profile_by_id", TABLE) from e
        except Exception as e:
            raise translate_store_error(e, "get_profile_by_id", TABLE) from e

        if not result.data:
            logger.warning(f"get_profile_by_id on {TABLE}: not found {profile_id}")
            raise NotFoundError("Profile", profile_id)
        return ProfileResponse(**result.data[0])

    def get_profile_by_email(self, email: str) -> ProfileResponse:
        """Get profile by email"""
        try:
            result = self.supabase.table(TABLE)\
                .select("*")\
                .eq("email", email)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise translate_store_error(e, "get_profile_by_email", TABLE) from e

        if not result.data:
            logger.warning(f"get_profile_by_email on {TABLE}: not found {email}")
            raise NotFoundError("Profile", email)
        return ProfileResponse(**result.data[0])

    def list_profiles(self) -> List[ProfileResponse]:
        """All profiles, newest first"""
        try:
            result = self.supabase.table(TABLE)\
                .select("*")\
                .order("created_at", desc=True)\
                .execute()
        except Exception as e:
            raise translate_store_error(e, "list_profiles", TABLE) from e
        return [ProfileResponse(**row) for row in result.data or []]

    def search_profiles(
        self,
        search_term: str = "",
        intent_filter: IntentFilter = IntentFilter.ALL,
    ) -> List[ProfileResponse]:
        """Fetch every profile, then narrow it down client-side."""
        return filter_profiles(self.list_profiles(), search_term, intent_filter)
