from supabase import Client
from app.modules.messages.schemas import MessageResponse
from app.modules.profiles.service import ProfileService
from app.core.exceptions import EmptyMessageError
from app.core.store_errors import translate_store_error
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

TABLE = "messages"


class MessageService:
    def __init__(self, supabase: Client, profile_service: Optional[ProfileService] = None):
        self.supabase = supabase
        self.profile_service = profile_service or ProfileService(supabase)

    def _fetch_direction(self, from_email: str, to_email: str) -> List[dict]:
        result = self.supabase.table(TABLE)\
            .select("*")\
            .eq("from_email", from_email)\
            .eq("to_email", to_email)\
            .order("timestamp")\
            .execute()
        return result.data or []

    def list_messages(self, profile_email: str, counterpart_email: str) -> List[MessageResponse]:
        """Both directions of the conversation between two emails, oldest first.

        Each direction is a plain equality query; the union is merged here so
        email values never end up inside a filter expression.
        """
        try:
            rows = self._fetch_direction(profile_email, counterpart_email)
            if counterpart_email != profile_email:
                rows += self._fetch_direction(counterpart_email, profile_email)
        except Exception as e:
            raise translate_store_error(e, "list_messages", TABLE) from e

        by_id = {}
        for row in rows:
            by_id[row["id"]] = MessageResponse(**row)
        return sorted(by_id.values(), key=lambda m: (m.timestamp, m.id))

    def send_message(self, from_email: str, to_email: str, text: str) -> None:
        """Insert one message. Callers re-fetch the conversation to see it."""
        body = (text or "").strip()
        if not body:
            logger.info(f"Rejected empty message from {from_email} to {to_email}")
            raise EmptyMessageError()
        try:
            self.supabase.table(TABLE).insert({
                "from_email": from_email,
                "to_email": to_email,
                "message": body,
            }).execute()
        except Exception as e:
            raise translate_store_error(e, "send_message", TABLE) from e
        logger.info(f"Message sent from {from_email} to {to_email}")

    def list_conversation_with_profile(self, profile_id: str, viewer_email: str) -> List[MessageResponse]:
        """Conversation between the viewer and the profile with the given id"""
        profile = self.profile_service.get_profile_by_id(profile_id)
        return self.list_messages(viewer_email, profile.email)
