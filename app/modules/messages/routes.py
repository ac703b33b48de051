from fastapi import APIRouter, Depends
from pydantic import EmailStr
from app.database.supabase_client import get_supabase
from app.modules.messages.schemas import (
    MessageCreate, MessageResponse, MessageSentResponse, ProfileMessageCreate
)
from app.modules.messages.service import MessageService
from supabase import Client
from typing import List

router = APIRouter(tags=["messages"])


def get_message_service(supabase: Client = Depends(get_supabase)) -> MessageService:
    return MessageService(supabase)


@router.get("/messages", response_model=List[MessageResponse])
async def list_messages(
    profile_email: EmailStr,
    counterpart_email: EmailStr,
    service: MessageService = Depends(get_message_service)
):
    """Conversation between two emails, oldest first"""
    return service.list_messages(str(profile_email), str(counterpart_email))


@router.post("/messages", response_model=MessageSentResponse, status_code=201)
async def send_message(
    message_data: MessageCreate,
    service: MessageService = Depends(get_message_service)
):
    """Send a message. Re-fetch the conversation to see it."""
    service.send_message(str(message_data.from_email), str(message_data.to_email), message_data.message)
    return MessageSentResponse(from_email=str(message_data.from_email), to_email=str(message_data.to_email))


@router.get("/profiles/{profile_id}/messages", response_model=List[MessageResponse])
async def list_profile_conversation(
    profile_id: str,
    viewer_email: EmailStr,
    service: MessageService = Depends(get_message_service)
):
    """Conversation between the viewer and a profile, addressed by profile ID"""
    return service.list_conversation_with_profile(profile_id, str(viewer_email))


@router.post("/profiles/{profile_id}/messages", response_model=MessageSentResponse, status_code=201)
async def send_message_to_profile(
    profile_id: str,
    message_data: ProfileMessageCreate,
    service: MessageService = Depends(get_message_service)
):
    """Send a message to the profile with the given ID"""
    profile = service.profile_service.get_profile_by_id(profile_id)
    service.send_message(str(message_data.from_email), profile.email, message_data.message)
    return MessageSentResponse(from_email=str(message_data.from_email), to_email=profile.email)
