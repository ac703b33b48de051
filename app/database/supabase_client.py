from supabase import create_client, Client, SupabaseException
from app.config import settings
from app.core.exceptions import ConfigurationMissingError, ConfigurationInvalidError
import logging

logger = logging.getLogger(__name__)


class SupabaseClient:
    _client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            missing = settings.missing_supabase_settings()
            if missing:
                logger.error(f"Supabase configuration missing: {', '.join(missing)}")
                raise ConfigurationMissingError(missing)
            try:
                cls._client = create_client(settings.supabase_url, settings.supabase_key)
            except SupabaseException as e:
                logger.error(f"create_client on supabase: invalid configuration ({e})")
                raise ConfigurationInvalidError(str(e)) from e
        return cls._client

    @classmethod
    def reset_client(cls):
        cls._client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()
