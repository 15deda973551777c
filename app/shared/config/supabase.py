"""
Supabase client configuration for the authentication service.
Handles lazy Supabase client initialization with proper error handling.
"""

import logging
from functools import lru_cache
from typing import Optional

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from app.shared.core.exceptions import ExternalServiceError

from .settings import get_settings

logger = logging.getLogger(__name__)


class SupabaseManager:
    """
    Supabase client manager with lazy connection handling.
    Only the Auth API is used: the plant tracker verifies access tokens
    against it and never stores credentials itself.
    """

    def __init__(self):
        self._client: Optional[Client] = None
        self.settings = get_settings()

    @property
    def client(self) -> Client:
        """Get or create Supabase client with lazy initialization."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> Client:
        """Create Supabase client configured for server-side token checks."""
        try:
            client_options = ClientOptions(
                headers={
                    "User-Agent": f"PlantCareTracker/{self.settings.APP_VERSION}",
                },
                # Server side: never keep or refresh an end-user session
                auto_refresh_token=False,
                persist_session=False,
            )

            client = create_client(
                self.settings.SUPABASE_URL,
                self.settings.SUPABASE_ANON_KEY,
                options=client_options
            )

            logger.info("Supabase client initialized successfully")
            return client

        except Exception as e:
            logger.error(f"Failed to initialize Supabase client: {e}")
            raise ExternalServiceError(f"Supabase initialization failed: {e}", service="supabase")

    def get_auth_client(self):
        """Get Supabase auth client for token verification."""
        return self.client.auth


@lru_cache()
def get_supabase_manager() -> SupabaseManager:
    """
    Get Supabase manager singleton.

    Returns:
        SupabaseManager: Shared manager instance
    """
    return SupabaseManager()
