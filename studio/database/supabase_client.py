from fastapi import Request
from supabase import create_client, Client
from studio.config.settings import Settings


class SupabaseClients:
    """Application-scoped Supabase clients, built lazily on first use.

    One instance lives on ``app.state.supabase``; handlers receive the clients
    through the ``get_supabase`` / ``get_auth_client`` dependencies.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._auth_client: Client = None
        self._service_client: Client = None

    @property
    def auth_client(self) -> Client:
        """Anon-key client for Supabase Auth calls. Never used for table access."""
        if self._auth_client is None:
            self._auth_client = create_client(self.settings.supabase_url, self.settings.supabase_key)
        return self._auth_client

    @property
    def service_client(self) -> Client:
        """Client with service_role key; bypasses RLS. Every query must filter by owner."""
        if self._service_client is None:
            key = self.settings.supabase_service_role_key or self.settings.supabase_key
            self._service_client = create_client(self.settings.supabase_url, key)
        return self._service_client


def get_supabase(request: Request) -> Client:
    return request.app.state.supabase.service_client


def get_auth_client(request: Request) -> Client:
    return request.app.state.supabase.auth_client
