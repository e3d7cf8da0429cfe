"""
Pytest configuration for studio-backend tests
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from fakes import FakeAuthClient, FakeSupabase
from studio.config.settings import Settings
from studio.database.supabase_client import get_auth_client, get_supabase
from studio.main import create_app
from studio.modules.auth.tokens import SessionTokens

JWT_SECRET = "super-secret-jwt-token-for-testing-only"


@pytest.fixture
def settings():
    return Settings(
        supabase_url="http://supabase.invalid",
        supabase_key="anon-key",
        jwt_secret=JWT_SECRET,
        environment="test",
        rate_limit="1000/minute",
        _env_file=None,
    )


@pytest.fixture
def tokens(settings):
    return SessionTokens(settings.jwt_secret, ttl=timedelta(days=settings.session_ttl_days))


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def auth_client():
    return FakeAuthClient()


@pytest.fixture
def app(settings, db, auth_client):
    app = create_app(settings)
    app.dependency_overrides[get_supabase] = lambda: db
    app.dependency_overrides[get_auth_client] = lambda: auth_client
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(db):
    def _make_user(email="alice@example.com", full_name="Alice", **extra):
        return db.add("users", email=email, full_name=full_name, credits=5, email_verified=True, **extra)
    return _make_user


@pytest.fixture
def login(client, tokens):
    """Put a session cookie for user_id on the test client"""
    def _login(user_id):
        client.cookies.set("auth-token", tokens.issue(user_id))
        return client
    return _login
