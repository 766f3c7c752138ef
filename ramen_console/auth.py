"""
Login sessions over Supabase auth; offline mode has no login.

Who is signed in is kept per browser in Flask's signed session cookie.
The Supabase client only checks credentials, so one operator signing in
or out never changes what another browser sees.
"""

import logging

from flask import has_request_context, session

logger = logging.getLogger(__name__)

SESSION_KEY = "operator"


class AuthSession:
    """Email/password login checked against a Supabase client."""

    def __init__(self, client):
        self.client = client

    def current_user(self):
        if not has_request_context():
            return None
        return session.get(SESSION_KEY)

    def is_authenticated(self) -> bool:
        return self.current_user() is not None

    def login(self, email: str, password: str):
        if not email or not password:
            return False, "Email and password are required"
        try:
            resp = self.client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            logger.info("Login failed for %s: %s", email, e)
            return False, str(e)
        if getattr(resp, "user", None) is None:
            return False, "Invalid login credentials"
        session[SESSION_KEY] = email
        logger.info("Signed in %s", email)
        return True, ""

    def logout(self):
        user = session.pop(SESSION_KEY, None) if has_request_context() else None
        if user:
            logger.info("Signed out %s", user)
        return True, ""


class LocalSession:
    """Single-operator offline mode: always signed in."""

    def is_authenticated(self) -> bool:
        return True

    def login(self, email: str, password: str):
        return True, ""

    def logout(self):
        return True, ""


def open_session(store):
    client = getattr(store, "client", None)
    if client is None:
        logger.warning("No Supabase client, running without login")
        return LocalSession()
    return AuthSession(client)
