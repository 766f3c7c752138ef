from unittest.mock import MagicMock

import flask
import pytest

from ramen_console.auth import SESSION_KEY, AuthSession, LocalSession, open_session
from ramen_console.supabase_store import LocalStore, SupabaseStore


@pytest.fixture
def web():
    app = flask.Flask(__name__)
    app.secret_key = "test-secret"
    return app


def _signed_in_client():
    client = MagicMock()
    client.auth.sign_in_with_password.return_value = MagicMock(user=object())
    return client


def test_login_success(web):
    client = _signed_in_client()
    auth = AuthSession(client)
    with web.test_request_context():
        assert auth.login("chef@example.com", "pw") == (True, "")
        assert auth.is_authenticated()
        assert flask.session[SESSION_KEY] == "chef@example.com"
    client.auth.sign_in_with_password.assert_called_once_with(
        {"email": "chef@example.com", "password": "pw"})


def test_login_rejected(web):
    client = MagicMock()
    client.auth.sign_in_with_password.side_effect = RuntimeError("Invalid login credentials")
    auth = AuthSession(client)
    with web.test_request_context():
        ok, msg = auth.login("chef@example.com", "wrong")
        assert not ok
        assert msg == "Invalid login credentials"
        assert not auth.is_authenticated()


def test_login_requires_both_fields(web):
    client = MagicMock()
    with web.test_request_context():
        assert AuthSession(client).login("", "pw")[0] is False
    client.auth.sign_in_with_password.assert_not_called()


def test_sign_in_does_not_leak_to_other_browsers(web):
    auth = AuthSession(_signed_in_client())
    with web.test_request_context():
        auth.login("chef@example.com", "pw")
    with web.test_request_context():
        assert not auth.is_authenticated()


def test_logout_clears_only_this_browser(web):
    client = _signed_in_client()
    auth = AuthSession(client)
    with web.test_request_context():
        auth.login("chef@example.com", "pw")
        assert auth.logout() == (True, "")
        assert not auth.is_authenticated()
    client.auth.sign_out.assert_not_called()


def test_no_request_means_signed_out():
    assert not AuthSession(_signed_in_client()).is_authenticated()


def test_open_session_picks_by_store():
    assert isinstance(open_session(LocalStore()), LocalSession)
    assert isinstance(open_session(SupabaseStore(MagicMock())), AuthSession)
    assert LocalSession().is_authenticated()
