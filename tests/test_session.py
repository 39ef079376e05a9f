"""Tests for the Jira session store and the credential manager."""

from unittest.mock import Mock, patch

import pytest
import requests
from requests.cookies import create_cookie

from jpt.errors import AuthenticationError
from jpt.session import SessionStore, check_session, ensure_session, login


def _cookie(name="JSESSIONID", value="abc123"):
    return create_cookie(name, value, domain="issues.liferay.com", path="/")


def _response(status_code=200, json_data=None, cookies=()):
    resp = Mock()
    resp.status_code = status_code
    if json_data is None:
        resp.json.side_effect = ValueError("not json")
    else:
        resp.json.return_value = json_data
    resp.cookies = list(cookies)
    return resp


@pytest.fixture
def store(settings):
    return SessionStore(settings.cookie_file)


@pytest.fixture
def provider():
    provider = Mock()
    provider.get_credentials.return_value = ("alice", "secret")
    return provider


class TestSessionStore:
    def test_save_and_load_keeps_session_cookies(self, store):
        assert not store.exists()
        assert store.save([_cookie(), _cookie("atlassian.xsrf.token", "tok")]) == 2
        assert store.exists()
        assert store.as_dict() == {"JSESSIONID": "abc123", "atlassian.xsrf.token": "tok"}

    def test_file_is_netscape_format(self, store):
        store.save([_cookie()])
        assert store.path.read_text().startswith("# Netscape HTTP Cookie File")

    def test_clear(self, store):
        store.save([_cookie()])
        store.clear()
        assert not store.exists()
        store.clear()

    def test_load_missing_file_is_empty(self, store):
        assert list(store.load()) == []


class TestCheckSession:
    def test_valid_session(self, store, settings):
        store.save([_cookie()])
        with patch("jpt.session.requests.get", return_value=_response(json_data={"name": "alice"})) as get:
            assert check_session(store, settings) is None
        assert get.call_args.args[0] == "https://issues.liferay.com/rest/auth/1/session"

    def test_error_message_reported(self, store, settings):
        store.save([_cookie()])
        body = {"errorMessages": ["You are not authenticated."], "errors": {}}
        with patch("jpt.session.requests.get", return_value=_response(status_code=401, json_data=body)):
            assert check_session(store, settings) == "You are not authenticated."

    def test_null_error_message_is_valid(self, store, settings):
        with patch("jpt.session.requests.get", return_value=_response(json_data={"errorMessages": [None]})):
            assert check_session(store, settings) is None

    def test_non_json_is_invalid(self, store, settings):
        with patch("jpt.session.requests.get", return_value=_response(status_code=502)):
            assert "HTTP 502" in check_session(store, settings)

    def test_network_failure(self, store, settings):
        with patch("jpt.session.requests.get", side_effect=requests.ConnectionError("down")):
            with pytest.raises(AuthenticationError):
                check_session(store, settings)


class TestLogin:
    def test_login_persists_cookies(self, store, provider, settings):
        with patch("jpt.session.requests.get", return_value=_response(json_data={}, cookies=[_cookie()])) as get:
            login(store, provider, settings)
        assert get.call_args.kwargs["auth"] == ("alice", "secret")
        assert store.as_dict() == {"JSESSIONID": "abc123"}

    def test_rejected_credentials(self, store, provider, settings):
        with patch("jpt.session.requests.get", return_value=_response(status_code=401, json_data={})):
            with pytest.raises(AuthenticationError):
                login(store, provider, settings)
        assert not store.exists()

    def test_no_cookie_returned(self, store, provider, settings):
        with patch("jpt.session.requests.get", return_value=_response(json_data={})):
            with pytest.raises(AuthenticationError):
                login(store, provider, settings)


class TestEnsureSession:
    def test_logs_in_when_no_cookie_file(self, store, provider, settings):
        with patch("jpt.session.requests.get", return_value=_response(json_data={}, cookies=[_cookie()])) as get:
            ensure_session(store, provider, settings)
        provider.get_credentials.assert_called_once()
        assert get.call_count == 1
        assert store.exists()

    def test_reuses_valid_session(self, store, provider, settings, capsys):
        store.save([_cookie()])
        with patch("jpt.session.requests.get", return_value=_response(json_data={"name": "alice"})):
            ensure_session(store, provider, settings)
        provider.get_credentials.assert_not_called()
        assert "Cookie is still valid" in capsys.readouterr().out

    def test_relogs_in_when_session_expired(self, store, provider, settings, capsys):
        store.save([_cookie(value="stale")])
        expired = _response(status_code=401, json_data={"errorMessages": ["Session expired"]})
        fresh = _response(json_data={}, cookies=[_cookie(value="fresh")])
        with patch("jpt.session.requests.get", side_effect=[expired, fresh]) as get:
            ensure_session(store, provider, settings)
        provider.get_credentials.assert_called_once()
        assert get.call_args_list[1].kwargs["auth"] == ("alice", "secret")
        assert store.as_dict() == {"JSESSIONID": "fresh"}
        assert "Session expired" in capsys.readouterr().out
