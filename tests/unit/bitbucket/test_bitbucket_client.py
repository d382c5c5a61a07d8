"""Tests for the Bitbucket HTTP client."""

from unittest.mock import MagicMock

import pytest
import requests

from bitbucket_cloud.bitbucket.client import BitbucketClient
from bitbucket_cloud.bitbucket.config import BitbucketConfig
from bitbucket_cloud.exceptions import (
    BitbucketApiError,
    BitbucketAuthenticationError,
    BitbucketCloudError,
    BitbucketNotFoundError,
)
from tests.utils.fake_bitbucket import make_response

API = "https://api.bitbucket.org/2.0"


@pytest.fixture
def session():
    """A real requests session whose request method is mocked."""
    session = requests.Session()
    session.request = MagicMock()
    return session


@pytest.fixture
def basic_config():
    return BitbucketConfig(auth_type="basic", username="alice", password="secret")


@pytest.fixture
def client(basic_config, session):
    return BitbucketClient(config=basic_config, session=session)


def error_body(message: str) -> dict:
    return {"type": "error", "error": {"message": message}}


class TestClientInit:
    def test_basic_auth(self, client, session):
        assert session.auth == ("alice", "secret")
        assert "Authorization" not in session.headers
        assert session.headers["Accept"] == "application/json"
        assert session.verify is True

    def test_bearer_token(self, session):
        config = BitbucketConfig(auth_type="pat", personal_token="token-123")

        BitbucketClient(config=config, session=session)

        assert session.headers["Authorization"] == "Bearer token-123"
        assert session.auth is None

    def test_custom_headers_and_ssl(self, session):
        config = BitbucketConfig(
            auth_type="basic",
            username="alice",
            password="secret",
            ssl_verify=False,
            custom_headers={"X-Team": "platform"},
        )

        BitbucketClient(config=config, session=session)

        assert session.headers["X-Team"] == "platform"
        assert session.verify is False

    def test_config_from_env_when_missing(self, monkeypatch):
        monkeypatch.setenv("BITBUCKET_ACCESS_TOKEN", "env-token")

        client = BitbucketClient()

        assert client.config.auth_type == "pat"
        assert client.session.headers["Authorization"] == "Bearer env-token"

    def test_context_manager_closes_session(self, basic_config):
        session = MagicMock(spec=requests.Session)
        session.headers = {}

        with BitbucketClient(config=basic_config, session=session) as client:
            assert client.session is session

        session.close.assert_called_once()


class TestUrls:
    def test_relative_endpoint(self, client):
        assert client._url("/repositories/ws/repo") == f"{API}/repositories/ws/repo"

    def test_absolute_url_kept(self, client):
        url = f"{API}/repositories/ws/repo/commits?page=2"

        assert client._url(url) == url

    def test_custom_base_url(self, session):
        config = BitbucketConfig(
            auth_type="pat", personal_token="t", url="https://bitbucket.internal/"
        )
        client = BitbucketClient(config=config, session=session)

        assert client._url("/user") == "https://bitbucket.internal/2.0/user"


class TestRequests:
    def test_get_sends_params_and_timeout(self, client, session):
        session.request.return_value = make_response(
            200, f"{API}/x", body={"ok": True}
        )

        result = client._get("/x", params=[("include", "a"), ("include", "b")])

        assert result == {"ok": True}
        session.request.assert_called_once_with(
            "GET",
            f"{API}/x",
            params=[("include", "a"), ("include", "b")],
            json=None,
            timeout=client.config.timeout,
        )

    def test_post_sends_json(self, client, session):
        session.request.return_value = make_response(201, f"{API}/x", body={"id": 1})

        assert client._post("/x", json_data={"title": "t"}) == {"id": 1}
        assert session.request.call_args.kwargs["json"] == {"title": "t"}

    def test_delete_without_body(self, client, session):
        session.request.return_value = make_response(204, f"{API}/x")

        assert client._delete("/x") is None

    def test_get_text(self, client, session):
        session.request.return_value = make_response(200, f"{API}/diff", text="diff")

        assert client._get_text("/diff") == "diff"

    def test_invalid_json(self, client, session):
        session.request.return_value = make_response(200, f"{API}/x", text="<html>")

        with pytest.raises(BitbucketCloudError, match="Invalid JSON"):
            client._get("/x")

    def test_transport_error_propagates(self, client, session):
        session.request.side_effect = requests.Timeout("too slow")

        with pytest.raises(requests.Timeout):
            client._get("/x")


class TestErrorMapping:
    @pytest.mark.parametrize(
        "status, error_class",
        [
            (400, BitbucketApiError),
            (401, BitbucketAuthenticationError),
            (403, BitbucketAuthenticationError),
            (404, BitbucketNotFoundError),
            (409, BitbucketApiError),
            (500, BitbucketApiError),
        ],
    )
    def test_status_mapped_to_exception(self, client, session, status, error_class):
        session.request.return_value = make_response(
            status, f"{API}/x", body=error_body("it went wrong")
        )

        with pytest.raises(error_class) as exc_info:
            client._get("/x")

        error = exc_info.value
        assert type(error) is error_class
        assert error.status_code == status
        assert error.url == f"{API}/x"
        assert error.error_response.message == "it went wrong"
        assert "it went wrong" in str(error)

    def test_error_without_json_body(self, client, session):
        session.request.return_value = make_response(
            502, f"{API}/x", text="Bad gateway"
        )

        with pytest.raises(BitbucketApiError) as exc_info:
            client._get("/x")

        assert exc_info.value.status_code == 502
        assert exc_info.value.error_response is None
        assert "Bad Gateway" in str(exc_info.value)

    def test_all_errors_share_base_class(self):
        assert issubclass(BitbucketNotFoundError, BitbucketApiError)
        assert issubclass(BitbucketAuthenticationError, BitbucketApiError)
        assert issubclass(BitbucketApiError, BitbucketCloudError)
