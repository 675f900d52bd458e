import pytest
import requests
from app.client.api import ApiError, JobBoardClient, UnauthorizedError
from app.client.session import SessionState, TokenStore
from app.core.config import settings

@pytest.fixture
def token_store():
    return TokenStore("jobboard-test")

@pytest.fixture
def api_client(client, token_store):
    """JobBoardClient talking to the app through the TestClient transport."""
    return JobBoardClient("http://testserver", token_store, http=client)

def _login(api_client):
    return api_client.login(settings.demo_email, settings.demo_password)

def test_session_state_search_resets_page():
    state = SessionState(current_page=4)
    state.search("  python ")
    assert state.current_search == "python"
    assert state.current_page == 1

def test_session_state_page_never_below_one():
    state = SessionState()
    state.change_page(-1)
    assert state.current_page == 1
    state.change_page(2)
    assert state.current_page == 3

def test_token_store_roundtrip(token_store):
    assert token_store.load() is None
    token_store.save("Bearer abc")
    assert token_store.load() == "Bearer abc"
    assert token_store.restore().is_authenticated
    token_store.clear()
    assert token_store.load() is None
    token_store.clear()

def test_token_store_uses_keyring(token_store, memory_keyring):
    token_store.save("Bearer abc")
    assert memory_keyring.passwords[("jobboard-test", "auth_token")] == "Bearer abc"
    assert TokenStore("another-service").load() is None

def test_token_store_treats_empty_token_as_missing(token_store, memory_keyring):
    memory_keyring.passwords[("jobboard-test", "auth_token")] = ""
    assert token_store.load() is None
    assert not token_store.restore().is_authenticated

def test_login_persists_token(api_client, token_store):
    token = _login(api_client)
    assert token == settings.demo_token
    assert api_client.state.token == token
    assert token_store.load() == token

def test_login_failure(api_client, token_store):
    with pytest.raises(ApiError) as exc_info:
        api_client.login(settings.demo_email, "nope")
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid credentials"
    assert token_store.load() is None

def test_fetch_jobs_uses_state(api_client):
    _login(api_client)
    api_client.state.search("python")
    api_client.state.limit = 4
    api_client.state.change_page(1)
    data = api_client.fetch_jobs()
    assert [job["id"] for job in data["jobs"]] == [20, 24]
    assert data["pagination"]["currentPage"] == 2

def test_fetch_job(api_client):
    _login(api_client)
    assert api_client.fetch_job(3)["id"] == 3
    with pytest.raises(ApiError) as exc_info:
        api_client.fetch_job(404)
    assert exc_info.value.status_code == 404

def test_fetch_without_login(api_client):
    with pytest.raises(UnauthorizedError):
        api_client.fetch_jobs()

def test_rejected_token_forces_relogin(client, token_store):
    token_store.save("Bearer stale")
    api_client = JobBoardClient("http://testserver", token_store, http=client)
    assert api_client.state.is_authenticated
    api_client.state.search("python")

    with pytest.raises(UnauthorizedError):
        api_client.fetch_jobs()
    assert api_client.state.token is None
    assert api_client.state.current_search == ""
    assert token_store.load() is None

def test_logout_clears_everything(api_client, token_store):
    _login(api_client)
    api_client.state.change_page(2)
    api_client.logout()
    assert not api_client.state.is_authenticated
    assert api_client.state.current_page == 1
    assert token_store.load() is None

class RaisingTransport:
    """Transport that can never reach the server."""
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError("connection refused")

class FakeResponse:
    def __init__(self, status_code, text):
        self.status_code = status_code
        self.text = text

    def json(self):
        raise ValueError(f"not JSON: {self.text}")

class HtmlTransport:
    """Transport answering with a proxy error page instead of JSON."""
    def __init__(self, status_code):
        self.status_code = status_code

    def request(self, method, url, **kwargs):
        return FakeResponse(self.status_code, "<html>Bad Gateway</html>")

def test_network_failure_is_status_zero(token_store):
    api_client = JobBoardClient("http://unreachable", token_store, http=RaisingTransport())
    with pytest.raises(ApiError) as exc_info:
        api_client.login(settings.demo_email, settings.demo_password)
    assert exc_info.value.status_code == 0
    assert "http://unreachable" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

def test_network_failure_keeps_token(token_store):
    """Only a 401 forgets the token, not a dropped connection."""
    token_store.save(settings.demo_token)
    api_client = JobBoardClient("http://unreachable", token_store, http=RaisingTransport())
    with pytest.raises(ApiError) as exc_info:
        api_client.fetch_jobs()
    assert not isinstance(exc_info.value, UnauthorizedError)
    assert token_store.load() == settings.demo_token

@pytest.mark.parametrize("status_code", [200, 502])
def test_non_json_body(token_store, status_code):
    token_store.save(settings.demo_token)
    api_client = JobBoardClient("http://proxy", token_store, http=HtmlTransport(status_code))
    with pytest.raises(ApiError) as exc_info:
        api_client.fetch_job(1)
    assert exc_info.value.status_code == status_code
    assert exc_info.value.message == "Server returned an invalid response"

def test_timeout_passed_to_requests_session(token_store, monkeypatch):
    seen = {}

    def fake_request(self, method, url, **kwargs):
        seen.update(kwargs)
        raise requests.Timeout("too slow")

    monkeypatch.setattr(requests.Session, "request", fake_request)
    api_client = JobBoardClient("http://slow", token_store, timeout=2.5)
    with pytest.raises(ApiError):
        api_client.login(settings.demo_email, settings.demo_password)
    assert seen["timeout"] == 2.5

def test_timeout_not_passed_to_other_transports(token_store):
    seen = {}

    class RecordingTransport:
        def request(self, method, url, **kwargs):
            seen.update(kwargs)
            raise requests.ConnectionError("offline")

    api_client = JobBoardClient("http://x", token_store, http=RecordingTransport())
    with pytest.raises(ApiError):
        api_client.login(settings.demo_email, settings.demo_password)
    assert "timeout" not in seen
    assert seen["json"] == {"email": settings.demo_email, "password": settings.demo_password}
