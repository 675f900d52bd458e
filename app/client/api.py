"""
HTTP client for the Job Board API.

Wraps a requests.Session (or anything with the same request() signature)
and keeps the explicit SessionState in sync with server responses.
"""
import logging
from typing import Any, Dict, Optional

import requests

from app.client.session import SessionState, TokenStore

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """Non-2xx response, network failure (status 0) or unparseable body."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class UnauthorizedError(ApiError):
    def __init__(self, message: str = "Session expired, please log in again"):
        super().__init__(401, message)


class JobBoardClient:
    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        state: Optional[SessionState] = None,
        http: Any = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store
        self.state = state if state is not None else token_store.restore()
        self.http = http if http is not None else requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        if isinstance(self.http, requests.Session):
            kwargs.setdefault("timeout", self.timeout)
        try:
            response = self.http.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError(0, f"Could not reach {self.base_url}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise ApiError(response.status_code, "Server returned an invalid response") from e

        if response.status_code >= 400:
            message = body.get("error") if isinstance(body, dict) else None
            raise ApiError(response.status_code, message or f"Request failed ({response.status_code})")
        return body

    def _authorized(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        if not self.state.is_authenticated:
            raise UnauthorizedError("Not logged in")
        try:
            return self._request(method, path, headers={"Authorization": self.state.token}, **kwargs)
        except ApiError as e:
            if e.status_code == 401:
                # Stale or rejected token: forget it and force a fresh login
                self.logout()
                raise UnauthorizedError() from e
            raise

    def login(self, email: str, password: str) -> str:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        token = data["token"]
        self.state.token = token
        self.token_store.save(token)
        logger.info("Logged in", extra={"email": email})
        return token

    def logout(self) -> None:
        self.state.clear()
        self.token_store.clear()

    def fetch_jobs(self) -> Dict[str, Any]:
        """Fetch the page described by the current session state."""
        params: Dict[str, Any] = {"page": self.state.current_page, "limit": self.state.limit}
        if self.state.current_search:
            params["search"] = self.state.current_search
        return self._authorized("GET", "/jobs", params=params)

    def fetch_job(self, job_id: int) -> Dict[str, Any]:
        return self._authorized("GET", f"/jobs/{job_id}")
