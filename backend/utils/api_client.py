# backend/utils/api_client.py
import httpx
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class MarketplaceError(Exception):
    """Generic failure shown to the user; the cause is logged, not exposed."""

    def __init__(self, message: str = "Something went wrong"):
        super().__init__(message)


class MarketplaceClient:
    """
    Thin HTTP client for the marketplace API.

    Keeps the token from the last register/login and sends it as a bearer
    header. Results are never cached between calls.

    Pass `http` to reuse an existing httpx.Client (e.g. FastAPI's TestClient).
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8000", http: Optional[httpx.Client] = None):
        self.http = http or httpx.Client(base_url=base_url)
        self.token: Optional[str] = None

    def _request(self, method: str, path: str, **kwargs):
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            response = self.http.request(method, path, headers=headers, **kwargs)
            response.raise_for_status()
            return response.json()
        except (httpx.RequestError, httpx.HTTPStatusError) as e:
            try:
                resp_text = e.response.text if getattr(e, "response", None) is not None else str(e)
            except Exception:
                resp_text = str(e)
            logger.error(f"Marketplace {method} {path} failed: {resp_text}")
            raise MarketplaceError() from e

    def register(self, name: str, email: str, password: str, role: str = "freelancer") -> str:
        data = self._request("POST", "/api/users/register", json={
            "name": name, "email": email, "password": password, "role": role,
        })
        self.token = data["token"]
        return self.token

    def login(self, email: str, password: str) -> str:
        data = self._request("POST", "/api/users/login", json={"email": email, "password": password})
        self.token = data["token"]
        return self.token

    def me(self) -> dict:
        return self._request("GET", "/api/users/me")

    def list_jobs(self) -> list:
        return self._request("GET", "/api/jobs")

    def create_job(self, title: str, description: str, employer_id: int) -> dict:
        # The only client-side check: nothing may be left blank
        if not (title or "").strip() or not (description or "").strip() or employer_id in (None, ""):
            raise ValueError("title, description and employer are required")
        return self._request("POST", "/api/jobs", json={
            "title": title.strip(), "description": description.strip(), "employerId": employer_id,
        })
