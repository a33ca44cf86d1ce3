import logging
from dataclasses import dataclass, field
from typing import Any

import requests
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

TRANSPORT_ERROR_MESSAGE = "Something went wrong. Please try again."


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RAEESA_", env_file=".env", extra="ignore")

    API_BASE_URL: str = "http://localhost:8000"
    # None = no timeout on outbound calls
    API_TIMEOUT_SECONDS: float | None = None


@dataclass
class ApiResult:
    """Outcome of one API call, already reduced to what the controllers need."""

    ok: bool
    status_code: int = 0
    body: dict[str, Any] = field(default_factory=dict)
    transport_error: bool = False

    @property
    def message(self) -> str:
        return str(self.body.get("message") or "")

    @property
    def data(self) -> Any:
        return self.body.get("data")


class ApiClient:
    """Thin wrapper over a ``requests.Session`` for the Raeesa Tours API.

    ``token`` is the admin bearer credential; it is attached only to calls
    made with ``auth=True``. Network and decoding failures never raise: they
    come back as an ``ApiResult`` with ``transport_error=True``.
    """

    def __init__(self, base_url: str | None = None, token: str | None = None,
                 timeout: float | None = None, session: Any = None):
        cfg = ClientSettings() if base_url is None or timeout is None else None
        self.base_url = (base_url if base_url is not None else cfg.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else (cfg.API_TIMEOUT_SECONDS if cfg else None)
        self.token = token
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def request(self, method: str, path: str, *, json: Any = None, params: dict | None = None,
                auth: bool = False) -> ApiResult:
        headers = {"Content-Type": "application/json"}
        if auth and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        kwargs: dict[str, Any] = {"headers": headers}
        if json is not None:
            kwargs["json"] = json
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v not in (None, "")}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            r = self.session.request(method, self._url(path), **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            return ApiResult(ok=False, transport_error=True)

        try:
            body = r.json()
        except ValueError:
            logger.warning("%s %s returned a non-JSON body (status %s)", method, path, r.status_code)
            return ApiResult(ok=False, status_code=r.status_code, transport_error=True)
        if not isinstance(body, dict):
            return ApiResult(ok=False, status_code=r.status_code, transport_error=True)

        ok = 200 <= r.status_code < 300 and body.get("success") is True
        return ApiResult(ok=ok, status_code=r.status_code, body=body)

    # public forms

    def create_registration(self, payload: dict) -> ApiResult:
        return self.request("POST", "/api/registrations", json=payload)

    def create_contact(self, payload: dict) -> ApiResult:
        return self.request("POST", "/api/contact", json=payload)

    # admin

    def login(self, email: str, password: str) -> ApiResult:
        res = self.request("POST", "/api/auth/login", json={"email": email, "password": password})
        if res.ok:
            self.token = res.body.get("token")
        return res

    def list_registrations(self, page: int = 1, destination: str | None = None,
                           start_date: str | None = None, end_date: str | None = None) -> ApiResult:
        params = {"page": page, "destination": destination, "startDate": start_date, "endDate": end_date}
        return self.request("GET", "/api/registrations", params=params, auth=True)

    def delete_registration(self, registration_id: str) -> ApiResult:
        return self.request("DELETE", f"/api/registrations/{registration_id}", auth=True)

    def list_contacts(self, page: int = 1, status: str | None = None) -> ApiResult:
        return self.request("GET", "/api/contact", params={"page": page, "status": status}, auth=True)

    def update_contact(self, contact_id: str, status: str | None = None, admin_notes: str | None = None) -> ApiResult:
        payload = {"status": status, "adminNotes": admin_notes}
        return self.request("PATCH", f"/api/contact/{contact_id}", json=payload, auth=True)

    def delete_contact(self, contact_id: str) -> ApiResult:
        return self.request("DELETE", f"/api/contact/{contact_id}", auth=True)
