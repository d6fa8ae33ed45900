"""
REST HTTP client for the Supabase-style backend.

Record stores are read through PostgREST (`/rest/v1/<table>`), server-side
logic is reached through edge functions (`/functions/v1/<name>`).
"""

from typing import Any, Optional

import httpx

from legal_ai.errors import LegalAIError

DEFAULT_TIMEOUT = 30.0


class HttpClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = (base_url or "").rstrip("/")
        self._api_key = api_key
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self._base_url or "http://localhost",
            headers={"User-Agent": "legal-ai-sdk/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        """False when there is no backend to talk to; callers use local fallbacks."""
        return bool(self._base_url and self._api_key)

    def _auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._api_key:
            headers["apikey"] = self._api_key
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _ensure_configured(self) -> None:
        if not self.configured:
            raise LegalAIError("not_configured", "Backend URL and API key are not configured")

    @staticmethod
    def _check(resp: httpx.Response) -> None:
        if resp.status_code >= 400:
            raise LegalAIError("http_error", f"HTTP {resp.status_code}: {resp.text[:200]}",
                               {"status_code": resp.status_code})

    async def select(
        self,
        table: str,
        filters: Optional[dict[str, Any]] = None,
        order: Optional[str] = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """SELECT * FROM table WHERE col = value ... ORDER BY order."""
        self._ensure_configured()
        params: dict[str, str] = {"select": "*"}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        if order:
            params["order"] = f"{order}.{'desc' if descending else 'asc'}"
        resp = await self._client.get(f"/rest/v1/{table}", params=params, headers=self._auth_headers())
        self._check(resp)
        rows = resp.json()
        if not isinstance(rows, list):
            raise LegalAIError("http_error", f"Unexpected response for {table}: expected a list")
        return rows

    async def invoke(self, function: str, body: Optional[dict[str, Any]] = None) -> Any:
        """Invoke an edge function and return its decoded JSON body."""
        self._ensure_configured()
        resp = await self._client.post(f"/functions/v1/{function}", json=body, headers=self._auth_headers())
        self._check(resp)
        data = resp.json()
        if isinstance(data, dict) and data.get("error"):
            raise LegalAIError("function_error", str(data["error"]), {"function": function})
        return data

    async def close(self) -> None:
        await self._client.aclose()
