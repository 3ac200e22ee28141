"""
Supabase Store Client

Thin async client for the two store contracts the chat router consumes:
- an atomic rate-limit RPC (``POST /rest/v1/rpc/<name>``)
- a single-row lookup by exact match (``GET /rest/v1/<table>?col=eq.value``)

Transport failures, non-2xx responses and undecodable bodies are raised as
InfrastructureError. An empty lookup is not an error: select_single returns None.
"""
from typing import Any, Dict, Optional, Protocol

import httpx
import structlog

logger = structlog.get_logger("shared.store_client")


class InfrastructureError(Exception):
    """Raised when the external store cannot be reached or answers badly."""

    def __init__(self, operation: str, message: str, status_code: Optional[int] = None):
        self.operation = operation
        self.status_code = status_code
        super().__init__(f"{operation}: {message}")


class RoutingStore(Protocol):
    """Store operations the chat router depends on."""

    async def rpc(self, name: str, params: Dict[str, Any]) -> Any:
        ...

    async def select_single(
        self,
        table: str,
        columns: str,
        match: Dict[str, str],
    ) -> Optional[Dict[str, Any]]:
        ...


class SupabaseStoreClient:
    """Client for the Supabase PostgREST endpoints."""

    def __init__(
        self,
        url: str,
        service_key: str,
        timeout: float = 3.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize store client.

        Args:
            url: Supabase project URL
            service_key: Service role key, sent as apikey and bearer token
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.url = url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=f"{self.url}/rest/v1",
            headers={
                "apikey": service_key,
                "Authorization": f"Bearer {service_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config) -> "SupabaseStoreClient":
        """Build a client from a RouterConfig."""
        return cls(
            url=config.supabase_url,
            service_key=config.supabase_service_role_key,
            timeout=config.store_timeout_seconds,
        )

    async def rpc(self, name: str, params: Dict[str, Any]) -> Any:
        """
        Invoke a remote procedure.

        Args:
            name: Procedure name
            params: Named procedure arguments

        Returns:
            Decoded JSON payload (a row, a list of rows, or a scalar)

        Raises:
            InfrastructureError: On transport, status or decode failure
        """
        response = await self._send("POST", f"/rpc/{name}", f"rpc:{name}", json=params)
        return self._decode(response, f"rpc:{name}")

    async def select_single(
        self,
        table: str,
        columns: str,
        match: Dict[str, str],
    ) -> Optional[Dict[str, Any]]:
        """
        Fetch at most one row matching every column exactly.

        Args:
            table: Table name
            columns: PostgREST select list (e.g. "monthly_minutes_limit,expires_at")
            match: Column -> value equality filters

        Returns:
            Row dict, or None when no row matches

        Raises:
            InfrastructureError: On transport, status or decode failure
        """
        params = {"select": columns, "limit": "1"}
        for column, value in match.items():
            params[column] = f"eq.{value}"

        operation = f"select:{table}"
        rows = self._decode(await self._send("GET", f"/{table}", operation, params=params), operation)

        if not isinstance(rows, list):
            raise InfrastructureError(operation, "expected a list of rows")
        if not rows:
            return None
        return rows[0]

    async def _send(self, method: str, path: str, operation: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            logger.warning(
                "store_api_error",
                operation=operation,
                status_code=e.response.status_code,
                error=str(e)
            )
            raise InfrastructureError(operation, str(e), status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.warning(
                "store_connection_failed",
                operation=operation,
                error=str(e)
            )
            raise InfrastructureError(operation, str(e)) from e

    @staticmethod
    def _decode(response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise InfrastructureError(operation, "response body is not JSON", response.status_code) from e

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()
