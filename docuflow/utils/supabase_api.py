"""
Supabase HTTP client.

Calls PostgREST RPC functions and Edge Functions with the service role key.
"""

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60

# PostgREST error code for "function not found in schema cache"
PGRST_FUNCTION_NOT_FOUND = "PGRST202"


class SupabaseAPIError(Exception):
    """Raised when a Supabase HTTP call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class RpcUnavailableError(SupabaseAPIError):
    """Raised when the requested RPC function does not exist."""

    pass


def service_headers(service_role_key: str) -> dict[str, str]:
    """Headers that authenticate as the service role."""
    return {
        "apikey": service_role_key,
        "Authorization": f"Bearer {service_role_key}",
        "Content-Type": "application/json",
    }


def _error_message(response: requests.Response) -> tuple[str, Optional[str]]:
    """Extract (message, code) from a PostgREST error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or response.reason, None

    if isinstance(body, dict):
        message = body.get("message") or body.get("error") or str(body)
        return message, body.get("code")
    return str(body), None


class SupabaseClient:
    """Service-role client for one Supabase project."""

    def __init__(
        self,
        url: str,
        service_role_key: str,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.url = url.rstrip("/")
        self.service_role_key = service_role_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def function_url(self, name: str) -> str:
        return f"{self.url}/functions/v1/{name}"

    def rpc(self, function: str, params: Optional[dict] = None) -> Any:
        """
        Call a PostgREST RPC function.

        Args:
            function: Function name in the exposed schema
            params: JSON arguments

        Returns:
            Decoded JSON response, or None for an empty body

        Raises:
            RpcUnavailableError: If the function does not exist
            SupabaseAPIError: On any other failure
        """
        url = f"{self.url}/rest/v1/rpc/{function}"

        try:
            response = self.session.post(
                url,
                json=params or {},
                headers=service_headers(self.service_role_key),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise SupabaseAPIError(f"Request to {url} failed: {e}")

        if response.ok:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                return response.text

        message, code = _error_message(response)
        if response.status_code == 404 or code == PGRST_FUNCTION_NOT_FOUND:
            raise RpcUnavailableError(
                f"RPC function '{function}' is not available: {message}",
                status_code=response.status_code,
            )
        raise SupabaseAPIError(message, status_code=response.status_code)

    def exec_sql(self, sql: str) -> Any:
        """Execute SQL through the exec_sql RPC function."""
        return self.rpc("exec_sql", {"sql": sql})

    def invoke_function(self, name: str, payload: Optional[dict] = None) -> requests.Response:
        """
        POST to an Edge Function.

        The response is returned whatever its status code; callers decide
        what a non-2xx status means.

        Raises:
            SupabaseAPIError: If the request could not be sent
        """
        url = self.function_url(name)
        headers = {
            "Authorization": f"Bearer {self.service_role_key}",
            "Content-Type": "application/json",
        }

        try:
            return self.session.post(
                url,
                json=payload if payload is not None else {},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise SupabaseAPIError(f"Request to {url} failed: {e}")
