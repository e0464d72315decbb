"""
Edge Function response inspection.

Helpers for reading the JSON returned by Docuflow Edge Functions and for
classifying a function as deployed or not from its HTTP status.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from docuflow.utils.supabase_api import SupabaseAPIError, SupabaseClient

logger = logging.getLogger(__name__)

DEFAULT_FUNCTIONS = ["process-emails", "refresh-tokens", "send-reminders"]

STATE_DEPLOYED = "deployed"
STATE_NOT_DEPLOYED = "not_deployed"
STATE_AUTH_ERROR = "auth_error"
STATE_ERROR = "error"


def parse_json_body(text: str) -> Optional[Any]:
    """Decode a response body, returning None if it is not JSON."""
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


def format_body(text: str) -> str:
    """Pretty-print a JSON body, or return it unchanged."""
    body = parse_json_body(text)
    if body is None:
        return text
    return json.dumps(body, indent=2)


def get_error_details(body: Any) -> Optional[Any]:
    """
    Return account_results[0].errorDetails.

    A value of null or false counts as absent, so the result is None
    in those cases.
    """
    if not isinstance(body, dict):
        return None

    results = body.get("account_results")
    if not isinstance(results, list) or not results:
        return None

    first = results[0]
    if not isinstance(first, dict):
        return None

    details = first.get("errorDetails")
    if details is None or details is False:
        return None
    return details


def get_error_count(body: Any) -> int:
    """Return the top-level `errors` count, defaulting to 0."""
    if not isinstance(body, dict):
        return 0

    errors = body.get("errors")
    if errors is None or errors is False:
        return 0
    try:
        return int(errors)
    except (TypeError, ValueError):
        logger.warning(f"Unexpected errors value: {errors!r}")
        return 0


def format_detail(detail: Any) -> str:
    """Format one errorDetails entry for display."""
    if isinstance(detail, str):
        return detail
    return json.dumps(detail)


def iter_error_details(details: Any) -> list[str]:
    """Flatten errorDetails into printable lines."""
    if isinstance(details, list):
        return [format_detail(d) for d in details]
    if isinstance(details, dict):
        return [format_detail(v) for v in details.values()]
    return [format_detail(details)]


@dataclass
class FunctionCheck:
    """Result of probing one Edge Function."""

    name: str
    status_code: Optional[int]
    text: str = ""

    @property
    def body(self) -> Optional[Any]:
        return parse_json_body(self.text)

    @property
    def state(self) -> str:
        if self.status_code == 200:
            return STATE_DEPLOYED
        if self.status_code == 404:
            return STATE_NOT_DEPLOYED
        if self.status_code == 401:
            return STATE_AUTH_ERROR
        return STATE_ERROR

    @property
    def deployed(self) -> bool:
        return self.state == STATE_DEPLOYED

    def summary(self) -> str:
        """One-line description of the response for the operator."""
        body = self.body
        if self.deployed:
            if isinstance(body, dict):
                for key in ("message", "success"):
                    value = body.get(key)
                    if value is not None and value is not False:
                        return value if isinstance(value, str) else json.dumps(value)
                return "OK"
            return self.text[:100] or "OK"
        if self.state == STATE_NOT_DEPLOYED:
            return "Function not found (404)"
        if self.state == STATE_AUTH_ERROR:
            return "Check your service role key"
        return self.text[:200]


def check_function(client: SupabaseClient, name: str) -> FunctionCheck:
    """
    POST an empty body to a function and record the response.

    Transport failures are recorded with status_code None.
    """
    try:
        response: requests.Response = client.invoke_function(name)
    except SupabaseAPIError as e:
        logger.debug(f"{name}: {e}")
        return FunctionCheck(name=name, status_code=None, text=str(e))

    return FunctionCheck(name=name, status_code=response.status_code, text=response.text)
