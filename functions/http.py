# functions/http.py
import json
from typing import Any, Dict

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Content-Type": "application/json",
}

LISTING_HEADERS = {
    **CORS_HEADERS,
    "Cache-Control": "public, max-age=60, s-maxage=60",
}

SUBMIT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def respond(status: int, headers: Dict[str, str], body: Any = None) -> Dict[str, Any]:
    """Proxy-integration response. A None body is sent as an empty string."""
    return {
        "statusCode": status,
        "headers": dict(headers),
        "body": "" if body is None else json.dumps(body),
    }


def method_of(event: Dict[str, Any]) -> str:
    method = event.get("httpMethod")
    if not method:
        # HTTP API (payload v2) events nest the method under requestContext
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method", "")
    return str(method).upper()
