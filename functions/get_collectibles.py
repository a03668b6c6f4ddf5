# functions/get_collectibles.py
from typing import Any, Dict

from core.logger import get_logger
from fetchers import VARIANTS

from .http import LISTING_HEADERS, respond
from .listing import handle_listing

logger = get_logger(__name__)


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    try:
        return handle_listing(event, VARIANTS["collectibles"])
    except Exception as e:
        logger.exception("Unhandled error in get-collectibles: %s", e)
        return respond(500, LISTING_HEADERS, {"error": "Server error"})
