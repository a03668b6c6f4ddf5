# functions/listing.py
from typing import Any, Dict

from core.listing import build_display_item, find_item, with_images
from core.logger import get_logger
from fetchers import ListingVariant
from fetchers import notion

from .http import LISTING_HEADERS, method_of, respond

logger = get_logger(__name__)


def handle_listing(event: Dict[str, Any], variant: ListingVariant) -> Dict[str, Any]:
    headers = LISTING_HEADERS

    if method_of(event) == "OPTIONS":
        return respond(200, headers)

    try:
        pages = notion.query_database(variant.database_id, status=variant.status)
    except notion.NotionError as e:
        logger.error("Notion API error (%s): %s", variant.name, e)
        return respond(500, headers, {"error": variant.error_message, "details": str(e)})

    items = [build_display_item(page, variant.fields) for page in pages]

    params = event.get("queryStringParameters") or {}
    item_id = params.get("id")
    if item_id:
        # direct links skip the image filter
        item = find_item(items, item_id)
        if item is None:
            logger.info("%s id=%s not found", variant.name, item_id)
            return respond(404, headers, {"error": variant.not_found_message})
        return respond(200, headers, item.to_dict())

    if variant.require_images:
        items = with_images(items)

    logger.info("Returning %d %s items", len(items), variant.name)
    return respond(200, headers, [it.to_dict() for it in items])
