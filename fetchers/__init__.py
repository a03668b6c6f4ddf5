# fetchers/__init__.py
import os
from dataclasses import dataclass
from typing import Optional

from core.listing import ListingFields


@dataclass(frozen=True)
class ListingVariant:
    name: str
    database_id: str
    fields: ListingFields
    status: Optional[str] = None
    require_images: bool = False
    not_found_message: str = "Item not found"
    error_message: str = "Failed to fetch items"


VARIANTS = {
    "inventory": ListingVariant(
        name="inventory",
        database_id=os.getenv("NOTION_DATABASE_ID", "").strip(),
        fields=ListingFields(),
        status="Available",
        require_images=True,
        not_found_message="Watch not found",
        error_message="Failed to fetch inventory",
    ),
    "collectibles": ListingVariant(
        name="collectibles",
        database_id=os.getenv("NOTION_COLLECTIBLES_DATABASE_ID", "").strip(),
        fields=ListingFields(
            name="Piece",
            material="Case Material",
            extra="Bracelet/Strap",
        ),
        not_found_message="Piece not found",
        error_message="Failed to fetch collectibles",
    ),
}
